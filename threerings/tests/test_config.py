import pytest

from threerings.config import (
    COLOR_SWATCHES,
    Configuration,
    control_specs,
    default_configuration,
    parse_hex_color,
    to_hex_color,
)


def test_parse_hex_color():
    assert parse_hex_color("#FC5800") == (252, 88, 0)
    assert parse_hex_color("ffffff") == (255, 255, 255)
    assert to_hex_color((252, 88, 0)) == "#FC5800"


@pytest.mark.parametrize("value", ["#FC58", "#GGGGGG", "", "#FC58001"])
def test_parse_hex_color_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_hex_color(value)


def test_control_specs_for_800_canvas():
    specs = {spec.name: spec for spec in control_specs(800)}
    assert specs["minSize"].minimum == 4
    assert specs["minSize"].maximum == 40
    assert specs["minSize"].default == 18
    assert specs["maxSize"].step == 5
    assert specs["maxSize"].default == 70
    assert specs["orbit"].minimum == pytest.approx(80)
    assert specs["orbit"].maximum == pytest.approx(400)
    assert specs["orbit"].default == pytest.approx(304)
    assert specs["ringRatioPercent"].default == 58


def test_default_configuration():
    config = default_configuration(800)
    assert config.min_size == 18
    assert config.max_size == 70
    assert config.orbit == pytest.approx(304)
    assert config.ring_ratio == pytest.approx(0.58)
    assert config.ring_ratio_percent == 58
    assert config.show_inner_ring is True
    assert config.active_color_hex == COLOR_SWATCHES[1]


def test_derived_radii():
    config = Configuration(min_size=10, max_size=50, orbit=200, ring_ratio=0.5)
    assert config.middle_ring_radius == 100
    assert config.inner_ring_radius == 50


def test_writes_are_not_validated():
    config = default_configuration(800)
    config.min_size = 500
    config.set_ring_ratio_percent(150)
    assert config.min_size == 500
    assert config.ring_ratio == 1.5


def test_copy_is_independent():
    config = default_configuration(800)
    snapshot = config.copy()
    assert snapshot == config
    config.orbit = 100
    config.set_active_color_hex("#FFFFFF")
    assert snapshot.orbit == pytest.approx(304)
    assert snapshot.active_color == (252, 88, 0)
    assert snapshot != config

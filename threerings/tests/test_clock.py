from datetime import datetime

from threerings.clock import TimeSample, sample_time


def test_sample_time_folds_hour():
    sample = sample_time(datetime(2024, 5, 1, 15, 30, 7))
    assert sample.hour12 == 3
    assert sample.hour24 == 15
    assert sample.minute == 30
    assert sample.second == 7


def test_midnight_and_noon_share_a_marker():
    assert TimeSample.from_hms(0, 0, 0).hour12 == 0
    assert TimeSample.from_hms(12, 0, 0).hour12 == 0


def test_display_hour_falls_back_to_hour12():
    assert TimeSample(4, 5, 6).display_hour == 4
    assert TimeSample.from_hms(16, 5, 6).display_hour == 16


def test_sample_time_without_argument_is_in_range():
    sample = sample_time()
    assert 0 <= sample.hour12 < 12
    assert 0 <= sample.minute < 60
    assert 0 <= sample.second < 60

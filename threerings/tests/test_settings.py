from threerings.settings import load_settings


def test_defaults(monkeypatch):
    for name in ("THREE_RINGS_CANVAS_SIZE", "THREE_RINGS_CORS_ORIGINS", "THREE_RINGS_DEBUG", "THREE_RINGS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.canvas_size == 800
    assert settings.cors_origins == ["http://localhost:5173"]
    assert settings.debug is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("THREE_RINGS_CANVAS_SIZE", "1024")
    monkeypatch.setenv("THREE_RINGS_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("THREE_RINGS_DEBUG", "yes")
    settings = load_settings()
    assert settings.canvas_size == 1024
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.debug is True
    assert settings.log_level == "DEBUG"


def test_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("THREE_RINGS_CANVAS_SIZE", "huge")
    monkeypatch.setenv("THREE_RINGS_DEBUG", "maybe")
    settings = load_settings()
    assert settings.canvas_size == 800
    assert settings.debug is False

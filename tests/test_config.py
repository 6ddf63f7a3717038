from notes_backend.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("NOTES_API_URL", "LOG_LEVEL", "SEED_SAMPLE_NOTES", "ALLOWED_ORIGINS", "ALLOWED_ORIGIN_REGEX"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.api_url == "http://localhost"
    assert settings.log_level == "INFO"
    assert settings.seed_sample_notes is True
    assert settings.allowed_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]
    assert settings.allowed_origin_regex is None


def test_from_environment(monkeypatch):
    monkeypatch.setenv("NOTES_API_URL", "https://notes.example.com")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SEED_SAMPLE_NOTES", "false")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, ,https://b.example")
    settings = get_settings()
    assert settings.api_url == "https://notes.example.com"
    assert settings.log_level == "DEBUG"
    assert settings.seed_sample_notes is False
    assert settings.allowed_origins == ["https://a.example", "https://b.example"]


def test_blank_api_url_uses_placeholder(monkeypatch):
    monkeypatch.setenv("NOTES_API_URL", "   ")
    assert get_settings().api_url == "http://localhost"


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert get_settings().log_level == "INFO"


def test_explicit_log_level_is_normalized():
    assert Settings(log_level=" warning ").log_level == "WARNING"
    assert Settings(log_level="nonsense").log_level == "INFO"

import pytest

from config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("MIN_TOKEN_LEN", "JD_TOP_K", "RESUME_TOP_K", "CORS_ORIGINS", "LOG_LEVEL", "PORT"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.min_token_len == 2
    assert s.jd_top_k == 200
    assert s.resume_top_k == 400
    assert s.cors_origins == ("*",)
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MIN_TOKEN_LEN", "3")
    monkeypatch.setenv("JD_TOP_K", "50")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.min_token_len == 3
    assert s.jd_top_k == 50
    assert s.cors_origins == ("https://a.example", "https://b.example")
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("name", ["MIN_TOKEN_LEN", "JD_TOP_K", "RESUME_TOP_K", "PORT"])
@pytest.mark.parametrize("value", ["0", "-2", "two"])
def test_invalid_integer_settings(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()


def test_settings_are_frozen():
    s = Settings()
    with pytest.raises(Exception):
        s.jd_top_k = 10

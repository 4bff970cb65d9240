import pytest

from embedgen.config import DEFAULT_CORS_RELAY, DEFAULT_MODEL, load_settings


def test_defaults_without_environment():
    settings = load_settings(dotenv=False)

    assert settings.model_name == DEFAULT_MODEL
    assert settings.provider == "placeholder"
    assert settings.cors_relay == DEFAULT_CORS_RELAY
    assert settings.fetch_timeout == 15.0
    assert settings.preview_size == 5


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EMBEDGEN_PROVIDER", "sentence-transformers")
    monkeypatch.setenv("EMBEDGEN_CORS_RELAY", "")
    monkeypatch.setenv("EMBEDGEN_FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("EMBEDGEN_MAX_UPLOAD_BYTES", "1024")

    settings = load_settings(dotenv=False)

    assert settings.provider == "sentence-transformers"
    assert settings.cors_relay == ""
    assert settings.fetch_timeout == 2.5
    assert settings.max_upload_bytes == 1024


@pytest.mark.parametrize("value", ["fast", "0", "-1"])
def test_invalid_timeout_names_the_variable(monkeypatch, value):
    monkeypatch.setenv("EMBEDGEN_FETCH_TIMEOUT", value)

    with pytest.raises(ValueError, match="EMBEDGEN_FETCH_TIMEOUT"):
        load_settings(dotenv=False)

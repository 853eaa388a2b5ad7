"""Environment-driven configuration."""

from config import DEFAULT_TYPHOON_URL, load_config, validate_config


def test_defaults(monkeypatch):
    for name in ("GOOGLE_CREDENTIALS_FILE", "GOOGLE_TOKEN_FILE", "TYPHOON_API_KEY",
                 "TYPHOON_API_URL", "TYPHOON_MODEL", "TYPHOON_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.google.credentials_file == "credentials.json"
    assert config.google.token_file == "token.json"
    assert config.typhoon.api_url == DEFAULT_TYPHOON_URL
    assert config.typhoon.model == "typhoon-v2.1-12b-instruct"
    assert config.typhoon.timeout is None
    assert config.logging.level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TYPHOON_API_KEY", "key")
    monkeypatch.setenv("TYPHOON_MODEL", "typhoon-v2.5-30b-a3b-instruct")
    monkeypatch.setenv("TYPHOON_TIMEOUT", "90")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = load_config()

    assert config.typhoon.api_key == "key"
    assert config.typhoon.model == "typhoon-v2.5-30b-a3b-instruct"
    assert config.typhoon.timeout == 90.0
    assert config.logging.level == "DEBUG"


def test_validate_reports_missing_pieces(monkeypatch, tmp_path):
    monkeypatch.setenv("GOOGLE_CREDENTIALS_FILE", str(tmp_path / "credentials.json"))
    monkeypatch.setenv("GOOGLE_TOKEN_FILE", str(tmp_path / "token.json"))
    monkeypatch.setenv("TYPHOON_API_KEY", "")
    monkeypatch.delenv("TYPHOON_TIMEOUT", raising=False)

    errors = validate_config(load_config())

    assert len(errors) == 2
    assert "TYPHOON_API_KEY" in errors[1]


def test_validate_accepts_saved_token(monkeypatch, tmp_path):
    (tmp_path / "token.json").write_text("{}")
    monkeypatch.setenv("GOOGLE_TOKEN_FILE", str(tmp_path / "token.json"))
    monkeypatch.setenv("TYPHOON_API_KEY", "key")
    monkeypatch.delenv("TYPHOON_TIMEOUT", raising=False)

    assert validate_config(load_config()) == []


def test_non_numeric_timeout_is_reported_not_raised(monkeypatch, tmp_path):
    (tmp_path / "token.json").write_text("{}")
    monkeypatch.setenv("GOOGLE_TOKEN_FILE", str(tmp_path / "token.json"))
    monkeypatch.setenv("TYPHOON_API_KEY", "key")
    monkeypatch.setenv("TYPHOON_TIMEOUT", "soon")

    config = load_config()

    assert config.typhoon.timeout is None
    errors = validate_config(config)
    assert len(errors) == 1
    assert "TYPHOON_TIMEOUT" in errors[0]
    assert "'soon'" in errors[0]

"""Settings loading."""

import pytest
from pydantic import ValidationError

from openpayments.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("STRICT_DECODING", "VALIDATE_ON_PARSE", "XML_PRETTY_PRINT", "LOG_LEVEL"):
        monkeypatch.delenv(f"OPENPAYMENTS_{name}", raising=False)
    settings = Settings(_env_file=None)
    assert settings.xml_pretty_print is True
    assert settings.xml_declaration is True
    assert settings.xml_encoding == "UTF-8"
    assert settings.strict_decoding is False
    assert settings.validate_on_parse is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENPAYMENTS_STRICT_DECODING", "true")
    monkeypatch.setenv("openpayments_log_level", "DEBUG")
    settings = get_settings()
    assert settings.strict_decoding is True
    assert settings.log_level == "DEBUG"


def test_cached():
    assert get_settings() is get_settings()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("OPENPAYMENTS_LOG_LEVEL", "TRACE")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

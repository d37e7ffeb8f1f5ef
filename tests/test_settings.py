import pytest
from pydantic import ValidationError

from verdict.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.verbose is False
    assert settings.diagnostic_body_limit == 4096


def test_env_prefix(monkeypatch) -> None:
    monkeypatch.setenv("VERDICT_VERBOSE", "true")
    monkeypatch.setenv("VERDICT_LOG_LEVEL", " debug ")

    settings = Settings(_env_file=None)
    assert settings.verbose is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("VERDICT_LOG_LEVEL", "chatty"),
        ("VERDICT_DIAGNOSTIC_BODY_LIMIT", "0"),
        ("VERDICT_HTTPX_READ_TIMEOUT", "-1"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)

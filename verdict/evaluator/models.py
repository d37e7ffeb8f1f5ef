"""Rule configuration and evaluation models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from verdict.evaluator.templates import StatusTemplate
from verdict.exceptions import ConfigurationError, OutcomeError

DEFAULT_UNKNOWN_MESSAGE = "unknown error"

# Rule groups accept snake_case, camelCase and the legacy short keys
# (fail/success, body/status, text/rejectComment).
_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")


class BodyFailRule(BaseModel):
    """Rejects the response when ``match_text`` occurs in the body."""

    model_config = _MODEL_CONFIG

    match_text: str = Field(validation_alias=AliasChoices("match_text", "matchText", "text"))
    message: str = Field(validation_alias=AliasChoices("message", "rejectComment"))


class StatusFailRule(BaseModel):
    """Rejects the response when its status equals ``status_code``."""

    model_config = _MODEL_CONFIG

    status_code: int = Field(validation_alias=AliasChoices("status_code", "statusCode", "status"))
    message: str = Field(validation_alias=AliasChoices("message", "rejectComment"))


class FailRules(BaseModel):
    model_config = _MODEL_CONFIG

    body_rules: tuple[BodyFailRule, ...] = Field(
        default=(), validation_alias=AliasChoices("body_rules", "bodyRules", "body")
    )
    status_rules: tuple[StatusFailRule, ...] = Field(
        default=(), validation_alias=AliasChoices("status_rules", "statusRules", "status")
    )


class SuccessRules(BaseModel):
    """Criteria a response must meet to be accepted.

    Empty token or code lists disable the corresponding check.
    """

    model_config = _MODEL_CONFIG

    body_success_tokens: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("body_success_tokens", "bodySuccessTokens", "body"),
    )
    status_success_codes: tuple[int, ...] = Field(
        default=(),
        validation_alias=AliasChoices("status_success_codes", "statusSuccessCodes", "status"),
    )
    unknown_message: str = Field(
        default=DEFAULT_UNKNOWN_MESSAGE,
        validation_alias=AliasChoices("unknown_message", "unknownMessage", "rejectComment"),
    )

    @field_validator("body_success_tokens", mode="before")
    @classmethod
    def wrap_single_token(cls, v: Any) -> Any:
        if isinstance(v, str):
            return (v,)
        return v

    @property
    def unknown_template(self) -> StatusTemplate:
        return StatusTemplate.parse(self.unknown_message)


class RuleConfiguration(BaseModel):
    """Static rule configuration owned by an OutcomeEvaluator.

    Example:
        >>> RuleConfiguration.from_mapping({
        ...     "prefix": "LOGIN_REQ",
        ...     "fail": {"body": [{"text": "password-error", "rejectComment": "Username is incorrect."}]},
        ...     "success": {"status": [200], "rejectComment": "unknown error"},
        ... })
    """

    model_config = _MODEL_CONFIG

    prefix: str = ""
    verbose: Optional[bool] = None
    fail_rules: Optional[FailRules] = Field(
        default=None, validation_alias=AliasChoices("fail_rules", "failRules", "fail")
    )
    success_rules: Optional[SuccessRules] = Field(
        default=None, validation_alias=AliasChoices("success_rules", "successRules", "success")
    )

    @field_validator("prefix", mode="before")
    @classmethod
    def default_prefix(cls, v: Any) -> Any:
        return "" if v is None else v

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _configuration_error(e) from e

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RuleConfiguration:
        """Validate a plain mapping, raising ConfigurationError on a bad shape."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise _configuration_error(e) from e


def _configuration_error(e: ValidationError) -> ConfigurationError:
    return ConfigurationError(
        f"Invalid rule configuration: {e.error_count()} error(s)\n{e}",
        errors=e.errors(),
    )


def load_configuration(config: RuleConfiguration | Mapping[str, Any]) -> RuleConfiguration:
    if isinstance(config, RuleConfiguration):
        return config
    if isinstance(config, Mapping):
        return RuleConfiguration.from_mapping(config)
    raise ConfigurationError(
        f"Rule configuration must be a mapping or RuleConfiguration, got {type(config).__name__}"
    )


@dataclass(frozen=True)
class EvaluationInput:
    """Per-call response triple, plus the raw response object when known."""

    transport_error: Any = None
    status_code: Optional[int] = None
    body: Optional[str] = None
    response: Any = None

    @property
    def error_text(self) -> Optional[str]:
        """Transport error as text, or None when nothing was reported."""
        if self.transport_error is None:
            return None
        text = str(self.transport_error)
        if not text and isinstance(self.transport_error, BaseException):
            return type(self.transport_error).__name__
        return text or None

    @property
    def body_text(self) -> str:
        return self.body if self.body is not None else ""


@dataclass(frozen=True)
class OutcomeResult:
    """Evaluation result."""
    accepted: bool
    error: Optional[OutcomeError] = None

    @property
    def tag(self) -> Optional[str]:
        return self.error.tag if self.error is not None else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

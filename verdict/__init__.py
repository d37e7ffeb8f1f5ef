"""Declarative success/failure rules for completed HTTP responses."""

from verdict.evaluator import OutcomeEvaluator, OutcomeResult, RuleConfiguration, check
from verdict.exceptions import (
    ConfigurationError,
    DroppedResponseError,
    FailBodyMatchError,
    FailStatusMatchError,
    OutcomeError,
    SuccessBodyMismatchError,
    SuccessStatusMismatchError,
    TransportError,
)

__all__ = [
    "OutcomeEvaluator",
    "OutcomeResult",
    "RuleConfiguration",
    "check",
    "ConfigurationError",
    "DroppedResponseError",
    "FailBodyMatchError",
    "FailStatusMatchError",
    "OutcomeError",
    "SuccessBodyMismatchError",
    "SuccessStatusMismatchError",
    "TransportError",
]

"""Outcome evaluator package.

- models.py: Rule configuration and result models
- templates.py: ``%status%`` message templates
- service.py: OutcomeEvaluator
"""

from verdict.evaluator.models import (
    BodyFailRule,
    EvaluationInput,
    FailRules,
    OutcomeResult,
    RuleConfiguration,
    StatusFailRule,
    SuccessRules,
    load_configuration,
)
from verdict.evaluator.templates import StatusTemplate
from verdict.evaluator.service import OutcomeEvaluator, check

__all__ = [
    "BodyFailRule",
    "EvaluationInput",
    "FailRules",
    "OutcomeResult",
    "RuleConfiguration",
    "StatusFailRule",
    "SuccessRules",
    "load_configuration",
    "StatusTemplate",
    "OutcomeEvaluator",
    "check",
]

"""Shared fixtures for verdict tests."""

import logging

import pytest

from verdict.evaluator import OutcomeEvaluator


LOGIN_RULES = {
    "prefix": "test",
    "fail": {
        "body": [
            {"text": "Incorrect password", "rejectComment": "Password is incorrect."},
            {"text": "Incorrect username", "rejectComment": "Username is incorrect."},
        ],
        "status": [
            {"status": 500, "rejectComment": "HTTP 500 server error, malformed request"},
            {"status": 418, "rejectComment": "HTTP 418 server error"},
        ],
    },
    "success": {
        "status": [200, 201],
        "rejectComment": "Unknown error while logging in (got HTTP %status%, expected HTTP 200)",
        "body": ["SUCCESS", "PASS"],
    },
}


@pytest.fixture
def login_evaluator():
    """Evaluator configured like a typical login request."""
    return OutcomeEvaluator(LOGIN_RULES)


@pytest.fixture(autouse=True)
def restore_verdict_logger():
    """Undo setup_logging() side effects so caplog keeps seeing records."""
    logger = logging.getLogger("verdict")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate

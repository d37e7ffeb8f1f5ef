"""OutcomeEvaluator main class."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from verdict.core.config import settings
from verdict.core.logging import get_log_context, get_logger
from verdict.evaluator.models import (
    EvaluationInput,
    OutcomeResult,
    RuleConfiguration,
    load_configuration,
)
from verdict.exceptions import (
    DroppedResponseError,
    FailBodyMatchError,
    FailStatusMatchError,
    OutcomeError,
    SuccessBodyMismatchError,
    SuccessStatusMismatchError,
    TransportError,
)

logger = get_logger(__name__)

ACCEPTED = OutcomeResult(accepted=True)


class OutcomeEvaluator:
    """Evaluates completed HTTP responses against a static rule configuration.

    The evaluator keeps only its frozen configuration, so one instance may
    be shared by any number of concurrent callers.
    """

    def __init__(self, config: RuleConfiguration | Mapping[str, Any]):
        self.config = load_configuration(config)

    @property
    def prefix(self) -> str:
        return self.config.prefix

    @property
    def verbose(self) -> bool:
        if self.config.verbose is None:
            return settings.verbose
        return self.config.verbose

    def classify(
        self,
        transport_error: Any = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> OutcomeResult:
        """Decide the outcome of a response without raising.

        Checks are made in order:
        1. Dropped response (no status code)
        2. Transport error reported by the HTTP client
        3. Body fail rules, then status fail rules (first match wins)
        4. Success body tokens, then success status codes

        Args:
            transport_error: Error reported by the HTTP client, if any
            status_code: Response status, None when no response arrived
            body: Response body text

        Returns:
            OutcomeResult, carrying the OutcomeError when rejected
        """
        return self._classify(EvaluationInput(transport_error, status_code, body))

    def evaluate(
        self,
        transport_error: Any = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> OutcomeResult:
        """Evaluate a response, raising the classified OutcomeError on rejection.

        Returns:
            The accepted OutcomeResult

        Raises:
            OutcomeError: One of its subclasses, formatted as
                ``[<prefix>][<tag>] <message>``
        """
        return self._evaluate(EvaluationInput(transport_error, status_code, body))

    def evaluate_response(
        self,
        response: Any,
        transport_error: Any = None,
        body: str | None = None,
    ) -> OutcomeResult:
        """Evaluate a response object such as ``httpx.Response``.

        A None response is treated as dropped. The body defaults to
        ``response.text``.
        """
        status_code = getattr(response, "status_code", None) if response is not None else None
        if body is None and response is not None:
            body = getattr(response, "text", None)
        return self._evaluate(EvaluationInput(transport_error, status_code, body, response))

    def response_hook(self, response: httpx.Response) -> None:
        """httpx "response" event hook for synchronous clients."""
        response.read()
        self.evaluate_response(response)

    async def aresponse_hook(self, response: httpx.Response) -> None:
        """httpx "response" event hook for asynchronous clients."""
        await response.aread()
        self.evaluate_response(response)

    def _evaluate(self, call: EvaluationInput) -> OutcomeResult:
        result = self._classify(call)
        if result.accepted:
            return result

        logger.debug(
            f"Response rejected: {result.error}",
            extra=get_log_context(
                prefix=self.prefix,
                tag=result.tag,
                status_code=call.status_code,
                rule_index=getattr(result.error, "rule_index", None),
            ),
        )
        if self.verbose:
            self._emit_diagnostics(result.error, call)
        raise result.error

    def _classify(self, call: EvaluationInput) -> OutcomeResult:
        prefix = self.prefix
        error_text = call.error_text

        if call.status_code is None:
            return self._reject(DroppedResponseError(error_text, prefix=prefix))

        if error_text is not None:
            return self._reject(TransportError(error_text, prefix=prefix))

        body = call.body_text
        status = call.status_code

        fail = self.config.fail_rules
        if fail is not None:
            for i, rule in enumerate(fail.body_rules):
                if rule.match_text in body:
                    return self._reject(FailBodyMatchError(i, rule.message, prefix=prefix))
            for rule in fail.status_rules:
                if status == rule.status_code:
                    return self._reject(
                        FailStatusMatchError(rule.status_code, rule.message, prefix=prefix)
                    )

        success = self.config.success_rules
        if success is not None:
            if success.body_success_tokens and not any(
                token in body for token in success.body_success_tokens
            ):
                return self._reject(
                    SuccessBodyMismatchError(success.unknown_message, prefix=prefix)
                )
            if success.status_success_codes and status not in success.status_success_codes:
                return self._reject(
                    SuccessStatusMismatchError(
                        status, success.unknown_template.render(status), prefix=prefix
                    )
                )

        return ACCEPTED

    @staticmethod
    def _reject(error: OutcomeError) -> OutcomeResult:
        return OutcomeResult(accepted=False, error=error)

    def _emit_diagnostics(self, error: OutcomeError, call: EvaluationInput) -> None:
        """Log the raw error, response and body of a rejected call.

        Never raises; a failure here must not replace the outcome error.
        """
        try:
            label = f"[{self.prefix}][{error.tag}][VERBOSE]"
            body = call.body
            if body is not None and len(body) > settings.diagnostic_body_limit:
                body = body[: settings.diagnostic_body_limit] + "...[truncated]"
            res = call.response if call.response is not None else {"status_code": call.status_code}
            logger.error(
                "%s\n  [ERR] %s\n  [RES] %s\n  [BODY] %s",
                label,
                repr(call.transport_error),
                repr(res),
                repr(body),
                extra=get_log_context(
                    prefix=self.prefix, tag=error.tag, status_code=call.status_code
                ),
            )
        except Exception as e:
            logger.debug(f"Diagnostic dump failed: {e}")


def check(
    config: RuleConfiguration | Mapping[str, Any],
    transport_error: Any = None,
    status_code: int | None = None,
    body: str | None = None,
) -> OutcomeResult:
    """Evaluate a single response against ``config`` (one-shot helper)."""
    return OutcomeEvaluator(config).evaluate(transport_error, status_code, body)

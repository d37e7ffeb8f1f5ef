"""Exceptions raised by the outcome evaluator."""


DROPPED_RESPONSE_MESSAGE = "Server dropped the request or sent a malformed response."


class OutcomeError(Exception):
    """Base class for rejected responses.

    ``str(error)`` is the formatted identifier ``[<prefix>][<tag>] <message>``.
    Subclasses define their classification ``tag``.
    """
    tag: str = "OUTCOME"

    def __init__(self, message: str = "Response rejected", prefix: str = ""):
        self.message = message
        self.prefix = prefix
        super().__init__(self.identifier)

    @property
    def identifier(self) -> str:
        return f"[{self.prefix}][{self.tag}] {self.message}"


class DroppedResponseError(OutcomeError):
    """Raised when no response object reached the caller.

    The identifier keeps the fixed ``[errorHandler]`` form regardless of
    the configured prefix, followed by the transport error on its own line
    when one was reported.
    """
    tag = "errorHandler"

    def __init__(self, transport_error: str | None = None, prefix: str = ""):
        self.transport_error = transport_error
        super().__init__(DROPPED_RESPONSE_MESSAGE, prefix=prefix)

    @property
    def identifier(self) -> str:
        text = f"[{self.tag}] {self.message}"
        if self.transport_error:
            text += f"\n{self.transport_error}"
        return text


class TransportError(OutcomeError):
    """Raised when the HTTP client reported a low-level error.

    The error text is passed through verbatim.
    """
    tag = "TRANSPORT"

    @property
    def identifier(self) -> str:
        return self.message


class FailBodyMatchError(OutcomeError):
    """Raised when the body contains the text of a fail rule."""

    def __init__(self, rule_index: int, message: str, prefix: str = ""):
        self.rule_index = rule_index
        self.tag = f"F_BODY_{rule_index}"
        super().__init__(message, prefix=prefix)


class FailStatusMatchError(OutcomeError):
    """Raised when the status code equals the code of a fail rule."""

    def __init__(self, status_code: int, message: str, prefix: str = ""):
        self.status_code = status_code
        self.tag = f"F_STATUS_{status_code}"
        super().__init__(message, prefix=prefix)


class SuccessBodyMismatchError(OutcomeError):
    """Raised when the body contains none of the success tokens."""
    tag = "S_BODY"


class SuccessStatusMismatchError(OutcomeError):
    """Raised when the status code is not among the success codes."""
    tag = "S_STATUS"

    def __init__(self, status_code: int, message: str, prefix: str = ""):
        self.status_code = status_code
        super().__init__(message, prefix=prefix)


class ConfigurationError(ValueError):
    """Raised when a rule configuration has an unrecognized shape.

    Wraps the underlying pydantic validation error as ``errors``.
    """

    def __init__(self, message: str, errors: list | None = None):
        self.errors = errors or []
        super().__init__(message)

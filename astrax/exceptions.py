"""Exception hierarchy for AstraX services and collaborators."""


class AstraxError(Exception):
    """Base class for all AstraX errors."""


class InvalidArgumentError(AstraxError, ValueError):
    """A required input is missing or has the wrong shape."""


class AuthError(AstraxError):
    """Sign-in failed or the signed-in role may not perform the action."""


class NotFoundError(AstraxError, KeyError):
    """No listing or application exists with the given id."""


class LLMRequestError(AstraxError):
    """Transport-level failure talking to an LLM provider."""

    def __init__(self, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class RateLimitedError(LLMRequestError):
    """Provider answered with a rate-limit class error (HTTP 429)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, retryable=True)

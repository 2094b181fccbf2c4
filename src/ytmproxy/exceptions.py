"""Custom exceptions for ytmproxy.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ytmproxy.models.stream import StrategyAttempt


class ProxyError(Exception):
    """Base exception for ytmproxy.

    Attributes:
        status_code: HTTP status code for API error responses.
        message: Human-readable summary, rendered as the envelope ``error``.
        details: Optional diagnostic text, rendered as ``details``.
    """

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(ProxyError):
    """A required request parameter is missing, empty or unsupported."""

    status_code: int = 400  # Bad Request


class ProviderInitError(ProxyError):
    """The metadata or extraction client failed to initialize.

    Not retried automatically; the next request attempts construction again.
    """

    status_code: int = 500


class ProviderError(ProxyError):
    """An upstream provider call raised.

    Raised by provider adapters in place of library-specific exceptions.
    """

    status_code: int = 500


class ProviderTimeoutError(ProviderError):
    """An upstream provider call exceeded its time budget."""

    status_code: int = 504  # Gateway Timeout


class ExtractionError(ProxyError):
    """Every extraction strategy, including the fallback, was exhausted.

    Attributes:
        primary_reason: Why the primary stream provider produced nothing.
        fallback_reason: Why the fallback dump provider produced nothing.
        attempts: Every strategy call that was made, in order.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        primary_reason: str,
        fallback_reason: str,
        attempts: list[StrategyAttempt] | None = None,
    ) -> None:
        self.primary_reason = primary_reason
        self.fallback_reason = fallback_reason
        self.attempts = list(attempts or [])
        super().__init__(
            message,
            details=f"primary: {primary_reason}; fallback: {fallback_reason}",
        )


class NormalizationFailure(Exception):
    """A raw upstream item could not be normalized.

    Never propagated past the item normalizer: it is converted into a
    degraded item carrying a warning.
    """

"""Stream extraction strategy chain.

Resolves playable formats for a video by trying a bounded, ordered list of
named operations against a primary stream provider, then one fallback
metadata-dump provider. Every provider call is individually guarded; only
exhaustion of all strategies is a failure.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ytmproxy.config import ExtractionConfig
from ytmproxy.exceptions import ExtractionError
from ytmproxy.models.stream import ExtractionResult, NormalizedFormat, StrategyAttempt
from ytmproxy.services.formats import normalize_formats
from ytmproxy.utils.url import is_url, parse_video_id, watch_url

if TYPE_CHECKING:
    from ytmproxy.providers.base import DumpProvider, StreamProvider

logger = logging.getLogger(__name__)

FALLBACK_STRATEGY = "metadata_dump"

# Wrapper records expose their descriptors under one of these fields
_WRAPPER_FIELDS = ("formats", "streams")


def merge_raw_formats(candidate: Any) -> list[Any]:
    """Flatten a provider result into a list of raw descriptors.

    Accepts a single descriptor, a list of descriptors, or a wrapper record
    with a ``formats``/``streams`` list.
    """
    if not candidate:
        return []
    if isinstance(candidate, list | tuple):
        return list(candidate)
    if isinstance(candidate, Mapping):
        for name in _WRAPPER_FIELDS:
            nested = candidate.get(name)
            if isinstance(nested, list):
                return list(nested)
        return [candidate]
    return []


def _reason(error: BaseException) -> str:
    return f"{type(error).__name__}: {error}"


class ExtractionStrategyChain:
    """Bounded strategy enumeration over a primary and a fallback provider.

    The primary provider is asked for each configured strategy name;
    names it does not implement are skipped without being recorded. The
    first strategy that yields at least one usable format ends the chain.
    """

    def __init__(
        self,
        primary: StreamProvider | None,
        fallback: DumpProvider | None,
        config: ExtractionConfig | None = None,
    ) -> None:
        """Initialize the chain.

        Args:
            primary: Provider exposing named strategy operations. May be None
                when no primary provider could be built.
            fallback: Provider returning a full metadata dump for a URL.
            config: Strategy order and provider labels.
        """
        self._primary = primary
        self._fallback = fallback
        self._config = config or ExtractionConfig()

    def extract(self, video_id_or_url: str) -> ExtractionResult:
        """Resolve usable formats for a video ID or URL.

        Args:
            video_id_or_url: Bare video ID or any URL the providers accept.

        Returns:
            ExtractionResult from the first provider that yielded formats.

        Raises:
            ExtractionError: If neither provider yielded a usable format.
        """
        video_id = parse_video_id(video_id_or_url)
        attempts: list[StrategyAttempt] = []

        primary_result = self._run_primary(video_id, attempts)
        if isinstance(primary_result, ExtractionResult):
            return primary_result
        primary_reason = primary_result

        logger.info(
            "Primary extraction failed for %s (%s); trying fallback",
            video_id_or_url,
            primary_reason,
        )
        target = watch_url(video_id) if video_id else video_id_or_url
        fallback_result = self._run_fallback(target, video_id, attempts)
        if isinstance(fallback_result, ExtractionResult):
            return fallback_result

        logger.warning(
            "All extraction strategies failed for %s: primary=%s fallback=%s",
            video_id_or_url,
            primary_reason,
            fallback_result,
        )
        raise ExtractionError(
            "Extraction failed",
            primary_reason=primary_reason,
            fallback_reason=fallback_result,
            attempts=attempts,
        )

    def _run_primary(
        self, video_id: str | None, attempts: list[StrategyAttempt]
    ) -> ExtractionResult | str:
        """Try each primary strategy; return a result or a failure reason."""
        name = self._config.primary_name
        if self._primary is None:
            return "primary provider unavailable"
        if not video_id:
            return "could not determine video id from input"

        info: dict[str, Any] = {}
        last_reason = "provider implements none of the strategies"
        for strategy in self._config.strategies:
            operation = getattr(self._primary, strategy, None)
            if not callable(operation):
                logger.debug("Provider %s lacks strategy %s", name, strategy)
                continue

            try:
                candidate = operation(video_id)
            except Exception as e:
                last_reason = f"{strategy} raised {_reason(e)}"
                logger.debug("Strategy %s failed: %s", strategy, e)
                attempts.append(
                    StrategyAttempt(
                        provider=name, strategy=strategy, ok=False, reason=_reason(e)
                    )
                )
                continue

            formats = normalize_formats(merge_raw_formats(candidate))
            if candidate is not None:
                info[strategy] = candidate
            if not formats:
                last_reason = (
                    f"{strategy} returned nothing"
                    if candidate is None
                    else f"{strategy} returned no usable formats"
                )
                logger.debug("Strategy %s: %s", strategy, last_reason)
                attempts.append(
                    StrategyAttempt(
                        provider=name, strategy=strategy, ok=False, reason=last_reason
                    )
                )
                continue

            logger.debug("Strategy %s returned %d formats", strategy, len(formats))
            attempts.append(
                StrategyAttempt(
                    provider=name,
                    strategy=strategy,
                    ok=True,
                    format_count=len(formats),
                )
            )
            return self._result(name, video_id, info, formats, attempts)

        return last_reason

    def _run_fallback(
        self, target: str, video_id: str | None, attempts: list[StrategyAttempt]
    ) -> ExtractionResult | str:
        """Run the fallback dump provider; return a result or a failure reason."""
        name = self._config.fallback_name
        if self._fallback is None:
            return "fallback provider unavailable"
        if not video_id and not is_url(target):
            return f"not a video id or URL: {target!r}"

        try:
            meta = self._fallback.dump(target)
        except Exception as e:
            attempts.append(
                StrategyAttempt(
                    provider=name,
                    strategy=FALLBACK_STRATEGY,
                    ok=False,
                    reason=_reason(e),
                )
            )
            return f"{name} failed: {_reason(e)}"

        formats = normalize_formats(merge_raw_formats(meta))
        if not formats:
            reason = f"{name} returned no usable formats"
            attempts.append(
                StrategyAttempt(
                    provider=name, strategy=FALLBACK_STRATEGY, ok=False, reason=reason
                )
            )
            return reason

        attempts.append(
            StrategyAttempt(
                provider=name,
                strategy=FALLBACK_STRATEGY,
                ok=True,
                format_count=len(formats),
            )
        )
        return self._result(
            name, video_id, {FALLBACK_STRATEGY: meta}, formats, attempts
        )

    @staticmethod
    def _result(
        extractor: str,
        video_id: str | None,
        info: dict[str, Any],
        formats: list[NormalizedFormat],
        attempts: list[StrategyAttempt],
    ) -> ExtractionResult:
        return ExtractionResult(
            extractor=extractor,
            video_id=video_id,
            info=info,
            formats=formats,
            attempts=list(attempts),
        )

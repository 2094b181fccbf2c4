"""Models for playable stream candidates and extraction results."""

from typing import Any

from pydantic import Field

from ytmproxy.models.item import CanonicalModel

__all__ = ["ExtractionResult", "NormalizedFormat", "StrategyAttempt"]


class NormalizedFormat(CanonicalModel):
    """One playable stream candidate.

    A format is only usable when ``url`` resolved; unusable formats are
    discarded before results leave the extraction chain.
    """

    url: str | None = None
    mime_type: str | None = None
    bitrate: int | float | None = None
    audio_bitrate: int | float | None = None
    quality_label: str | None = None
    is_audio_only: bool = False
    raw: Any = None


class StrategyAttempt(CanonicalModel):
    """Record of one provider call made by the extraction chain."""

    provider: str
    strategy: str
    ok: bool
    format_count: int = 0
    reason: str | None = None


class ExtractionResult(CanonicalModel):
    """Outcome of a successful extraction.

    Attributes:
        extractor: Label of the provider that produced the formats.
        video_id: Resolved video ID, if one could be parsed from the input.
        info: Raw provider results keyed by strategy name.
        formats: Usable, URL-deduplicated formats in first-seen order.
        attempts: Every strategy call made, successful or not.
    """

    extractor: str
    video_id: str | None = None
    info: dict[str, Any] = Field(default_factory=dict)
    formats: list[NormalizedFormat] = Field(default_factory=list)
    attempts: list[StrategyAttempt] = Field(default_factory=list)

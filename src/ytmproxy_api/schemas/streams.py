"""Stream extraction API schemas."""

from pydantic import Field, computed_field
from ytmproxy.models import NormalizedFormat, StrategyAttempt
from ytmproxy.models.item import CanonicalModel


class ExtractResponse(CanonicalModel):
    """Playable formats resolved for one video.

    Attributes:
        extractor: Label of the provider that produced the formats.
        video_id: Resolved video ID, or the raw input when none was parsed.
        formats: Usable formats, deduplicated by URL.
        best: Best audio candidate among ``formats``.
        info_summary: Keys of the raw provider results that were collected.
        attempts: Every strategy call made, in order.
    """

    extractor: str
    video_id: str
    formats: list[NormalizedFormat] = Field(default_factory=list)
    best: NormalizedFormat | None = None
    info_summary: list[str] = Field(default_factory=list)
    attempts: list[StrategyAttempt] = Field(default_factory=list)

    @computed_field(alias="availableFormatsCount")  # type: ignore[prop-decorator]
    @property
    def available_formats_count(self) -> int:
        return len(self.formats)

"""Normalized representation of a browsable music entity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from ytmproxy.models.enums import ItemType
from ytmproxy.utils.url import embed_url, watch_url

__all__ = ["CanonicalModel", "NormalizedItem"]


class CanonicalModel(BaseModel):
    """Base model for canonical output objects.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class NormalizedItem(CanonicalModel):
    """A song, album, artist, playlist or suggestion in canonical form.

    ``watch_url`` and ``embed_url`` are derived from ``video_id`` so they can
    never disagree with it.
    """

    type: ItemType = ItemType.UNKNOWN
    id: str = ""
    title: str = ""
    artists: list[str] = Field(default_factory=list)
    thumbnails: list[Any] = Field(default_factory=list)
    duration: int | float | None = None
    video_id: str | None = None
    raw: Any = None
    warning: str | None = None

    @computed_field(alias="watchUrl")  # type: ignore[prop-decorator]
    @property
    def watch_url(self) -> str | None:
        return watch_url(self.video_id) if self.video_id else None

    @computed_field(alias="embedUrl")  # type: ignore[prop-decorator]
    @property
    def embed_url(self) -> str | None:
        return embed_url(self.video_id) if self.video_id else None

    @property
    def is_degraded(self) -> bool:
        """True when normalization failed and this is a best-effort substitute."""
        return self.warning is not None

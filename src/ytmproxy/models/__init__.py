"""Data models for ytmproxy.

Public API:
    NormalizedItem - Canonical song/album/artist/playlist/suggestion
    NormalizedFormat - Canonical stream candidate
    ExtractionResult - Formats resolved by the extraction chain
    ItemType - Closed set of item types
"""

from ytmproxy.models.enums import ItemType
from ytmproxy.models.item import NormalizedItem
from ytmproxy.models.stream import ExtractionResult, NormalizedFormat, StrategyAttempt

__all__ = [
    "ExtractionResult",
    "ItemType",
    "NormalizedFormat",
    "NormalizedItem",
    "StrategyAttempt",
]

"""Normalization and extraction services for ytmproxy.

Public API:
    normalize_item / normalize_suggestion - One raw item to NormalizedItem
    extract_items - Raw search/browse response to NormalizedItem list
    extract_suggestions - Raw suggestion response to NormalizedItem list
    resolve_search_filter - Search ``type`` parameter to provider filter
    normalize_format / normalize_formats / pick_best_audio - Stream formats
    ExtractionStrategyChain - Primary strategies plus fallback extraction
"""

from ytmproxy.services.buckets import (
    ALBUM_BUCKETS,
    ARTIST_BUCKETS,
    PLAYLIST_BUCKETS,
    RECOMMENDATION_BUCKETS,
    TRENDING_BUCKETS,
    bucket_type_hint,
    extract_items,
    extract_suggestions,
    song_type_hint,
)
from ytmproxy.services.extraction import ExtractionStrategyChain, merge_raw_formats
from ytmproxy.services.formats import (
    normalize_format,
    normalize_formats,
    pick_best_audio,
)
from ytmproxy.services.normalizer import (
    extract_lyrics_text,
    normalize_item,
    normalize_suggestion,
)
from ytmproxy.services.search import SEARCH_FILTERS, resolve_search_filter

__all__ = [
    "ALBUM_BUCKETS",
    "ARTIST_BUCKETS",
    "PLAYLIST_BUCKETS",
    "RECOMMENDATION_BUCKETS",
    "SEARCH_FILTERS",
    "TRENDING_BUCKETS",
    "ExtractionStrategyChain",
    "bucket_type_hint",
    "extract_items",
    "extract_lyrics_text",
    "extract_suggestions",
    "merge_raw_formats",
    "normalize_format",
    "normalize_formats",
    "normalize_item",
    "normalize_suggestion",
    "pick_best_audio",
    "resolve_search_filter",
    "song_type_hint",
]

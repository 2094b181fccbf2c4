"""Utility functions for ytmproxy."""

from ytmproxy.utils.coercion import (
    coerce_to_list,
    extract_display_name,
    first_present,
)
from ytmproxy.utils.url import parse_video_id, video_id_from_url

__all__ = [
    "coerce_to_list",
    "extract_display_name",
    "first_present",
    "parse_video_id",
    "video_id_from_url",
]

"""Shape coercion for values of unknown shape.

These helpers know nothing about music. They turn whatever a provider
returned into predictable lists, strings and numbers, and never raise.
"""

from collections.abc import Iterable, Mapping
from typing import Any

# Field names tried, in order, when a record stands in for a display name
DISPLAY_NAME_FIELDS = ("name", "title", "artist")


def is_present(value: Any) -> bool:
    """Check if a field value counts as supplied.

    None, empty strings, empty collections and False are absent. Zero is
    absent too: providers use it as a placeholder for unknown numbers.
    """
    return bool(value)


def first_present(record: Mapping[str, Any], fields: Iterable[str]) -> Any:
    """Return the first present value among ``fields`` of ``record``.

    Returns None if none of the fields is present.
    """
    for name in fields:
        value = record.get(name)
        if is_present(value):
            return value
    return None


def coerce_to_list(value: Any) -> list[Any]:
    """Coerce an arbitrary value into a list.

    - None or empty string -> []
    - list or tuple -> itself, as a list
    - record with a string ``name`` -> [record]
    - any other record -> its present values
    - any other scalar -> [value]
    """
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Mapping):
        if isinstance(value.get("name"), str) and value["name"]:
            return [value]
        return [v for v in value.values() if is_present(v)]
    return [value]


def extract_display_name(entry: Any) -> str | None:
    """Pull a display name out of an artist-like entry.

    Strings are returned as-is; records yield their first present string among
    name, title and artist. Anything else yields None.
    """
    if isinstance(entry, str):
        return entry or None
    if isinstance(entry, Mapping):
        for name in DISPLAY_NAME_FIELDS:
            value = entry.get(name)
            if isinstance(value, str) and value:
                return value
    return None


def as_text(value: Any) -> str | None:
    """Render a scalar as text, or None if it is absent or a container."""
    if not is_present(value) or isinstance(value, Mapping | list | tuple):
        return None
    return str(value)


def as_number(value: Any) -> int | float | None:
    """Best-effort numeric conversion.

    Numbers pass through (bools excluded); numeric strings are parsed.
    Returns None for anything else.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return None
    return None


def parse_duration(value: Any) -> int | float | None:
    """Parse a duration into seconds.

    Accepts numbers, numeric strings and "m:ss" / "h:mm:ss" clock strings.
    Returns None for unparseable input.
    """
    if isinstance(value, str) and ":" in value:
        parts = value.strip().split(":")
        if len(parts) not in (2, 3):
            return None
        try:
            numbers = [int(p) for p in parts]
        except ValueError:
            return None
        seconds = 0
        for number in numbers:
            seconds = seconds * 60 + number
        return seconds
    return as_number(value)

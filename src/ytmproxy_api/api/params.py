"""Query parameter helpers.

Endpoints accept several spellings for the same parameter; the first one
present wins.
"""

from ytmproxy.config import Limit
from ytmproxy.exceptions import ValidationError


def first_present(*values: str | None) -> str | None:
    """Return the first non-blank value, stripped."""
    for value in values:
        if value is not None and value.strip():
            return value.strip()
    return None


def require(*values: str | None, message: str) -> str:
    """Return the first non-blank value.

    Raises:
        ValidationError: If every value is missing or blank.
    """
    value = first_present(*values)
    if value is None:
        raise ValidationError(message)
    return value


def parse_limit(raw: str | None, limit: Limit) -> int:
    """Parse a ``limit`` parameter leniently.

    Non-numeric and non-positive values fall back to the endpoint default;
    values above the ceiling are clamped to it.
    """
    try:
        requested = int(raw) if raw is not None else None
    except ValueError:
        requested = None
    return limit.clamp(requested)

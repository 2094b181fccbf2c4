"""Tests for query parameter helpers."""

import pytest
from ytmproxy.config import Limit
from ytmproxy.exceptions import ValidationError
from ytmproxy_api.api.params import first_present, parse_limit, require

SEARCH_LIMIT = Limit(default=25, ceiling=50)


class TestFirstPresent:
    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ((None, "a"), "a"),
            (("", "  ", "b"), "b"),
            ((" padded ",), "padded"),
            (("first", "second"), "first"),
            ((None, "", "   "), None),
            ((), None),
        ],
    )
    def test_first_non_blank(
        self, values: tuple[str | None, ...], expected: str | None
    ) -> None:
        assert first_present(*values) == expected


class TestRequire:
    def test_returns_value(self) -> None:
        assert require(None, "x", message="missing") == "x"

    def test_raises_with_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require(None, " ", message='Query parameter "q" is required.')
        assert exc_info.value.message == 'Query parameter "q" is required.'
        assert exc_info.value.status_code == 400


class TestParseLimit:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, 25),
            ("10", 10),
            ("50", 50),
            ("9999", 50),
            ("0", 25),
            ("-5", 25),
            ("abc", 25),
            ("", 25),
            ("2.5", 25),
        ],
    )
    def test_parse_limit(self, raw: str | None, expected: int) -> None:
        assert parse_limit(raw, SEARCH_LIMIT) == expected

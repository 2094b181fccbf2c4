"""Tests for stream format normalization and best-audio selection."""

from typing import Any

import pytest
from ytmproxy.models import NormalizedFormat
from ytmproxy.services.formats import (
    normalize_format,
    normalize_formats,
    pick_best_audio,
)


def fmt(
    url: str,
    bitrate: float | None = None,
    audio_bitrate: float | None = None,
    audio_only: bool = False,
) -> NormalizedFormat:
    return NormalizedFormat(
        url=url,
        bitrate=bitrate,
        audio_bitrate=audio_bitrate,
        is_audio_only=audio_only,
    )


class TestNormalizeFormat:
    """Tests for normalize_format."""

    def test_yt_dlp_audio_format(self) -> None:
        result = normalize_format(
            {"url": "https://x/a.m4a", "vcodec": "none", "abr": 128}
        )

        assert result.url == "https://x/a.m4a"
        assert result.is_audio_only is True
        assert result.audio_bitrate == 128

    def test_innertube_format(self) -> None:
        raw = {
            "itag": 251,
            "url": "https://rr/videoplayback?itag=251",
            "mimeType": 'audio/webm; codecs="opus"',
            "bitrate": 160000,
            "quality": "tiny",
        }
        result = normalize_format(raw)

        assert result.mime_type == 'audio/webm; codecs="opus"'
        assert result.bitrate == 160000
        assert result.quality_label == "tiny"
        assert result.is_audio_only is True
        assert result.raw is raw

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("uri", "https://x/1"),
            ("audioUrl", "https://x/2"),
            ("baseUrl", "https://x/3"),
            ("cdnUrl", "https://x/4"),
            ("downloadUrl", "https://x/5"),
            ("mediaUrl", "https://x/6"),
            ("direct_url", "https://x/7"),
        ],
    )
    def test_url_candidates(self, field: str, value: str) -> None:
        assert normalize_format({field: value}).url == value

    def test_url_precedence(self) -> None:
        result = normalize_format({"baseUrl": "https://b", "url": "https://a"})
        assert result.url == "https://a"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ({"mimeType": "audio/mp4"}, True),
            ({"acodec": "opus"}, True),
            ({"acodec": "opus", "vcodec": "vp9"}, False),
            ({"acodec": "none", "vcodec": "avc1"}, False),
            ({"vcodec": "none"}, True),
            ({"type": "Audio"}, True),
            ({"mimeType": "video/mp4"}, False),
            ({}, False),
        ],
    )
    def test_audio_only_heuristic(self, raw: dict[str, Any], expected: bool) -> None:
        assert normalize_format({"url": "https://x", **raw}).is_audio_only is expected

    def test_tbr_and_format_note(self) -> None:
        result = normalize_format(
            {"url": "https://x", "tbr": 129.5, "format_note": "medium"}
        )

        assert result.bitrate == 129.5
        assert result.quality_label == "medium"

    @pytest.mark.parametrize("raw", [None, "https://x", 42, ["a"]])
    def test_non_record_has_no_url(self, raw: Any) -> None:
        assert normalize_format(raw).url is None


class TestNormalizeFormats:
    """Tests for URL filtering and deduplication."""

    def test_drops_formats_without_url(self) -> None:
        result = normalize_formats([{"url": "https://a"}, {"itag": 1}, None])
        assert [f.url for f in result] == ["https://a"]

    def test_dedupes_by_url_first_wins(self) -> None:
        result = normalize_formats(
            [
                {"url": "https://a", "bitrate": 1},
                {"url": "https://b"},
                {"url": "https://a", "bitrate": 2},
                {"baseUrl": "https://b"},
                {"url": "https://c"},
            ]
        )

        assert [f.url for f in result] == ["https://a", "https://b", "https://c"]
        assert result[0].bitrate == 1


class TestPickBestAudio:
    """Tests for pick_best_audio."""

    def test_empty(self) -> None:
        assert pick_best_audio([]) is None

    def test_prefers_audio_only_over_higher_bitrate_video(self) -> None:
        audio = fmt("https://audio", bitrate=50, audio_only=True)
        formats = [
            fmt("https://v1", bitrate=5000),
            audio,
            fmt("https://v2", bitrate=9000),
        ]
        assert pick_best_audio(formats) is audio

    def test_highest_audio_bitrate_wins(self) -> None:
        low = fmt("https://low", audio_bitrate=64, audio_only=True)
        high = fmt("https://high", audio_bitrate=160, audio_only=True)
        assert pick_best_audio([low, high]) is high

    def test_bitrate_used_when_audio_bitrate_missing(self) -> None:
        a = fmt("https://a", audio_bitrate=128, audio_only=True)
        b = fmt("https://b", bitrate=256, audio_only=True)
        assert pick_best_audio([a, b]) is b

    def test_tie_goes_to_first(self) -> None:
        first = fmt("https://1", audio_bitrate=128, audio_only=True)
        second = fmt("https://2", audio_bitrate=128, audio_only=True)
        assert pick_best_audio([first, second]) is first

    def test_falls_back_to_highest_bitrate_overall(self) -> None:
        a = fmt("https://a", bitrate=100)
        b = fmt("https://b", bitrate=300)
        c = fmt("https://c", bitrate=300)
        assert pick_best_audio([a, b, c]) is b

    def test_no_bitrates_returns_first(self) -> None:
        a = fmt("https://a")
        assert pick_best_audio([a, fmt("https://b")]) is a

    def test_idempotent(self) -> None:
        formats = [
            fmt("https://a", audio_bitrate=128, audio_only=True),
            fmt("https://b", audio_bitrate=128, audio_only=True),
            fmt("https://c", bitrate=999),
        ]
        assert pick_best_audio(formats) is pick_best_audio(formats)

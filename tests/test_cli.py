"""Tests for the debug CLI."""

import json
from typing import Any
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from ytmproxy.cli import main
from ytmproxy.config import ExtractionConfig
from ytmproxy.exceptions import ProviderError
from ytmproxy.services import ExtractionStrategyChain

from tests.conftest import (
    ALBUM_PAYLOAD,
    SEARCH_RESULTS,
    FakeDumpProvider,
    FakeMetadataProvider,
    FakeStreamProvider,
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _with_provider(provider: FakeMetadataProvider) -> Any:
    return patch("ytmproxy.cli.create_metadata_provider", return_value=provider)


class TestSearchCommand:
    def test_json_output(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(search=SEARCH_RESULTS)

        with _with_provider(provider):
            result = runner.invoke(main, ["search", "daft punk", "--json"])

        assert result.exit_code == 0, result.output
        items = json.loads(result.output)
        assert [i["type"] for i in items] == ["song", "album", "artist"]
        assert items[0]["watchUrl"] == "https://www.youtube.com/watch?v=vid00000001"
        assert "raw" not in items[0]

    def test_filter_and_clamped_limit(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(search=[])

        with _with_provider(provider):
            result = runner.invoke(
                main, ["search", "q", "--type", "songs", "--limit", "999", "--json"]
            )

        assert result.exit_code == 0, result.output
        assert provider.calls == [("search", ("q",), {"filter": "songs", "limit": 50})]

    @pytest.mark.parametrize(
        ("value", "expected"), [("song", "songs"), ("Album", "albums")]
    )
    def test_type_resolved_like_api(
        self, runner: CliRunner, value: str, expected: str
    ) -> None:
        provider = FakeMetadataProvider(search=[])

        with _with_provider(provider):
            result = runner.invoke(main, ["search", "q", "--type", value])

        assert result.exit_code == 0, result.output
        assert provider.calls[0][2]["filter"] == expected

    def test_unsupported_type(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(search=[])

        with _with_provider(provider):
            result = runner.invoke(main, ["search", "q", "--type", "lyrics"])

        assert result.exit_code == 1
        assert "Unsupported search type: lyrics" in result.output
        assert provider.calls == []

    def test_table_output(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(search=SEARCH_RESULTS)

        with _with_provider(provider):
            result = runner.invoke(main, ["search", "daft punk"])

        assert result.exit_code == 0, result.output
        assert "Around the World" in result.output

    def test_provider_error(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(search=ProviderError("Failed to search"))

        with _with_provider(provider):
            result = runner.invoke(main, ["search", "q"])

        assert result.exit_code == 1
        assert "Failed to search" in result.output


class TestSuggestCommand:
    def test_plain_output(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(get_suggestions=["daft punk live", "daft"])

        with _with_provider(provider):
            result = runner.invoke(main, ["suggest", "daft"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["daft punk live", "daft"]


class TestAlbumCommand:
    def test_json_output(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(get_album=ALBUM_PAYLOAD)

        with _with_provider(provider):
            result = runner.invoke(main, ["album", "MPREb_album1", "--json"])

        assert result.exit_code == 0, result.output
        tracks = json.loads(result.output)
        assert [t["title"] for t in tracks] == ["One More Time", "Aerodynamic"]
        assert all(t["type"] == "song" for t in tracks)

    def test_contents_bucket(self, runner: CliRunner) -> None:
        provider = FakeMetadataProvider(
            get_album={
                "title": "Homework",
                "contents": [{"videoId": "vid00000040", "title": "Da Funk"}],
            }
        )

        with _with_provider(provider):
            result = runner.invoke(main, ["album", "MPREb_album2", "--json"])

        assert result.exit_code == 0, result.output
        tracks = json.loads(result.output)
        assert [(t["type"], t["title"]) for t in tracks] == [("song", "Da Funk")]


class TestExtractCommand:
    CONFIG = ExtractionConfig(strategies=("best_audio_stream",))

    def _chain(self, primary: Any, dump: Any) -> Any:
        return patch(
            "ytmproxy.cli.create_extraction_chain",
            return_value=ExtractionStrategyChain(primary, dump, self.CONFIG),
        )

    def test_json_output(self, runner: CliRunner) -> None:
        primary = FakeStreamProvider(
            best_audio_stream={"url": "https://rr/251", "mimeType": "audio/webm"}
        )

        with _with_provider(FakeMetadataProvider()), self._chain(
            primary, FakeDumpProvider()
        ):
            result = runner.invoke(main, ["extract", "dQw4w9WgXcQ", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["extractor"] == "ytmusicapi"
        assert data["videoId"] == "dQw4w9WgXcQ"
        assert data["best"]["url"] == "https://rr/251"
        assert data["attempts"][0]["strategy"] == "best_audio_stream"

    def test_fallback_only_skips_provider(self, runner: CliRunner) -> None:
        dump = FakeDumpProvider(result={"formats": [{"url": "https://y/1"}]})

        with patch("ytmproxy.cli.create_metadata_provider") as create, self._chain(
            None, dump
        ):
            result = runner.invoke(
                main, ["extract", "dQw4w9WgXcQ", "--fallback-only", "--json"]
            )

        assert result.exit_code == 0, result.output
        create.assert_not_called()
        assert json.loads(result.output)["extractor"] == "yt-dlp-fallback"

    def test_exhausted(self, runner: CliRunner) -> None:
        dump = FakeDumpProvider(error=ProviderError("yt-dlp extraction failed"))

        with _with_provider(FakeMetadataProvider()), self._chain(
            FakeStreamProvider(), dump
        ):
            result = runner.invoke(main, ["extract", "dQw4w9WgXcQ"])

        assert result.exit_code == 1
        assert "Extraction failed" in result.output

"""Fallback provider dumping video metadata with yt-dlp."""

import logging
from collections.abc import Sequence
from typing import Any

import yt_dlp

from ytmproxy.exceptions import ProviderError

logger = logging.getLogger(__name__)


class YTDLPDumpProvider:
    """yt-dlp metadata dump, the equivalent of ``yt-dlp -J``.

    Nothing is downloaded: ``extract_info(download=False)`` resolves the
    video's formats, with direct URLs already deciphered. Implements
    DumpProvider.
    """

    def __init__(self, player_clients: Sequence[str] = ()) -> None:
        """Initialize the provider.

        Args:
            player_clients: Optional YouTube player clients for yt-dlp to
                use instead of its defaults.
        """
        self._player_clients = list(player_clients)

    def _build_yt_dlp_options(self) -> dict[str, Any]:
        opts: dict[str, Any] = {
            "quiet": True,
            "no_warnings": True,
            "noprogress": True,
            "skip_download": True,
            "noplaylist": True,
            "color": "never",  # Disable ANSI codes in error messages
        }
        if self._player_clients:
            opts["extractor_args"] = {
                "youtube": {"player_client": self._player_clients}
            }
        return opts

    def dump(self, url: str) -> dict[str, Any]:
        """Extract the metadata record for ``url``.

        Raises:
            ProviderError: If yt-dlp fails or returns nothing.
        """
        logger.debug("Dumping metadata for %s", url)
        try:
            with yt_dlp.YoutubeDL(self._build_yt_dlp_options()) as ydl:
                info = ydl.extract_info(url, download=False)
                if not info:
                    raise ProviderError("yt-dlp returned no metadata")
                return ydl.sanitize_info(info)
        except ProviderError:
            raise
        except Exception as e:
            logger.debug("yt-dlp extraction failed for %s: %s", url, e)
            raise ProviderError("yt-dlp extraction failed", details=str(e)) from e

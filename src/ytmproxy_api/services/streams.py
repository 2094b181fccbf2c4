"""Stream extraction service for the HTTP layer."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from functools import partial

from ytmproxy import ExtractionConfig, create_extraction_chain, pick_best_audio
from ytmproxy.exceptions import ProviderInitError, ProviderTimeoutError
from ytmproxy.models import ExtractionResult
from ytmproxy.providers import LazyProvider, MetadataProvider
from ytmproxy.services import ExtractionStrategyChain

from ytmproxy_api.schemas.streams import ExtractResponse

logger = logging.getLogger(__name__)

ChainFactory = Callable[[MetadataProvider | None], ExtractionStrategyChain]


class StreamService:
    """Resolves playable formats through a fresh extraction chain per request.

    The metadata provider is shared, but the primary stream provider built on
    top of it memoizes song data and must not outlive one request.
    """

    def __init__(
        self,
        provider: LazyProvider,
        timeout: float = 60.0,
        player_clients: Sequence[str] = (),
        config: ExtractionConfig | None = None,
        chain_factory: ChainFactory | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            provider: Shared, lazily initialized metadata provider.
            timeout: Seconds allowed for the whole chain.
            player_clients: yt-dlp player clients for the fallback.
            config: Strategy order and provider labels.
            chain_factory: Builds a chain from the (possibly missing) provider.
                Defaults to create_extraction_chain.
        """
        self._provider = provider
        self._timeout = timeout
        self._chain_factory = chain_factory or partial(
            create_extraction_chain,
            player_clients=tuple(player_clients),
            config=config,
        )

    def _extract(self, video: str) -> ExtractionResult:
        try:
            provider: MetadataProvider | None = self._provider.get()
        except ProviderInitError as e:
            # Extraction can still succeed through the fallback
            logger.warning(
                "Metadata provider unavailable for extraction: %s", e.details or e
            )
            provider = None
        return self._chain_factory(provider).extract(video)

    async def extract(self, video: str) -> ExtractResponse:
        """Resolve formats and the best audio candidate for a video ID or URL.

        Raises:
            ExtractionError: If every strategy, fallback included, failed.
            ProviderTimeoutError: If the chain exceeds the timeout.
        """
        try:
            result = await asyncio.wait_for(
                asyncio.to_thread(self._extract, video), self._timeout
            )
        except TimeoutError as e:
            logger.warning("Extraction of %s timed out after %ss", video, self._timeout)
            raise ProviderTimeoutError(
                "Extraction timed out",
                details=f"no result within {self._timeout:g}s",
            ) from e

        best = pick_best_audio(result.formats)
        logger.info(
            "Extracted %d formats for %s via %s",
            len(result.formats),
            result.video_id or video,
            result.extractor,
        )
        return ExtractResponse(
            extractor=result.extractor,
            video_id=result.video_id or video,
            formats=result.formats,
            best=best,
            info_summary=list(result.info),
            attempts=result.attempts,
        )

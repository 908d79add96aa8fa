import logging
from pathlib import Path

import httpx

from pexels_client.config import load_config
from pexels_client.endpoints.collections import CollectionEndpoints
from pexels_client.endpoints.photos import PhotoEndpoints
from pexels_client.endpoints.videos import VideoEndpoints
from pexels_client.services.fetch_wrapper import DEFAULT_TIMEOUT, HttpFetcher

PHOTO_BASE_URL = "https://api.pexels.com/v1/"
VIDEO_BASE_URL = "https://api.pexels.com/videos/"
COLLECTION_BASE_URL = "https://api.pexels.com/v1/collections/"


class PexelsClient:
    """Entry point to the Pexels API.

    Holds one endpoint group per media category. All three share a single
    ``httpx.Client``; pass ``http_client`` to supply your own (it is then
    left open by :meth:`close`).
    """

    def __init__(
        self,
        api_key: str,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: logging.Logger | None = None,
    ) -> None:
        log = logger or logging.getLogger(__name__)
        log.info("Initializing Pexels client")
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client()

        def fetcher(base_url: str) -> HttpFetcher:
            return HttpFetcher(
                base_url, api_key, client=self._http_client, timeout=timeout, logger=logger
            )

        self.photos = PhotoEndpoints(fetcher(PHOTO_BASE_URL), logger=logger)
        self.videos = VideoEndpoints(fetcher(VIDEO_BASE_URL), logger=logger)
        self.collections = CollectionEndpoints(fetcher(COLLECTION_BASE_URL), logger=logger)

    @classmethod
    def from_config(cls, path: str | Path, **kwargs) -> "PexelsClient":
        return cls(load_config(path).api_key, **kwargs)

    def close(self) -> None:
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "PexelsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

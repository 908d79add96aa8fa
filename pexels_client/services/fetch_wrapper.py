import logging
from collections.abc import Mapping
from typing import Any

import httpx

from pexels_client.errors import HttpStatusError, NetworkError
from pexels_client.interfaces.fetcher import Fetcher
from pexels_client.services.params import build_query_string

DEFAULT_TIMEOUT = 30.0


class HttpFetcher(Fetcher):
    """Authenticated GET requests against a single Pexels base address.

    ``base_url`` is expected to end with ``/``; endpoints are appended to it
    verbatim. The ``httpx.Client`` may be shared between fetchers so that
    connections are pooled. A fetcher only closes a client it created itself.
    """

    USER_AGENT = "pexels-client-python/0.1.0"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: logging.Logger | None = None,
    ) -> None:
        self.base_url = base_url
        self._api_key = api_key
        self._owns_client = client is None
        self._client = client or httpx.Client()
        self._timeout = timeout
        self._log = logger or logging.getLogger(__name__)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_url(self, endpoint: str, params: Mapping[str, Any] | None = None) -> str:
        return f"{self.base_url}{endpoint}?{build_query_string(params)}"

    def fetch(self, endpoint: str, params: Mapping[str, Any] | None = None) -> bytes:
        url = self.build_url(endpoint, params)
        headers = {"Authorization": self._api_key, "User-Agent": self.USER_AGENT}
        self._log.info("Making request to: %s", url)

        try:
            with self._client.stream(
                "GET", url, headers=headers, timeout=self._timeout
            ) as response:
                self._log.info("Received response with status: %d", response.status_code)
                if response.status_code != httpx.codes.OK:
                    self._log.error("Received non-OK response: %d", response.status_code)
                    raise HttpStatusError(f"requesting {endpoint or '/'}", response.status_code)
                return response.read()
        except httpx.HTTPError as e:
            self._log.error("Error making request to %s: %s", url, e)
            raise NetworkError(f"requesting {endpoint or '/'}", e) from e

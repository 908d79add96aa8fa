import logging
from collections.abc import Mapping
from typing import Any

from pexels_client.errors import PexelsError
from pexels_client.interfaces.fetcher import Fetcher
from pexels_client.services.decoding import ModelT, decode_response
from pexels_client.services.params import clean_params


class EndpointGroup:
    def __init__(self, fetcher: Fetcher, logger: logging.Logger | None = None) -> None:
        self._fetcher = fetcher
        self._log = logger or logging.getLogger(type(self).__module__)

    def _get(
        self,
        action: str,
        endpoint: str,
        params: Mapping[str, Any] | None,
        target: type[ModelT],
    ) -> ModelT:
        try:
            body = self._fetcher.fetch(endpoint, clean_params(params))
            return decode_response(body, target)
        except PexelsError as e:
            self._log.error("Error %s: %s", action, e)
            e.add_note(f"while {action}")
            raise

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Fetcher(ABC):
    @abstractmethod
    def fetch(self, endpoint: str, params: Mapping[str, Any] | None = None) -> bytes:
        ...

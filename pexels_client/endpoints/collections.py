from pexels_client.endpoints.base import EndpointGroup
from pexels_client.models import (
    CollectionsResponse,
    MediaParams,
    MediaResponse,
    PaginationParams,
)

ALL_ENDPOINT = ""
FEATURED_ENDPOINT = "featured"


class CollectionEndpoints(EndpointGroup):
    def all(self, params: PaginationParams | None = None) -> CollectionsResponse:
        params = params or PaginationParams()
        response = self._get(
            "fetching collections",
            ALL_ENDPOINT,
            {"page": params.page, "per_page": params.per_page},
            CollectionsResponse,
        )
        self._log.info("Fetched %d collections", len(response.collections))
        return response

    def featured(self, params: PaginationParams | None = None) -> CollectionsResponse:
        params = params or PaginationParams()
        response = self._get(
            "fetching featured collections",
            FEATURED_ENDPOINT,
            {"page": params.page, "per_page": params.per_page},
            CollectionsResponse,
        )
        self._log.info("Fetched %d featured collections", len(response.collections))
        return response

    def media(self, params: MediaParams) -> MediaResponse:
        """Photos and videos of one collection, optionally filtered by ``media_type``."""
        response = self._get(
            f"fetching media for collection ID {params.collection_id}",
            params.collection_id,
            {
                "type": params.media_type,
                "sort": params.sort,
                "page": params.page,
                "per_page": params.per_page,
            },
            MediaResponse,
        )
        self._log.info(
            "Fetched %d media items for collection ID: %s",
            len(response.media),
            params.collection_id,
        )
        return response

from pexels_client.endpoints.base import EndpointGroup
from pexels_client.models import PaginationParams, Photo, PhotoSearchParams, PhotosResponse

SEARCH_ENDPOINT = "search"
CURATED_ENDPOINT = "curated"
PHOTO_ENDPOINT = "photos"

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


class PhotoEndpoints(EndpointGroup):
    def search(self, params: PhotoSearchParams | None = None) -> PhotosResponse:
        params = params or PhotoSearchParams(query="")
        response = self._get(
            "fetching search results",
            SEARCH_ENDPOINT,
            {
                "query": params.query,
                "orientation": params.orientation,
                "size": params.size,
                "color": params.color,
                "locale": params.locale,
                "page": params.page,
                "per_page": params.per_page,
            },
            PhotosResponse,
        )
        self._log.info(
            "Fetched %d photos for query: %s", len(response.photos), params.query
        )
        return response

    def curated(self, params: PaginationParams | None = None) -> PhotosResponse:
        """Hand-picked photos; page and per_page default to 1 and 15."""
        params = params or PaginationParams()
        params = params.model_copy(
            update={
                "page": params.page or DEFAULT_PAGE,
                "per_page": params.per_page or DEFAULT_PER_PAGE,
            }
        )
        response = self._get(
            "fetching curated photos",
            CURATED_ENDPOINT,
            {"page": params.page, "per_page": params.per_page},
            PhotosResponse,
        )
        self._log.info("Fetched %d curated photos", len(response.photos))
        return response

    def get_photo(self, photo_id: int) -> Photo:
        photo = self._get(
            f"fetching photo with ID {photo_id}",
            f"{PHOTO_ENDPOINT}/{photo_id}",
            None,
            Photo,
        )
        self._log.info("Fetched photo %d by %s", photo.id, photo.photographer)
        return photo

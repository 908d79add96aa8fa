from pexels_client.endpoints.base import EndpointGroup
from pexels_client.models import Video, VideoFilterParams, VideoSearchParams, VideosResponse

SEARCH_ENDPOINT = "search"
POPULAR_ENDPOINT = "popular"
VIDEO_ENDPOINT = "videos"


class VideoEndpoints(EndpointGroup):
    def search(self, params: VideoSearchParams | None = None) -> VideosResponse:
        params = params or VideoSearchParams(query="")
        response = self._get(
            "fetching video search results",
            SEARCH_ENDPOINT,
            {
                "query": params.query,
                "orientation": params.orientation,
                "size": params.size,
                "locale": params.locale,
                "page": params.page,
                "per_page": params.per_page,
            },
            VideosResponse,
        )
        self._log.info(
            "Fetched %d videos for query: %s", len(response.videos), params.query
        )
        return response

    def popular(self, params: VideoFilterParams | None = None) -> VideosResponse:
        params = params or VideoFilterParams()
        response = self._get(
            "fetching popular videos",
            POPULAR_ENDPOINT,
            {
                "min_width": params.min_width,
                "min_height": params.min_height,
                "min_duration": params.min_duration,
                "max_duration": params.max_duration,
                "page": params.page,
                "per_page": params.per_page,
            },
            VideosResponse,
        )
        self._log.info("Fetched %d popular videos", len(response.videos))
        return response

    def get_video(self, video_id: int) -> Video:
        video = self._get(
            f"fetching video details for ID {video_id}",
            f"{VIDEO_ENDPOINT}/{video_id}",
            None,
            Video,
        )
        self._log.info("Fetched video %d (%ds)", video.id, video.duration)
        return video

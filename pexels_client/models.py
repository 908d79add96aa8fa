from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class PexelsModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Upstream sends null for some optional fields; required ones stay strict.
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


# Request parameters


class PaginationParams(PexelsModel):
    page: int | None = None
    per_page: int | None = None


class PhotoSearchParams(PexelsModel):
    query: str
    orientation: str | None = None
    size: str | None = None
    color: str | None = None
    locale: str | None = None
    page: int | None = None
    per_page: int | None = None


class VideoSearchParams(PexelsModel):
    query: str
    orientation: str | None = None
    size: str | None = None
    locale: str | None = None
    page: int | None = None
    per_page: int | None = None


class VideoFilterParams(PexelsModel):
    min_width: int | None = None
    min_height: int | None = None
    min_duration: int | None = None
    max_duration: int | None = None
    page: int | None = None
    per_page: int | None = None


class MediaParams(PexelsModel):
    collection_id: str
    media_type: str | None = None
    sort: str | None = None
    page: int | None = None
    per_page: int | None = None


# Photos


class PhotoSrc(PexelsModel):
    original: str = ""
    large2x: str = ""
    large: str = ""
    medium: str = ""
    small: str = ""
    portrait: str = ""
    landscape: str = ""
    tiny: str = ""


class Photo(PexelsModel):
    id: int
    width: int = 0
    height: int = 0
    url: str = ""
    photographer: str = ""
    photographer_id: int = 0
    photographer_url: str = ""
    avg_color: str = ""
    src: PhotoSrc = Field(default_factory=PhotoSrc)
    liked: bool = False
    alt: str = ""


class PhotosResponse(PexelsModel):
    page: int = 0
    per_page: int = 0
    total_results: int = 0
    photos: list[Photo] = []
    prev_page: str | None = None
    next_page: str | None = None


# Videos


class User(PexelsModel):
    id: int = 0
    name: str = ""
    url: str = ""


class VideoFile(PexelsModel):
    id: int = 0
    quality: str | None = None
    file_type: str = ""
    width: int | None = None
    height: int | None = None
    fps: float | None = None
    link: str = ""


class VideoPicture(PexelsModel):
    id: int = 0
    picture: str = ""
    nr: int = 0


class Video(PexelsModel):
    id: int
    width: int = 0
    height: int = 0
    url: str = ""
    image: str = ""
    full_res: Any = None
    tags: list[str] = []
    duration: int = 0
    user: User = Field(default_factory=User)
    video_files: list[VideoFile] = []
    video_pictures: list[VideoPicture] = []


class VideosResponse(PexelsModel):
    page: int = 0
    per_page: int = 0
    total_results: int = 0
    url: str = ""
    videos: list[Video] = []
    prev_page: str | None = None
    next_page: str | None = None


# Collections


class Collection(PexelsModel):
    id: str
    title: str = ""
    description: str | None = None
    private: bool = False
    media_count: int = 0
    photos_count: int = 0
    videos_count: int = 0


class CollectionsResponse(PexelsModel):
    page: int = 0
    per_page: int = 0
    total_results: int = 0
    collections: list[Collection] = []
    prev_page: str | None = None
    next_page: str | None = None


class MediaPhoto(Photo):
    type: Literal["Photo"]


class MediaVideo(Video):
    type: Literal["Video"]


MediaItem = Annotated[MediaPhoto | MediaVideo, Field(discriminator="type")]


class MediaResponse(PexelsModel):
    id: str = ""
    page: int = 0
    per_page: int = 0
    total_results: int = 0
    media: list[MediaItem] = []
    prev_page: str | None = None
    next_page: str | None = None

import json
from collections.abc import Mapping
from typing import Any

import pytest

from pexels_client.interfaces.fetcher import Fetcher


class MockFetcher(Fetcher):
    def __init__(self, body: bytes = b"{}", error: Exception | None = None):
        self._body = body
        self._error = error
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    def fetch(self, endpoint: str, params: Mapping[str, Any] | None = None) -> bytes:
        self.calls.append((endpoint, dict(params) if params is not None else None))
        if self._error:
            raise self._error
        return self._body


@pytest.fixture
def photo_payload() -> dict[str, Any]:
    return {
        "id": 2014422,
        "width": 3024,
        "height": 3024,
        "url": "https://www.pexels.com/photo/brown-rocks-during-golden-hour-2014422/",
        "photographer": "Joey Farina",
        "photographer_url": "https://www.pexels.com/@joey",
        "photographer_id": 680589,
        "avg_color": "#978E82",
        "src": {
            "original": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg",
            "large2x": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?w=1880",
            "large": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?h=650",
            "medium": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?h=350",
            "small": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?h=130",
            "portrait": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?h=1200",
            "landscape": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?h=627",
            "tiny": "https://images.pexels.com/photos/2014422/pexels-photo-2014422.jpeg?h=200",
        },
        "liked": False,
        "alt": "Brown Rocks During Golden Hour",
    }


@pytest.fixture
def video_payload() -> dict[str, Any]:
    return {
        "id": 2499611,
        "width": 1080,
        "height": 1920,
        "url": "https://www.pexels.com/video/2499611/",
        "image": "https://images.pexels.com/videos/2499611/free-video-2499611.jpg",
        "full_res": None,
        "tags": [],
        "duration": 22,
        "user": {
            "id": 680589,
            "name": "Joey Farina",
            "url": "https://www.pexels.com/@joey",
        },
        "video_files": [
            {
                "id": 125004,
                "quality": "hd",
                "file_type": "video/mp4",
                "width": 1080,
                "height": 1920,
                "fps": 23.976,
                "link": "https://player.vimeo.com/external/342571552.hd.mp4",
            },
            {
                "id": 125005,
                "quality": None,
                "file_type": "video/mp4",
                "width": None,
                "height": None,
                "fps": None,
                "link": "https://player.vimeo.com/external/342571552.m3u8",
            },
        ],
        "video_pictures": [
            {
                "id": 308178,
                "picture": "https://static-videos.pexels.com/videos/2499611/pictures/preview-0.jpg",
                "nr": 0,
            }
        ],
    }


@pytest.fixture
def photos_page(photo_payload) -> dict[str, Any]:
    second = dict(photo_payload, id=1661179, photographer="Harvey Sapir")
    return {
        "total_results": 10000,
        "page": 1,
        "per_page": 5,
        "photos": [photo_payload, second],
        "next_page": "https://api.pexels.com/v1/search/?page=2&per_page=5&query=elephant",
    }


@pytest.fixture
def media_page(photo_payload, video_payload) -> dict[str, Any]:
    return {
        "id": "5qa21sj",
        "page": 1,
        "per_page": 2,
        "total_results": 42,
        "media": [
            dict(photo_payload, type="Photo"),
            dict(video_payload, type="Video"),
        ],
        "next_page": "https://api.pexels.com/v1/collections/5qa21sj?page=2&per_page=2",
    }


def to_bytes(payload: Any) -> bytes:
    return json.dumps(payload).encode("utf-8")

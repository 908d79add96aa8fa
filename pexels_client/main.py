import argparse
import logging

from pexels_client.client import PexelsClient
from pexels_client.config import load_config, settings
from pexels_client.errors import PexelsError
from pexels_client.log import configure_logging
from pexels_client.models import PhotoSearchParams

logger = logging.getLogger("pexels_client.main")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search Pexels photos and log the results.")
    parser.add_argument("--query", default="elephant")
    parser.add_argument("--config", default=settings.config_file)
    parser.add_argument("--log-file", default=settings.log_file)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file)
    logger.info("Starting the Pexels client application")

    try:
        api_key = settings.api_key or load_config(args.config).api_key
        with PexelsClient(api_key, timeout=settings.request_timeout) as client:
            response = client.photos.search(
                PhotoSearchParams(
                    query=args.query,
                    orientation="landscape",
                    size="large",
                    page=1,
                    per_page=5,
                )
            )
    except PexelsError as e:
        logger.error("Pexels client failed: %s", e)
        return 1

    if not response.photos:
        logger.error("No photos found")
        return 1

    for photo in response.photos:
        logger.info(
            "Photo ID: %d, Photographer: %s, URL: %s", photo.id, photo.photographer, photo.url
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

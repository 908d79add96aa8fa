import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from pexels_client.errors import DecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(body: bytes, target: type[ModelT]) -> ModelT:
    logger.debug("Raw response body: %s", body.decode("utf-8", errors="replace"))
    try:
        return target.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"decoding {target.__name__} response", e) from e

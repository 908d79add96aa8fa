from collections.abc import Mapping, Sized
from numbers import Number
from typing import Any

import httpx

Params = dict[str, Any]


def clean_params(params: Mapping[str, Any] | None) -> Params:
    """Drop entries whose value is None, empty, or zero."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if not _is_zero_value(value)}


def build_query_string(params: Mapping[str, Any] | None) -> str:
    if not params:
        return ""
    # httpx renders booleans as true/false and numbers via str().
    return str(httpx.QueryParams(sorted(params.items(), key=lambda item: item[0])))


def _is_zero_value(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    if isinstance(value, Number):
        return value == 0
    return False

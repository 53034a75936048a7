"""
Decode FRED response bodies.

Error payloads are told apart from success payloads before schema decoding:
1. Fast path: first line mentions "error_code" -> ApiError, unless the whole body parses
   as a JSON object that has no top-level error_code (a legitimate payload that happens
   to contain the text).
2. Any body that parses to an object with a top-level error_code -> ApiError.
3. Otherwise strict decode into the target model; any mismatch -> DecodeError.
"""
import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from fred_client.core.errors import ApiError, DecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

ERROR_MARKER = '"error_code"'


def _load(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError:
        return None


def _is_error_object(data: Any) -> bool:
    return isinstance(data, dict) and "error_code" in data


def check_error(body: str) -> str:
    """Raise ApiError if body is a FRED error payload, DecodeError if empty. Returns body."""
    if not body or not body.strip():
        raise DecodeError("response body was empty", body)

    first_line = body.splitlines()[0]
    if ERROR_MARKER in first_line:
        data = _load(body)
        if data is None or _is_error_object(data):
            raise ApiError(body)
        logger.debug("error_code on first line of a non-error payload; decoding as success")
        return body

    if "error_code" in body and _is_error_object(_load(body)):
        raise ApiError(body)
    return body


def decode(body: str, model: type[M]) -> M:
    """Check body for an API error, then decode it strictly into ``model``."""
    check_error(body)
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.debug("decode into %s failed: %s", model.__name__, e)
        raise DecodeError(str(e), body) from e

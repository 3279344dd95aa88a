"""
Parsers for the backend's response envelopes.

The backend answers in three shapes depending on the endpoint:

- an envelope: {"success": bool, "message": str, "data": ...}
- a bare JSON array
- a bare JSON object

These helpers map each shape onto plain Python data and then onto a
pydantic model, failing loudly on anything else instead of guessing.
"""

from typing import Any, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import MalformedResponseError, ValidationError, VALIDATION_ERROR_MESSAGE


M = TypeVar("M", bound=BaseModel)

ENVELOPE_KEYS = {"success", "data"}


def is_envelope(payload: Any) -> bool:
    """An envelope is a dict carrying at least one of success/data."""
    return isinstance(payload, dict) and bool(ENVELOPE_KEYS & payload.keys())


def _check_success(payload: dict, endpoint: str) -> None:
    if payload.get("success") is False:
        raise ValidationError(
            payload.get("message") or VALIDATION_ERROR_MESSAGE,
            code="REJECTED",
            details={"endpoint": endpoint},
        )


def unwrap_list(payload: Any, endpoint: str) -> list[Any]:
    """
    Extract the item list from a list endpoint's response.

    A missing, null or empty data field normalizes to an empty list.

    Raises:
        ValidationError: If the envelope reports success=false
        MalformedResponseError: If the shape is not a list or a list envelope
    """
    if payload is None or payload == "":
        return []
    if isinstance(payload, list):
        return payload
    if is_envelope(payload):
        _check_success(payload, endpoint)
        data = payload.get("data")
        if data is None or data == []:
            return []
        if isinstance(data, list):
            return data
        raise MalformedResponseError(endpoint, f"expected a list in data, got {type(data).__name__}")
    raise MalformedResponseError(endpoint, f"expected a list, got {type(payload).__name__}")


def unwrap_object(payload: Any, endpoint: str) -> dict[str, Any]:
    """
    Extract the single object from an object endpoint's response.

    Raises:
        ValidationError: If the envelope reports success=false
        MalformedResponseError: If no object can be found
    """
    if is_envelope(payload):
        _check_success(payload, endpoint)
        data = payload.get("data")
        if isinstance(data, dict):
            return data
        raise MalformedResponseError(endpoint, "envelope carries no object in data")
    if isinstance(payload, dict):
        return payload
    raise MalformedResponseError(endpoint, f"expected an object, got {type(payload).__name__}")


def to_model(model: type[M], data: Any, endpoint: str) -> M:
    """Validate one item into a model, surfacing failures as MalformedResponseError."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise MalformedResponseError(endpoint, str(e)) from e


def parse_list(model: type[M], payload: Any, endpoint: str) -> list[M]:
    """Parse a list endpoint's response into a list of models."""
    return [to_model(model, item, endpoint) for item in unwrap_list(payload, endpoint)]


def parse_object(model: type[M], payload: Any, endpoint: str) -> M:
    """Parse an object endpoint's response into a model."""
    return to_model(model, unwrap_object(payload, endpoint), endpoint)


def parse_optional_object(
    model: type[M],
    payload: Any,
    endpoint: str,
) -> Optional[M]:
    """Like parse_object, but an envelope with null data yields None."""
    if is_envelope(payload):
        _check_success(payload, endpoint)
        if payload.get("data") is None:
            return None
    return parse_object(model, payload, endpoint)

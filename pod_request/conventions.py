"""Recognition of the Pod standard response shape."""
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pod_request.config import ERRORS


class ResponseShape(str, Enum):
    POD_LOWER = "pod_lower"
    POD_UPPER = "pod_upper"
    OPAQUE = "opaque"


# Checked in order; the first flag present decides the shape.
_FLAG_FIELDS: tuple[tuple[ResponseShape, str], ...] = (
    (ResponseShape.POD_LOWER, "hasError"),
    (ResponseShape.POD_UPPER, "HasError"),
)

# Lowercase fields win over capitalized ones when both are present.
_CODE_FIELDS = ("errorCode", "ErrorCode")
_MESSAGE_FIELDS = ("message", "Message")


def classify_response(payload: Any) -> ResponseShape:
    if isinstance(payload, Mapping):
        for shape, field in _FLAG_FIELDS:
            if field in payload:
                return shape
    return ResponseShape.OPAQUE


def has_error(payload: Mapping[str, Any], shape: ResponseShape) -> bool:
    for candidate, field in _FLAG_FIELDS:
        if candidate is shape:
            return bool(payload.get(field))
    return False


def resolve_error_fields(payload: Mapping[str, Any]) -> tuple[int, str]:
    code = _first_present(payload, _CODE_FIELDS, ERRORS.unexpected.code)
    message = _first_present(payload, _MESSAGE_FIELDS, ERRORS.unexpected.message)
    return code, message


def _first_present(payload: Mapping[str, Any], fields: tuple[str, ...], default: Any) -> Any:
    for field in fields:
        if field in payload:
            return payload[field]
    return default

from pod_request.config import ERRORS
from pod_request.conventions import (
    ResponseShape,
    classify_response,
    has_error,
    resolve_error_fields,
)


def test_classify_lowercase_flag_first() -> None:
    assert classify_response({"hasError": False, "HasError": True}) is ResponseShape.POD_LOWER
    assert classify_response({"HasError": True}) is ResponseShape.POD_UPPER


def test_classify_opaque_payloads() -> None:
    assert classify_response({"result": []}) is ResponseShape.OPAQUE
    assert classify_response("hasError") is ResponseShape.OPAQUE
    assert classify_response([{"hasError": True}]) is ResponseShape.OPAQUE
    assert classify_response(None) is ResponseShape.OPAQUE


def test_has_error_reads_the_matching_flag() -> None:
    assert has_error({"HasError": True}, ResponseShape.POD_UPPER) is True
    assert has_error({"hasError": 0}, ResponseShape.POD_LOWER) is False


def test_lowercase_error_fields_take_precedence() -> None:
    payload = {"hasError": True, "errorCode": 21, "message": "low", "ErrorCode": 99, "Message": "up"}
    assert resolve_error_fields(payload) == (21, "low")


def test_capitalized_error_fields_used_when_lowercase_missing() -> None:
    assert resolve_error_fields({"HasError": True, "ErrorCode": 99, "Message": "up"}) == (99, "up")


def test_missing_error_fields_fall_back_to_unexpected() -> None:
    assert resolve_error_fields({"hasError": True}) == (ERRORS.unexpected.code, ERRORS.unexpected.message)

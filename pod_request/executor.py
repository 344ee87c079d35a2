import json
import logging
import time
from collections.abc import Mapping
from typing import Any

from pod_request.config import ERRORS
from pod_request.conventions import ResponseShape, classify_response, has_error, resolve_error_fields
from pod_request.encoding import encode_form
from pod_request.errors import PodError, TransportFailure
from pod_request.schemas import RequestSpec, TransportResponse
from pod_request.transport import FORM_CONTENT_TYPE, HttpxTransport, Transport
from pod_request.urls import build_url

_logger = logging.getLogger("pod_request.executor")


class RequestExecutor:
    """Performs one call to a Pod service and normalizes the outcome.

    ``execute`` returns the response body unchanged on success and raises
    ``PodError`` for every kind of failure.
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self.transport = transport or HttpxTransport()

    async def execute(
        self,
        base_url: str,
        api_path: str,
        method: str,
        headers: Mapping[str, Any] | None = None,
        data: Any = None,
        use_url_encoded_body: bool = False,
        url_trailing_segment: str | None = None,
    ) -> Any:
        spec: RequestSpec | None = None
        start = time.perf_counter()
        try:
            spec = build_request_spec(
                base_url,
                api_path,
                method,
                headers,
                data,
                use_url_encoded_body=use_url_encoded_body,
                url_trailing_segment=url_trailing_segment,
            )
            response = await self.transport.send(spec)
            result = interpret_response(response.data)
        except Exception as exc:  # noqa: BLE001
            error = normalize_failure(exc)
            _logger.warning(
                "request_failed",
                extra={
                    "method": spec.method if spec else method,
                    "url": spec.url if spec else None,
                    "error_code": error.code,
                    "latency_ms": _elapsed_ms(start),
                },
            )
            if error is exc:
                raise
            raise error from exc

        _logger.debug(
            "request_complete",
            extra={
                "method": spec.method,
                "url": spec.url,
                "status_code": response.status,
                "latency_ms": _elapsed_ms(start),
            },
        )
        return result


async def request(
    base_url: str,
    api_path: str,
    method: str,
    headers: Mapping[str, Any] | None = None,
    data: Any = None,
    use_url_encoded_body: bool = False,
    url_trailing_segment: str | None = None,
) -> Any:
    return await RequestExecutor().execute(
        base_url,
        api_path,
        method,
        headers,
        data,
        use_url_encoded_body=use_url_encoded_body,
        url_trailing_segment=url_trailing_segment,
    )


def build_request_spec(
    base_url: str,
    api_path: str,
    method: str,
    headers: Mapping[str, Any] | None = None,
    data: Any = None,
    use_url_encoded_body: bool = False,
    url_trailing_segment: str | None = None,
) -> RequestSpec:
    attached = dict(headers) if isinstance(headers, Mapping) else None
    params: dict[str, Any] | None = None
    body: Any = None
    body_kind: str | None = None

    if isinstance(method, str) and isinstance(data, Mapping):
        if method.lower() == "get":
            params = {str(key): value for key, value in data.items()}
        elif is_form_urlencoded(attached) or use_url_encoded_body:
            body = encode_form(data)
            body_kind = "form"
        else:
            body = data
            body_kind = "json"

    return RequestSpec(
        url=build_url(base_url, api_path, url_trailing_segment),
        # A missing method defaults to GET.
        method=method if isinstance(method, str) else "GET",
        headers=attached,
        params=params,
        body=body,
        body_kind=body_kind,
    )


def is_form_urlencoded(headers: Mapping[str, Any] | None) -> bool:
    if not isinstance(headers, Mapping):
        return False
    for key, value in headers.items():
        if str(key).lower() == "content-type" and isinstance(value, str):
            return value.lower() == FORM_CONTENT_TYPE
    return False


def interpret_response(payload: Any) -> Any:
    shape = classify_response(payload)
    if shape is ResponseShape.OPAQUE or not has_error(payload, shape):
        return payload
    code, message = resolve_error_fields(payload)
    raise PodError(code, message, payload)


def normalize_failure(exc: Exception) -> PodError:
    if isinstance(exc, PodError):
        return exc
    if isinstance(exc, TransportFailure):
        if exc.response is not None:
            return error_from_response(exc.response)
        if exc.code:
            return PodError(ERRORS.connection.code, ERRORS.connection.message)
    return PodError(ERRORS.unexpected.code, ERRORS.unexpected.message)


def error_from_response(response: TransportResponse) -> PodError:
    code = response.status or ERRORS.unexpected.code
    message = _body_text(response.data) or response.status_text or ERRORS.unexpected.message
    return PodError(code, message)


def _body_text(data: Any) -> str | None:
    # Empty, false and zero bodies count as missing.
    if data is None or (isinstance(data, (str, bool, int, float)) and not data):
        return None
    if isinstance(data, str):
        return data
    return json.dumps(data, ensure_ascii=False)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000.0, 2)

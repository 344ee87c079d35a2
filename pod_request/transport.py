from typing import Any, Protocol

import httpx

from pod_request.config import settings
from pod_request.encoding import flatten_params
from pod_request.errors import TransportFailure
from pod_request.schemas import RequestSpec, TransportResponse

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Transport(Protocol):
    async def send(self, spec: RequestSpec) -> TransportResponse:
        ...


class HttpxTransport:
    """Sends a ``RequestSpec`` with a short-lived ``httpx.AsyncClient``.

    Only 2xx responses are returned; anything else raises ``TransportFailure``
    carrying the response, or the httpx exception class name as ``code`` when
    the server was never reached.
    """

    def __init__(
        self,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout_s = settings.timeout_s if timeout_s is None else timeout_s
        self._transport = transport

    async def send(self, spec: RequestSpec) -> TransportResponse:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.request(spec.method, spec.url, **build_request_kwargs(spec))
        except httpx.TransportError as exc:
            raise TransportFailure(str(exc), code=type(exc).__name__) from exc
        except httpx.HTTPError as exc:
            raise TransportFailure(str(exc)) from exc

        result = to_transport_response(response)
        if not response.is_success:
            raise TransportFailure(f"HTTP {response.status_code}", response=result)
        return result


def build_request_kwargs(spec: RequestSpec) -> dict[str, Any]:
    headers = {str(key): str(value) for key, value in (spec.headers or {}).items()}
    kwargs: dict[str, Any] = {}
    if spec.params is not None:
        kwargs["params"] = flatten_params(spec.params)
    if spec.body_kind == "json":
        kwargs["json"] = spec.body
    elif spec.body_kind == "form":
        if not any(key.lower() == "content-type" for key in headers):
            headers["Content-Type"] = FORM_CONTENT_TYPE
        kwargs["content"] = spec.body
    if headers:
        kwargs["headers"] = headers
    return kwargs


def to_transport_response(response: httpx.Response) -> TransportResponse:
    try:
        data = response.json()
    except ValueError:
        data = response.text
    return TransportResponse(
        data=data,
        status=response.status_code,
        status_text=response.reason_phrase,
        headers=dict(response.headers),
    )

from typing import Any

from pod_request.schemas import TransportResponse


class PodError(Exception):
    """Normalized failure of a Pod service call.

    Every failure path (remote application error, HTTP status error,
    connection error, anything unrecognized) surfaces as this one type with a
    numeric ``code`` and a string ``message``. ``raw`` holds the original
    payload only for errors reported by a Pod standard response.
    """

    def __init__(self, code: int, message: str, raw: Any = None) -> None:
        super().__init__(code, message)
        self._code = code
        self._message = message
        self._raw = raw

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def raw(self) -> Any:
        return self._raw

    def to_dict(self) -> dict[str, Any]:
        return {"code": self._code, "message": self._message, "raw": self._raw}

    def __str__(self) -> str:
        return f"[{self._code}] {self._message}"


class TransportFailure(Exception):
    """Raised by a transport when the call did not produce a 2xx response."""

    def __init__(
        self,
        detail: str,
        response: TransportResponse | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.response = response
        self.code = code

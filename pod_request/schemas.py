from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class RequestSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    method: str
    headers: dict[str, Any] | None = None
    params: dict[str, Any] | None = None
    body: Any = None
    body_kind: Literal["json", "form"] | None = None


class TransportResponse(BaseModel):
    data: Any = None
    status: int
    status_text: str = ""
    headers: dict[str, str] = Field(default_factory=dict)

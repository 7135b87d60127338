from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIMEOUT = 300.0 # seconds


class HttpRequestError(Exception):
    def __init__(self, message: str, status_code: int|None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class HTTP(BaseModel):
    model_config = ConfigDict(strict=True)
    proxy: str|None = None


class RequestOptions(BaseModel):
    model_config = ConfigDict(frozen=True)
    method: str = "GET"
    url: str
    headers: dict[str, str] = {}
    qs: dict[str, Any] = {}
    body: Any = None
    form_data: dict[str, Any]|None = None
    json_: bool = Field(default=True, alias="json")
    timeout: float = DEFAULT_TIMEOUT
    reject_unauthorized: bool = True

from typing import Any, Mapping, Protocol

from pydantic import BaseModel, ConfigDict, Field

from bluebubbles.base.http import DEFAULT_TIMEOUT, RequestOptions
from bluebubbles.base.node import BlueBubblesException

CREDENTIALS_NAME = "BlueBubblesCredentials"


class CredentialsMissingError(BlueBubblesException):
    pass

class RequestError(BlueBubblesException):
    def __init__(self, message: str, status_code: int|None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

class RequestValidationError(RequestError):
    pass

class AuthenticationError(RequestError):
    pass

class PermissionsError(RequestError):
    pass

class TransportError(RequestError):
    pass


class Credentials(BaseModel):
    server_url: str
    password: str


class RequestDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)
    method: str = "GET"
    endpoint: str
    params: dict[str, Any] = {}
    headers: dict[str, str] = {}
    body: Any = None
    form_data: dict[str, Any] = {}
    strict_ssl: bool = False
    timeout: float = DEFAULT_TIMEOUT
    json_: bool = Field(default=True, alias="json")


class ExecutionContext(Protocol):
    async def get_credentials(self, name: str) -> Credentials|Mapping|None:
        ...

    async def http_request(self, options: RequestOptions) -> Any:
        ...

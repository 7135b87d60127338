import logging
from typing import Any

from bluebubbles.base.http import RequestOptions
from bluebubbles.base.node import redact

from .types import (
    CREDENTIALS_NAME,
    AuthenticationError,
    Credentials,
    CredentialsMissingError,
    ExecutionContext,
    PermissionsError,
    RequestDescriptor,
    RequestValidationError,
    TransportError,
)

logger = logging.getLogger(__name__)

JSON = "application/json"


def sanitize_host(server_url: str) -> str:
    host = server_url.strip().rstrip("/")
    if "://" not in host:
        host = f"http://{host}"
    return host


def build_headers(method: str, headers: dict[str, str], multipart: bool = False) -> dict[str, str]:
    out = dict(headers)
    if "Content-Type" not in out and method.upper() == "POST" and not multipart:
        out["Content-Type"] = JSON
    if "Accept" not in out and method.upper() != "DELETE":
        out["Accept"] = JSON
    return out


def has_content(body: Any) -> bool:
    return bool(body)


def build_options(request: RequestDescriptor, credentials: Credentials) -> RequestOptions:
    params = dict(request.params)
    if "password" not in params:
        params["password"] = credentials.password

    endpoint = request.endpoint
    if endpoint.startswith("/"):
        endpoint = endpoint[1:]

    options: dict[str, Any] = {
        "method": request.method.upper(),
        "url": f"{sanitize_host(credentials.server_url)}/{endpoint}",
        "headers": build_headers(request.method, request.headers, multipart=bool(request.form_data)),
        "qs": params,
        "json": request.json_,
        "timeout": request.timeout,
        "reject_unauthorized": not request.strict_ssl,
    }
    if has_content(request.body):
        options["body"] = request.body
    if request.form_data:
        options["form_data"] = request.form_data
    return RequestOptions(**options)


def _nested(body: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(body, dict):
            return None
        body = body.get(key)
    return body


def map_error(error: Exception) -> TransportError|RequestValidationError|AuthenticationError|PermissionsError:
    status_code = getattr(error, "status_code", None)
    match status_code:
        case 400:
            body = getattr(error, "body", None)
            message = _nested(body, "error", "message")
            if message is None:
                message = _nested(body, "message")
            if message is None:
                message = "Unknown"
            return RequestValidationError(f"Validation Error: {message}", status_code)
        case 401:
            return AuthenticationError("Authentication Error: The BlueBubbles credentials are not valid!",
                                       status_code)
        case 403:
            return PermissionsError("Permissions Error: Credentials are not authorized to access this resource!",
                                    status_code)
    message = getattr(error, "message", None) or str(error) or type(error).__name__
    return TransportError(f"BlueBubbles Error: {message}", status_code)


async def get_credentials(ctx: ExecutionContext, name: str = CREDENTIALS_NAME) -> Credentials:
    credentials = await ctx.get_credentials(name)
    if credentials is None:
        raise CredentialsMissingError("No credentials got returned!")
    if isinstance(credentials, Credentials):
        return credentials
    return Credentials.model_validate(dict(credentials))


async def bluebubbles_request(ctx: ExecutionContext,
                              request: RequestDescriptor|None = None,
                              **kwargs) -> Any:
    """Send a request to the BlueBubbles server configured in `ctx`.

    Either pass a `RequestDescriptor` or its fields as keyword arguments.
    Returns the response body, raises one of the `RequestError` subclasses
    when the server (or the connection) fails.
    """
    if request is None:
        request = RequestDescriptor(**kwargs)
    credentials = await get_credentials(ctx)
    options = build_options(request, credentials)

    logger.debug("request %s %s qs=%s headers=%s", options.method, options.url,
                 redact(options.qs), options.headers)
    try:
        return await ctx.http_request(options)
    except Exception as e:
        raise map_error(e) from e

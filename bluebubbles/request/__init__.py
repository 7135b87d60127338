from .request import bluebubbles_request, build_options, get_credentials, map_error, sanitize_host
from .types import (
    CREDENTIALS_NAME,
    AuthenticationError,
    Credentials,
    CredentialsMissingError,
    ExecutionContext,
    PermissionsError,
    RequestDescriptor,
    RequestError,
    RequestValidationError,
    TransportError,
)

from .actions import Attachment, BlueBubblesSession, bind_operation, resolve_operation
from .base.node import BlueBubblesException
from .context import Server, StaticContext
from .request import (
    AuthenticationError,
    Credentials,
    CredentialsMissingError,
    ExecutionContext,
    PermissionsError,
    RequestDescriptor,
    RequestError,
    RequestValidationError,
    TransportError,
    bluebubbles_request,
)

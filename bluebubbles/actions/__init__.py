from .operations import OPERATIONS, bind_operation, resolve_operation
from .session import BlueBubblesSession
from .types import Attachment

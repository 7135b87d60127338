from .context import StaticContext
from .types import Server

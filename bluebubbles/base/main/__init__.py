from .main import ENV_PREFIX, Main, substitute_env
from .types import Config

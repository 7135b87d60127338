from pydantic import BaseModel, ConfigDict

from bluebubbles.base.http import DEFAULT_TIMEOUT


class Server(BaseModel):
    model_config = ConfigDict(strict=True)
    server_url: str
    password: str
    proxy: str|None = None
    strict_ssl: bool = False
    timeout: float = DEFAULT_TIMEOUT

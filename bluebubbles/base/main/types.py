from pydantic import BaseModel, ConfigDict

from bluebubbles.context import Server


class Config(BaseModel):
    model_config = ConfigDict(strict=True)
    config_dir: str
    server: Server

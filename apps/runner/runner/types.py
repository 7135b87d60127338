from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from bluebubbles.base.main import Config


class Action(BaseModel):
    model_config = ConfigDict(strict=True)
    name: str
    resource: str
    operation: str
    parameters: dict[str, Any] = {}


class RunnerConfig(Config):
    actions: List[Action]


class ActionResult(BaseModel):
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    action: str
    ok: bool
    response: Any = None
    error: str|None = None

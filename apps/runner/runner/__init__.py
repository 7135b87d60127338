from .action_runner import ActionRunner
from .types import Action, ActionResult, RunnerConfig

from asyncio import Task, TaskGroup
from typing import List

from pydantic import ValidationError

from bluebubbles.actions import BlueBubblesSession, bind_operation
from bluebubbles.base.node import BlueBubblesException, Node
from bluebubbles.context import StaticContext
from bluebubbles.request import ExecutionContext
from bluebubbles.utils import parse_date

from .types import Action, ActionResult, RunnerConfig


class ActionRunner(Node):
    def __init__(self, action: Action, ctx: ExecutionContext, config: RunnerConfig):
        super().__init__(__name__)
        self.action = action
        self.ctx = ctx
        self.config = config

    @staticmethod
    def register(tg: TaskGroup, config: RunnerConfig) -> List[Task[ActionResult]]:
        ctx = StaticContext.from_server(config.server)
        return [tg.create_task(ActionRunner(action, ctx, config).run()) for action in config.actions]

    def session(self) -> BlueBubblesSession:
        return BlueBubblesSession(self.ctx,
                                  strict_ssl=self.config.server.strict_ssl,
                                  timeout=self.config.server.timeout)

    async def run(self) -> ActionResult:
        try:
            operation = bind_operation(self.session(), self.action.resource, self.action.operation)
            response = await operation(**self.action.parameters)
        except ValidationError as e:
            error = self.pydantic_error(e)
            self.runtime_error(str(error))
            raise BlueBubblesException(error) from e
        except (BlueBubblesException, TypeError, ValueError, OSError) as e:
            result = ActionResult(action=self.action.name, ok=False, error=str(e))
            self.logger.error("[%s] %s/%s failed at %s: %s", result.action, self.action.resource,
                              self.action.operation, parse_date(result.timestamp), result.error)
            return result
        result = ActionResult(action=self.action.name, ok=True, response=response)
        self.logger.info("[%s] %s/%s done at %s", result.action, self.action.resource,
                         self.action.operation, parse_date(result.timestamp))
        self.logger.debug("[%s] response: %s", result.action, response)
        return result

#!/usr/bin/env python3.12

import asyncio
import sys

from runner import ActionRunner, RunnerConfig

from bluebubbles.base.main import Main


class Runner(Main):
    async def handler(self) -> int:
        config = RunnerConfig(**self.read_config())
        async with asyncio.TaskGroup() as tg:
            tasks = ActionRunner.register(tg, config)
        failed = [task.result().action for task in tasks if not task.result().ok]
        if failed:
            self.logger.error("%d of %d actions failed: %s", len(failed), len(tasks), ", ".join(failed))
            return 1
        return 0

    def run(self):
        sys.exit(asyncio.run(self.handler()))

if __name__ == '__main__':
    Runner().run()

import asyncio
import glob
import logging
import os
import re
from abc import ABC, abstractmethod

import yaml
from dotenv import load_dotenv

ENV_PREFIX = "BLUEBUBBLES_"
# only {BLUEBUBBLES_*} placeholders, yaml flow mappings keep their braces
PLACEHOLDER = re.compile(r"\{(" + ENV_PREFIX + r"[A-Z0-9_]+)\}")


def substitute_env(text: str, envs: dict[str, str]) -> str:
    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in envs:
            raise ValueError(f"environment {name} not set")
        return envs[name]
    return PLACEHOLDER.sub(replace, text)


class Main(ABC):
    loggers = ("bluebubbles", "runner")

    def __init__(self):
        self._logging_config()
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    async def handler(self):
        pass

    def run(self):
        asyncio.run(self.handler())

    def _logging_config(self):
        formatstr = "%(name)s %(levelname)s %(message)s"
        if os.getenv(f"{ENV_PREFIX}DEBUG") is not None:
            logging.basicConfig(level=logging.DEBUG, format=formatstr)
            return
        logging.basicConfig(level=logging.INFO, format=formatstr)
        for v in logging.Logger.manager.loggerDict.values():
            if isinstance(v, logging.Logger):
                if not v.name.startswith(self.loggers):
                    v.disabled = True

    def _config_files(self, configdir: str) -> list[str]:
        files = glob.glob(f"{configdir}/*.yaml") + glob.glob(f"{configdir}/*.yml")
        return sorted(files)

    def read_config(self) -> dict:
        load_dotenv()
        configdir = os.getenv(f"{ENV_PREFIX}CONFIG_DIR")
        if configdir is None:
            raise ValueError(f"environment {ENV_PREFIX}CONFIG_DIR not set")
        if not os.path.isdir(configdir):
            raise ValueError(f"{ENV_PREFIX}CONFIG_DIR={configdir} is not a directory")
        filtered_envs = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
        config = {"config_dir": configdir}
        for file in self._config_files(configdir):
            self.logger.debug("read config file %s", file)
            with open(file, "r", encoding="utf-8") as f:
                plain_config = substitute_env(f.read(), filtered_envs)
            config = {**config, **(yaml.safe_load(plain_config) or {})}
        return config

import logging
from typing import Any

from pydantic import ValidationError

REDACTED = "********"
SECRET_KEYS = ("password",)


class BlueBubblesException(Exception):
    pass

class Node:
    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def pydantic_error(self, e: ValidationError) -> dict:
        reasons = []
        for error in e.errors():
            reasons.append({
                'loc': error['loc'],
                'msg': error['msg'],
                'type': error['type']
            })
        return {'reasons': reasons, 'input': e.errors()[0].get('input')}

    def runtime_error(self, message: str):
        self.logger.error("Runtime Error: %s", message)


def redact(values: dict[str, Any]) -> dict[str, Any]:
    return {k: REDACTED if k in SECRET_KEYS else v for k, v in values.items()}

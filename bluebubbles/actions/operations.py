from typing import Any, Awaitable, Callable

from bluebubbles.base.node import BlueBubblesException
from bluebubbles.utils import normalize

from .session import BlueBubblesSession

# resource -> operation -> BlueBubblesSession method
OPERATIONS = {
    "server": {
        "ping": "ping",
        "get_info": "get_info",
        "get_statistics": "get_statistics",
    },
    "chat": {
        "query": "query_chats",
        "get": "get_chat",
        "get_messages": "get_chat_messages",
        "create": "create_chat",
        "mark_read": "mark_chat_read",
    },
    "message": {
        "send_text": "send_text",
        "send_attachment": "send_attachment",
        "query": "query_messages",
        "get": "get_message",
    },
    "handle": {
        "query": "query_handles",
        "get": "get_handle",
    },
    "contact": {
        "get_all": "get_contacts",
    },
    "api": {
        "request": "api_request",
    },
}


def resolve_operation(resource: str, operation: str) -> str:
    resources = {normalize(k): v for k, v in OPERATIONS.items()}
    operations = resources.get(normalize(resource))
    if operations is None:
        raise BlueBubblesException(f"unknown resource '{resource}'")
    operations = {normalize(k): v for k, v in operations.items()}
    method = operations.get(normalize(operation))
    if method is None:
        raise BlueBubblesException(f"unknown operation '{operation}' for resource '{resource}'")
    return method


def bind_operation(session: BlueBubblesSession, resource: str, operation: str) -> Callable[..., Awaitable[Any]]:
    return getattr(session, resolve_operation(resource, operation))

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from bluebubbles.request import CREDENTIALS_NAME

PASSWORD = "secret"
SERVER_URL = "http://mac.local:1234/"


class FakeContext:
    def __init__(self, credentials=None, response=None, error=None):
        self.credentials = credentials
        self.http_request = AsyncMock(return_value=response, side_effect=error)

    async def get_credentials(self, name):
        if name != CREDENTIALS_NAME:
            return None
        return self.credentials

    @property
    def options(self):
        return self.http_request.await_args.args[0]


@pytest.fixture
def ctx():
    return FakeContext({"server_url": SERVER_URL, "password": PASSWORD},
                       response={"status": 200, "message": "Success", "data": {}})


def _envelope(data, status=200, message="Success"):
    return web.json_response({"status": status, "message": message, "data": data}, status=status)


@web.middleware
async def password_check(request, handler):
    if request.query.get("password") != PASSWORD:
        return web.json_response({"status": 401, "message": "Unauthorized"}, status=401)
    return await handler(request)


async def _ping(request):
    return _envelope("pong", message="Ping received!")


async def _server_info(request):
    return _envelope({"os_version": "14.4", "server_version": "1.9.0", "private_api": False})


async def _send_text(request):
    body = await request.json()
    if not body.get("chatGuid"):
        return web.json_response({"status": 400, "message": "Bad request",
                                  "error": {"type": "Validation Error", "message": "chatGuid is required"}},
                                 status=400)
    return _envelope({"guid": "msg-1", "text": body["message"], "tempGuid": body["tempGuid"]})


@pytest_asyncio.fixture
async def bluebubbles_server():
    app = web.Application(middlewares=[password_check])
    app.router.add_get("/api/v1/ping", _ping)
    app.router.add_get("/api/v1/server/info", _server_info)
    app.router.add_post("/api/v1/message/text", _send_text)
    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()

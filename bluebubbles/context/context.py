from typing import Any

from bluebubbles.base.http import HTTP, HttpClient, RequestOptions
from bluebubbles.request import CREDENTIALS_NAME, Credentials

from .types import Server


class StaticContext:
    """Execution context for running actions outside a workflow host.

    Credentials are looked up by name from a fixed mapping and requests go
    through the aiohttp `HttpClient`.
    """

    def __init__(self, credentials: dict[str, Credentials], http: HTTP|None = None):
        self.credentials = dict(credentials)
        self.http_client = HttpClient(http)

    @classmethod
    def from_server(cls, server: Server) -> "StaticContext":
        credentials = Credentials(server_url=server.server_url, password=server.password)
        return cls({CREDENTIALS_NAME: credentials}, HTTP(proxy=server.proxy))

    async def get_credentials(self, name: str) -> Credentials|None:
        return self.credentials.get(name)

    async def http_request(self, options: RequestOptions) -> Any:
        return await self.http_client.request(options)

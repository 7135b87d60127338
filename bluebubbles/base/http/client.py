from typing import Any

import aiohttp

from .types import HTTP, HttpRequestError, RequestOptions


def query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(query_value(v) for v in value)
    return str(value)


def form_data(fields: dict[str, Any]) -> aiohttp.FormData:
    # (filename, content, content_type) tuples become file parts
    data = aiohttp.FormData()
    for name, value in fields.items():
        if isinstance(value, tuple):
            filename, content, content_type = value
            data.add_field(name, content, filename=filename, content_type=content_type)
        else:
            data.add_field(name, query_value(value))
    return data


class HttpClient:
    def __init__(self, config: HTTP|None = None):
        self.config = config or HTTP()
        self.client_args = {}
        if self.config.proxy is not None:
            self.client_args["proxy"] = self.config.proxy

    def _request_args(self, options: RequestOptions) -> dict:
        request_args: dict[str, Any] = {
            "headers": options.headers,
            "params": {k: query_value(v) for k, v in options.qs.items() if v is not None},
            "timeout": aiohttp.ClientTimeout(total=options.timeout),
        }
        if options.reject_unauthorized is False:
            request_args["ssl"] = False
        if options.form_data:
            request_args["data"] = form_data(options.form_data)
        elif options.body is not None:
            if options.json_:
                request_args["json"] = options.body
            else:
                request_args["data"] = options.body
        return request_args

    async def _read(self, response: aiohttp.ClientResponse, as_json: bool) -> Any:
        if as_json:
            # BlueBubbles answers some errors with text/html
            return await response.json(content_type=None)
        return await response.text()

    async def _error_body(self, response: aiohttp.ClientResponse) -> Any:
        text = await response.text()
        try:
            return await response.json(content_type=None)
        except ValueError:
            return text

    async def request(self, options: RequestOptions) -> Any:
        async with aiohttp.ClientSession(**self.client_args) as session:
            async with session.request(options.method.upper(),
                                       options.url,
                                       **self._request_args(options)) as response:
                if response.status >= 400:
                    body = await self._error_body(response)
                    raise HttpRequestError(f"{response.status} - {response.reason}",
                                           status_code=response.status,
                                           body=body)
                return await self._read(response, options.json_)

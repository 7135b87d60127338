import uuid
from typing import Any, List
from urllib.parse import quote

from bluebubbles.base.http import DEFAULT_TIMEOUT
from bluebubbles.base.node import BlueBubblesException, Node
from bluebubbles.request import ExecutionContext, RequestDescriptor, bluebubbles_request
from bluebubbles.utils import (
    UNKNOWN_ERROR,
    name_value_pairs_to_object,
    normalize_api_endpoint,
    parse_errors,
)

from .endpoints import (
    CHAT,
    CHAT_MESSAGES,
    CHAT_NEW,
    CHAT_QUERY,
    CHAT_READ,
    CONTACT,
    HANDLE,
    HANDLE_QUERY,
    MESSAGE,
    MESSAGE_ATTACHMENT,
    MESSAGE_QUERY,
    MESSAGE_TEXT,
    PING,
    SERVER_INFO,
    SERVER_STATISTICS,
)
from .types import Attachment


class BlueBubblesSession(Node):
    def __init__(self, ctx: ExecutionContext, strict_ssl: bool = False, timeout: float = DEFAULT_TIMEOUT):
        super().__init__(__name__)
        self.ctx = ctx
        self.strict_ssl = strict_ssl
        self.timeout = timeout

    def _check_result(self, response: Any):
        if not isinstance(response, dict) or "status" not in response:
            return
        status = response["status"]
        if isinstance(status, int) and not 200 <= status < 300:
            errors = parse_errors(response)
            if errors == [UNKNOWN_ERROR] and response.get("message"):
                errors = [response["message"]]
            raise BlueBubblesException(f"invalid response from server: {'; '.join(errors)}")

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        request = RequestDescriptor(method=method,
                                    endpoint=endpoint,
                                    strict_ssl=self.strict_ssl,
                                    timeout=self.timeout,
                                    **kwargs)
        response = await bluebubbles_request(self.ctx, request)
        self._check_result(response)
        return response

    def _with(self, params: dict, with_: List[str]|None) -> dict:
        if with_:
            params["with"] = ",".join(with_)
        return params

    # --- server ------------------------------------------------------------------

    async def ping(self) -> Any:
        return await self._request("GET", PING)

    async def get_info(self) -> Any:
        return await self._request("GET", SERVER_INFO)

    async def get_statistics(self) -> Any:
        return await self._request("GET", SERVER_STATISTICS)

    # --- chat --------------------------------------------------------------------

    async def query_chats(self, limit: int = 1000, offset: int = 0, sort: str|None = None,
                          with_: List[str]|None = None) -> Any:
        body: dict[str, Any] = {"limit": limit, "offset": offset}
        if sort is not None:
            body["sort"] = sort
        if with_:
            body["with"] = with_
        return await self._request("POST", CHAT_QUERY, body=body)

    async def get_chat(self, guid: str, with_: List[str]|None = None) -> Any:
        return await self._request("GET", CHAT.format(guid=quote(guid, safe="")),
                                   params=self._with({}, with_))

    async def get_chat_messages(self, guid: str, limit: int = 100, offset: int = 0, sort: str = "DESC",
                                after: int|None = None, before: int|None = None,
                                with_: List[str]|None = None) -> Any:
        params: dict[str, Any] = {"limit": limit, "offset": offset, "sort": sort}
        if after is not None:
            params["after"] = after
        if before is not None:
            params["before"] = before
        return await self._request("GET", CHAT_MESSAGES.format(guid=quote(guid, safe="")),
                                   params=self._with(params, with_))

    async def create_chat(self, addresses: List[str], message: str|None = None,
                          method: str = "apple-script", service: str = "iMessage") -> Any:
        body: dict[str, Any] = {"addresses": addresses, "method": method, "service": service}
        if message:
            body["message"] = message
        return await self._request("POST", CHAT_NEW, body=body)

    async def mark_chat_read(self, guid: str) -> Any:
        return await self._request("POST", CHAT_READ.format(guid=quote(guid, safe="")))

    # --- message -----------------------------------------------------------------

    async def send_text(self, chat_guid: str, message: str, temp_guid: str|None = None,
                        method: str = "apple-script", subject: str|None = None,
                        effect_id: str|None = None, selected_message_guid: str|None = None) -> Any:
        body: dict[str, Any] = {
            "chatGuid": chat_guid,
            "tempGuid": temp_guid or str(uuid.uuid4()),
            "message": message,
            "method": method,
        }
        if subject:
            body["subject"] = subject
        if effect_id:
            body["effectId"] = effect_id
        if selected_message_guid:
            body["selectedMessageGuid"] = selected_message_guid
        return await self._request("POST", MESSAGE_TEXT, body=body)

    async def send_attachment(self, chat_guid: str, attachment: Attachment|dict,
                              temp_guid: str|None = None, method: str = "apple-script") -> Any:
        attachment = Attachment.model_validate(attachment)
        form = {
            "chatGuid": chat_guid,
            "tempGuid": temp_guid or str(uuid.uuid4()),
            "name": attachment.name,
            "method": method,
            "attachment": (attachment.name, await attachment.read(), attachment.content_type),
        }
        return await self._request("POST", MESSAGE_ATTACHMENT, form_data=form)

    async def query_messages(self, chat_guid: str|None = None, limit: int = 100, offset: int = 0,
                             sort: str = "DESC", after: int|None = None, before: int|None = None,
                             where: List[dict]|None = None, with_: List[str]|None = None) -> Any:
        body: dict[str, Any] = {"limit": limit, "offset": offset, "sort": sort}
        if chat_guid:
            body["chatGuid"] = chat_guid
        if after is not None:
            body["after"] = after
        if before is not None:
            body["before"] = before
        if where:
            body["where"] = where
        if with_:
            body["with"] = with_
        return await self._request("POST", MESSAGE_QUERY, body=body)

    async def get_message(self, guid: str, with_: List[str]|None = None) -> Any:
        return await self._request("GET", MESSAGE.format(guid=quote(guid, safe="")),
                                   params=self._with({}, with_))

    # --- handle ------------------------------------------------------------------

    async def query_handles(self, address: str|None = None, limit: int = 1000, offset: int = 0,
                            with_: List[str]|None = None) -> Any:
        body: dict[str, Any] = {"limit": limit, "offset": offset}
        if address:
            body["address"] = address
        if with_:
            body["with"] = with_
        return await self._request("POST", HANDLE_QUERY, body=body)

    async def get_handle(self, address: str) -> Any:
        return await self._request("GET", HANDLE.format(address=quote(address, safe="")))

    # --- contact -----------------------------------------------------------------

    async def get_contacts(self) -> Any:
        return await self._request("GET", CONTACT)

    # --- generic -----------------------------------------------------------------

    async def api_request(self, endpoint: str, method: str = "GET",
                          query: List[dict]|None = None, headers: List[dict]|None = None,
                          body: Any = None, json: bool = True) -> Any:
        """Call any endpoint of the BlueBubbles API.

        `query` and `headers` are lists of `{name, value}` pairs.
        """
        return await self._request(method.upper(), normalize_api_endpoint(endpoint),
                                   params=name_value_pairs_to_object(query or []),
                                   headers={k: str(v) for k, v in name_value_pairs_to_object(headers or []).items()},
                                   body=body,
                                   json=json)

from bluebubbles.utils import API_PREFIX

PING = f"{API_PREFIX}/ping"
SERVER_INFO = f"{API_PREFIX}/server/info"
SERVER_STATISTICS = f"{API_PREFIX}/server/statistics/totals"

CHAT_QUERY = f"{API_PREFIX}/chat/query"
CHAT_NEW = f"{API_PREFIX}/chat/new"
CHAT = API_PREFIX + "/chat/{guid}"
CHAT_MESSAGES = API_PREFIX + "/chat/{guid}/message"
CHAT_READ = API_PREFIX + "/chat/{guid}/read"

MESSAGE_TEXT = f"{API_PREFIX}/message/text"
MESSAGE_ATTACHMENT = f"{API_PREFIX}/message/attachment"
MESSAGE_QUERY = f"{API_PREFIX}/message/query"
MESSAGE = API_PREFIX + "/message/{guid}"

HANDLE_QUERY = f"{API_PREFIX}/handle/query"
HANDLE = API_PREFIX + "/handle/{address}"

CONTACT = f"{API_PREFIX}/contact"

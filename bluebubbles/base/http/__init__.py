from .client import HttpClient
from .types import DEFAULT_TIMEOUT, HTTP, HttpRequestError, RequestOptions

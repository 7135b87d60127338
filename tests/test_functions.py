import pytest

from bluebubbles.utils import (
    API_PREFIX,
    INVALID_DATE,
    UNKNOWN_ERROR,
    is_null_or_empty,
    name_value_pairs_to_object,
    normalize,
    normalize_api_endpoint,
    parse_date,
    parse_errors,
)


def test_api_prefix():
    assert API_PREFIX == "api/v1"


@pytest.mark.parametrize("value, expected", [
    ("2024-01-02T03:04:05Z", "1/2/2024, 03:04:05"),
    ("2024-01-02T03:04:05.123Z", "1/2/2024, 03:04:05"),
    ("2024-12-31T23:30:00+02:00", "12/31/2024, 21:30:00"),
    ("2024-01-02T15:00:00", "1/2/2024, 15:00:00"),
    ("2024-01-02", "1/2/2024, 00:00:00"),
])
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", ["not a date", "", None, "2024-13-45"])
def test_parse_date_invalid(value):
    assert parse_date(value) == INVALID_DATE


def test_normalize():
    assert normalize(" My_Value ") == "myvalue"
    assert normalize("Send Text") == normalize("send_text") == "sendtext"


def test_normalize_falsy_is_returned_unchanged():
    assert normalize("") == ""
    assert normalize(None) is None


def test_parse_errors_list_is_returned_verbatim():
    assert parse_errors({"errors": ["a", "b"]}) == ["a", "b"]


def test_parse_errors_flattens_mapping():
    data = {"errors": {"field1": ["x"], "field2": ["y", "z"]}}
    assert parse_errors(data) == ["x", "y", "z"]


def test_parse_errors_nested_data():
    assert parse_errors({"data": {"errors": {"chatGuid": ["required"]}}}) == ["required"]


@pytest.mark.parametrize("data", [{}, None, {"errors": {}}, {"data": "nothing"}])
def test_parse_errors_unknown(data):
    assert parse_errors(data) == [UNKNOWN_ERROR]


def test_name_value_pairs_last_write_wins():
    pairs = [{"name": "a", "value": 1}, {"name": "b", "value": 2}, {"name": "a", "value": 3}]
    assert name_value_pairs_to_object(pairs) == {"a": 3, "b": 2}
    assert name_value_pairs_to_object([]) == {}


@pytest.mark.parametrize("endpoint, expected", [
    ("/api/v1/ping", "api/v1/ping"),
    ("/api/v1/ping/", "api/v1/ping"),
    ("api/v1/ping/", "api/v1/ping"),
    ("api/v1/ping", "api/v1/ping"),
    ("//ping//", "/ping/"),
    ("/", ""),
])
def test_normalize_api_endpoint(endpoint, expected):
    assert normalize_api_endpoint(endpoint) == expected


def test_is_null_or_empty():
    assert is_null_or_empty(None)
    assert is_null_or_empty("")
    assert is_null_or_empty([])
    assert not is_null_or_empty("x")
    assert not is_null_or_empty([0])

from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping

API_VERSION = 1
API_PREFIX = f"api/v{API_VERSION}"

INVALID_DATE = "Invalid Date"
UNKNOWN_ERROR = "An unknown error has occurred"


def parse_date(date: str|None) -> str:
    """Format an ISO date as `M/D/YYYY, HH:MM:SS` (UTC, 24h).

    Naive values are taken as UTC. Anything unparsable gives "Invalid Date".
    """
    if not isinstance(date, str) or not date.strip():
        return INVALID_DATE
    try:
        parsed = datetime.fromisoformat(date.strip())
    except ValueError:
        return INVALID_DATE
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)
    return f"{parsed.month}/{parsed.day}/{parsed.year}, {parsed:%H:%M:%S}"


def is_null_or_empty(value: Any) -> bool:
    return not value or len(value) == 0


def parse_errors(data: Mapping|None) -> List[str]:
    data = data or {}
    errors = data.get("errors")
    if isinstance(errors, list):
        return errors

    if not errors:
        nested = data.get("data")
        errors = nested.get("errors") if isinstance(nested, Mapping) else None

    errs: List[str] = []
    for key in errors or {}:
        errs.extend(errors[key])

    if is_null_or_empty(errs):
        errs = [UNKNOWN_ERROR]
    return errs


def normalize(value: str) -> str:
    if not value:
        return value
    return value.lower().replace(" ", "").replace("_", "").strip()


def name_value_pairs_to_object(pairs: Iterable[Mapping]) -> dict:
    return {pair["name"]: pair["value"] for pair in pairs}


def normalize_api_endpoint(endpoint: str) -> str:
    if endpoint.startswith("/"):
        endpoint = endpoint[1:]
    if endpoint.endswith("/"):
        endpoint = endpoint[:-1]
    return endpoint

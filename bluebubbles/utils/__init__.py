from .functions import (
    API_PREFIX,
    API_VERSION,
    INVALID_DATE,
    UNKNOWN_ERROR,
    is_null_or_empty,
    name_value_pairs_to_object,
    normalize,
    normalize_api_endpoint,
    parse_date,
    parse_errors,
)

from .user_service import (
    normalize_text,
    validate_username,
)
from .exercise_service import (
    EPOCH,
    build_log_query,
    coerce_stored_date,
    coerce_stored_duration,
    format_date,
    parse_date,
    parse_duration,
    parse_limit,
    parse_number,
    resolve_exercise_date,
    today,
)

__all__ = [
    "normalize_text",
    "validate_username",
    "EPOCH",
    "build_log_query",
    "coerce_stored_date",
    "coerce_stored_duration",
    "format_date",
    "parse_date",
    "parse_duration",
    "parse_limit",
    "parse_number",
    "resolve_exercise_date",
    "today",
]

from typing import Any, Optional


def normalize_text(value: Any) -> Optional[str]:
    """
    Trim a raw text field.

    Args:
        value: The raw value received from the client.

    Returns:
        Optional[str]: The trimmed text, or None if the value is not a string
        or is empty after trimming.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def validate_username(username: Any) -> bool:
    """
    Validate a username. Must be a string that is non-empty after trimming.

    Args:
        username: The raw username.

    Returns:
        bool: True if the username is valid, False otherwise.
    """
    return normalize_text(username) is not None

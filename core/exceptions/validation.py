class ValidationError(Exception):
    """Raised when a required request field is missing or malformed."""
    pass

class NotFoundError(Exception):
    """Raised when a referenced record does not exist."""
    pass

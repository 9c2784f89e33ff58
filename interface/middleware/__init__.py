from interface.middleware.cors import add_cors_middleware
from interface.middleware.error_handlers import register_exception_handlers
from interface.middleware.request_logging import add_request_logging

__all__ = ["add_cors_middleware", "register_exception_handlers", "add_request_logging"]

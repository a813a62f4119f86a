"""
API middleware package.
"""

from .error_handler import add_error_handlers
from .logging import LoggingMiddleware

__all__ = ["add_error_handlers", "LoggingMiddleware"]

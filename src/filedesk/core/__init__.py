"""Core utilities and shared components for filedesk."""

from .config import settings
from .exceptions import FiledeskError, ValidationError
from .observability import get_logger

__all__ = ["settings", "FiledeskError", "ValidationError", "get_logger"]

"""Core configuration and logging exports."""

from pixelkit.core.config import Settings, get_settings, settings
from pixelkit.core.logging import get_logger, get_operation_id, set_operation_id, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "setup_logging",
    "get_logger",
    "set_operation_id",
    "get_operation_id",
]

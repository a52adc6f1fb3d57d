"""
Общие утилиты: логирование и константы.
"""

from evpool.common.constants import EventTypes, TypeMsg
from evpool.common.logger import get_logger, log_debug, log_error, log_info, log_warning, setup_logging

__all__ = [
    "EventTypes",
    "TypeMsg",
    "get_logger",
    "setup_logging",
    "log_info",
    "log_debug",
    "log_warning",
    "log_error",
]

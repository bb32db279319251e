# 🧰 realizeit/shared/utils/__init__.py
"""
🧰 Пакет `shared.utils` - допоміжні інструменти без доменної логіки.

🔹 `logger.py` - єдина схема логування (`init_logging`, `get_logger`, `LOG_NAME`).
"""

from .logger import LOG_NAME, LoggingConfig, get_logger, init_logging, init_logging_from_config

__all__ = [
    "LOG_NAME",
    "LoggingConfig",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
]

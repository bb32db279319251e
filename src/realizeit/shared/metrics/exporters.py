# 📈 realizeit/shared/metrics/exporters.py
"""📈 Ледачий запуск HTTP-експортера `/metrics` (один раз на процес)."""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import start_http_server

# 🔠 Системні імпорти
import logging

from realizeit.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.metrics")

_started_port: int | None = None


def maybe_start_prometheus(port: int) -> bool:
    """Піднімає експортер, якщо його ще не запущено; повертає True при першому запуску."""
    global _started_port
    if _started_port is not None:
        logger.debug("📈 Експортер уже працює на порті %s", _started_port)
        return False
    start_http_server(port)
    _started_port = port
    return True

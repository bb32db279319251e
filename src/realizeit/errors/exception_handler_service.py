# 🛡️ realizeit/errors/exception_handler_service.py
"""
🛡️ Перетворює винятки на сповіщення для покупця.

🔹 `UserVisibleError` показується дослівно.
🔹 Будь-що інше - лог з трасою і нейтральний fallback "Unexpected error".
🔹 `CancelledError` ніколи не ковтається.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from realizeit.shared.utils.logger import LOG_NAME
from .custom_errors import UserVisibleError

logger = logging.getLogger(f"{LOG_NAME}.errors")

FALLBACK_MESSAGE = "Unexpected error"


# ================================
# 🔔 DTO СПОВІЩЕННЯ
# ================================
@dataclass(frozen=True)
class Notification:
    """Дані для тосту: заголовок, текст і варіант ('default' | 'destructive')."""
    title: str
    description: str = ""
    variant: str = "default"
    lines: Tuple[str, ...] = field(default_factory=tuple)      # 📋 Окремі пункти (для списку помилок)


class ExceptionHandlerService:
    """🧠 Єдина точка, де виняток стає текстом для UI."""

    def to_notification(self, error: BaseException, *, title: str = "Checkout failed") -> Notification:
        if isinstance(error, asyncio.CancelledError):           # ⏹️ Скасування передаємо вище
            raise error

        if isinstance(error, UserVisibleError):
            logger.warning("⚠️ %s: %s", type(error).__name__, error, extra=self._extract_extra(error))
            return Notification(title=title, description=error.message or FALLBACK_MESSAGE, variant="destructive")

        logger.error("🔥 Unhandled error: %r", error, exc_info=error)
        message = str(error).strip() or FALLBACK_MESSAGE
        return Notification(title=title, description=message, variant="destructive")

    @staticmethod
    def validation_notification(messages: Tuple[str, ...]) -> Notification:
        """📋 Усі порушення одним сповіщенням, кожне з нового рядка."""
        return Notification(
            title="Checkout incomplete",
            description="\n".join(messages),
            variant="destructive",
            lines=tuple(messages),
        )

    @staticmethod
    def _extract_extra(error: UserVisibleError) -> Optional[Mapping[str, Any]]:
        log_extra = getattr(error, "to_log_extra", None)
        if callable(log_extra):
            payload = log_extra()
            if isinstance(payload, Mapping):
                return dict(payload)
        return None

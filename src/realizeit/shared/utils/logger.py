# 📜 realizeit/shared/utils/logger.py
"""
📜 Єдина схема логування для ядра магазину RealizeIt.

🔹 Налаштовує логер `realizeit` (консоль + файл із ротацією за часом).
🔹 Уміє писати файл у JSON, щоб логи прайсингу й чекауту читались машинно.
🔹 Дає `get_logger()` для дочірніх логерів зі спільним префіксом.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                     # 📦 Серіалізація JSON-записів
import logging                                                  # 🪵 Стандартні логери
import sys                                                      # 🧵 stdout для консолі
import threading                                                # 🔒 Захист від паралельної ініціалізації
from dataclasses import dataclass, field                        # 🧱 Конфіг логування
from logging.handlers import TimedRotatingFileHandler           # 📁 Ротація файлу
from pathlib import Path                                        # 📂 Шляхи до лог-файлів
from typing import Any, Dict, Mapping, Optional, Union          # 🧰 Типізація

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "realizeit"                                     # 🏷️ Кореневий неймспейс
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(name)s: %(message)s"
DEFAULT_FILE: str = "logs/realizeit.log"

# Поля LogRecord, які не потрапляють у JSON як extra
_RESERVED_FIELDS = frozenset(
    {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "levelno", "lineno", "module", "msecs", "message", "msg", "name",
        "pathname", "process", "processName", "relativeCreated", "stack_info",
        "thread", "threadName", "levelname", "funcName", "taskName",
    }
)

_lock = threading.Lock()


@dataclass
class LoggingConfig:
    """Налаштування логування з дефолтами для локального запуску."""
    level: str = "INFO"
    console: bool = True
    json: bool = False
    file: Optional[str] = DEFAULT_FILE                          # 📁 None → без файлового виводу
    when: str = "midnight"
    backup_count: int = 7
    suppress: Dict[str, str] = field(default_factory=dict)      # 🙊 httpx/httpcore тощо

    @classmethod
    def from_mapping(cls, node: Optional[Mapping[str, Any]]) -> "LoggingConfig":
        """Будує конфіг з розділу `logging` ConfigService (невідомі ключі ігноруються)."""
        data = dict(node or {})
        cfg = cls()
        for key in ("level", "console", "json", "when", "backup_count", "suppress"):
            if key in data and data[key] is not None:
                setattr(cfg, key, data[key])
        if "file" in data:                                      # 📁 null/"" у YAML вимикає файл
            cfg.file = data["file"] or None
        return cfg


# ================================
# 🧰 ФОРМАТТЕР
# ================================
class JsonFormatter(logging.Formatter):
    """Пласкі JSON-рядки: базові поля + усе, що передано через `extra=`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_FIELDS or key in payload:
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except (TypeError, ValueError):                     # 🔄 Decimal, dataclass → рядок
                payload[key] = str(value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _to_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """'debug' / 10 / None → числовий рівень."""
    if isinstance(value, int):
        return value
    if not value:
        return default
    return getattr(logging, str(value).upper(), default)


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(cfg: Optional[LoggingConfig] = None) -> logging.Logger:
    """Ініціалізує логер `realizeit`. Повторний виклик замінює наші хендлери, а не дублює їх."""
    cfg = cfg or LoggingConfig()
    with _lock:
        root_logger = logging.getLogger(LOG_NAME)
        root_logger.setLevel(_to_level(cfg.level))

        for handler in list(root_logger.handlers):              # 🧹 Прибираємо попередню конфігурацію
            root_logger.removeHandler(handler)
            handler.close()

        if cfg.console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            root_logger.addHandler(console_handler)

        if cfg.file:
            log_path = Path(cfg.file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                filename=str(log_path),
                when=cfg.when,
                backupCount=int(cfg.backup_count),
                encoding="utf-8",
            )
            file_handler.setFormatter(JsonFormatter() if cfg.json else logging.Formatter(PLAIN_FORMAT))
            root_logger.addHandler(file_handler)

        for name, level in (cfg.suppress or {}).items():        # 🙊 Гасимо балакучі бібліотеки
            logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))

        root_logger.info(
            "✅ Logging initialized | level=%s console=%s json=%s file=%s",
            str(cfg.level).upper(),
            "ON" if cfg.console else "OFF",
            "ON" if cfg.json else "OFF",
            cfg.file or "-",
        )
        return root_logger


def init_logging_from_config(config: Optional[Mapping[str, Any]]) -> logging.Logger:
    """Ініціалізує логування з розділу `logging` конфігурації."""
    return init_logging(LoggingConfig.from_mapping(config))


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """`get_logger("domain.pricing")` → логер `realizeit.domain.pricing`."""
    return logging.getLogger(LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}")

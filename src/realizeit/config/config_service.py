# ⚙️ realizeit/config/config_service.py
"""
⚙️ config_service.py - Сервіс доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з config.yaml, а потім накладає змінні з .env.
- Надає єдиний метод .get() з крапковими ключами ('checkout.endpoint').
- Працює як Singleton; `reset()` скидає стан (для тестів і перезавантаження).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Dict, Optional      # 🧩 Типізація

# 🧩 Внутрішні модулі проєкту
from realizeit.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_YAML_PATH = Path(__file__).parent / "config.yaml"
CONFIG_PATH_ENV = "REALIZEIT_CONFIG"        # 🧭 Альтернативний шлях до YAML

# Змінна оточення → крапковий ключ конфігурації
ENV_KEYS: Dict[str, str] = {
    "CHECKOUT_ENDPOINT": "checkout.endpoint",
    "STRIPE_PUBLISHABLE_KEY": "payments.publishable_key",
    "DEFAULT_PRICE_ID": "payments.default_price_id",
    "SITE_ORIGIN": "site.origin",
    "LOG_LEVEL": "logging.level",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних параметрів магазину.
    Конфігурація зчитується один раз на процес.
    """

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any]

    def __new__(cls) -> "ConfigService":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()
            cls._instance = instance
            logger.debug("🔄 ConfigService створено, конфігурацію завантажено")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """🧹 Забуває singleton - наступний `ConfigService()` перечитає файли."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Пріоритет: config.yaml → .env / змінні оточення (перекривають YAML).
        """
        yaml_path = Path(os.getenv(CONFIG_PATH_ENV) or DEFAULT_YAML_PATH)
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
            logger.debug("📘 Завантажено %s", yaml_path)
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", yaml_path, e)

        load_dotenv()
        env_vars = {key: os.getenv(env) for env, key in ENV_KEYS.items() if os.getenv(env)}
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.info("✅ Конфігурацію завантажено (розділів: %d)", len(self._config))

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Значення за крапковим ключем або `default`, якщо будь-якої ланки немає.
        """
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """✏️ Перевизначає значення в рантаймі (тести, CLI-прапорці)."""
        self._deep_update(self._config, self._unflatten_dict({key: value}))

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """'checkout.endpoint' → {'checkout': {'endpoint': ...}}"""
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            node = result
            for part in parts[:-1]:
                node = node.setdefault(part, {})
            node[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """🔁 Рекурсивне злиття: вкладені словники обʼєднуються, решта перезаписується."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)
            else:
                source[key] = value

"""🧪 test_config_service.py - unit-тести для ConfigService

Перевіряє:
- Завантаження YAML з альтернативного шляху
- Перекриття значень змінними оточення
- Singleton та його скидання
- Крапкові ключі get/set
"""

import pytest

from realizeit.config import ConfigService
from realizeit.config.config_service import CONFIG_PATH_ENV


@pytest.fixture
def yaml_config(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(
        "site:\n  origin: https://staging.realizeit.app\n"
        "pricing:\n  markup_rate: '0.25'\n"
        "checkout:\n  endpoint: ''\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))
    monkeypatch.chdir(tmp_path)                                           # 🚫 без чужого .env
    return path


def test_bundled_defaults_load():
    cfg = ConfigService()
    assert cfg.get("pricing.markup_rate") == "0.20"
    assert cfg.get("delivery.policies.KR.base") == "4500"


def test_yaml_from_env_path(yaml_config):
    cfg = ConfigService()
    assert cfg.get("site.origin") == "https://staging.realizeit.app"
    assert cfg.get("pricing.markup_rate") == "0.25"


def test_env_overrides_yaml(yaml_config, monkeypatch):
    monkeypatch.setenv("CHECKOUT_ENDPOINT", "https://api.realizeit.app/checkout")
    monkeypatch.setenv("STRIPE_PUBLISHABLE_KEY", "pk_test_1")

    cfg = ConfigService()

    assert cfg.get("checkout.endpoint") == "https://api.realizeit.app/checkout"
    assert cfg.get("payments.publishable_key") == "pk_test_1"
    assert cfg.get("site.origin") == "https://staging.realizeit.app"


def test_singleton_and_reset(yaml_config):
    first = ConfigService()
    assert ConfigService() is first

    ConfigService.reset()
    assert ConfigService() is not first


def test_missing_keys_return_default(yaml_config):
    cfg = ConfigService()
    assert cfg.get("nope.deeper", "fallback") == "fallback"
    assert cfg.get("site.origin.extra") is None


def test_set_merges_into_tree(yaml_config):
    cfg = ConfigService()
    cfg.set("checkout.timeout_sec", 3)

    assert cfg.get("checkout.timeout_sec") == 3
    assert cfg.get("checkout.endpoint") == ""


def test_missing_yaml_is_tolerated(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "absent.yaml"))
    monkeypatch.chdir(tmp_path)
    assert ConfigService().get("site.origin") is None

# tests/conftest.py
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Додаємо src в sys.path, щоб працював імпорт "realizeit.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from realizeit.config.config_service import CONFIG_PATH_ENV, ENV_KEYS, ConfigService  # noqa: E402
from realizeit.domain.currency import CurrencyCode  # noqa: E402
from realizeit.domain.delivery import FlatRateDeliveryService  # noqa: E402
from realizeit.domain.pricing import LineItem, PricingService  # noqa: E402
from realizeit.infrastructure.currency import FixedRateConverter  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Кожен тест стартує з чистим singleton і без змінних оточення магазину."""
    for env in list(ENV_KEYS) + [CONFIG_PATH_ENV]:
        monkeypatch.delenv(env, raising=False)
    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def converter():
    return FixedRateConverter()


@pytest.fixture
def pricing_service(converter):
    return PricingService(FlatRateDeliveryService(converter))


@pytest.fixture
def make_item():
    def _make(item_id="tee-1", cost="10", qty=1, currency=CurrencyCode.USD, **extra):
        return LineItem(id=item_id, base_cost=Decimal(cost), quantity=qty, currency=currency, **extra)

    return _make

"""🧪 test_container.py - тести збирання залежностей

Перевіряє:
- Політики ціни, доставки та курси читаються з конфігурації
- Контейнер збирає робочий CheckoutService
"""

from decimal import Decimal

import httpx
import pytest

from realizeit.config import ConfigService
from realizeit.config.config_service import CONFIG_PATH_ENV
from realizeit.config.setup import Container, bootstrap_logging
from realizeit.domain.checkout import ShippingForm
from realizeit.domain.currency import CurrencyCode
from realizeit.domain.pricing import LineItem

YAML = """
site:
  origin: "https://shop.test"
pricing:
  markup_rate: "0.30"
tax:
  rates:
    KR: "0.10"
currency:
  approx_rates:
    USD: "1"
    KRW: "1000"
delivery:
  policies:
    KR: {currency: "KRW", base: "3000", per_additional: "1000"}
    default: {currency: "USD", base: "5", per_additional: "1"}
checkout:
  endpoint: "https://api.shop.test/checkout"
metrics:
  enabled: false
logging:
  file: null
"""


@pytest.fixture
def config(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(YAML, encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))
    monkeypatch.chdir(tmp_path)
    return ConfigService()


def test_container_reads_pricing_policy(config):
    container = Container(config)

    assert container.pricing_config.markup_rate == Decimal("0.30")
    assert container.currency_converter.rates["KRW"] == Decimal("1000")

    breakdown = container.pricing_service.compute_breakdown(
        [LineItem(id="a", base_cost=Decimal("10"), quantity=1, currency=CurrencyCode.USD)], "KR"
    )
    assert breakdown.margin == Decimal("3")
    assert breakdown.shipping_estimate == Decimal("3.00")                  # 3000 KRW / 1000


@pytest.mark.asyncio
async def test_container_wires_checkout(config):
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"url": "https://pay"})))
    container = Container(config, http_client=http)

    form = ShippingForm(
        email="a@b.co", full_name="Kim", address1="1 Main st", city="Seoul",
        postal_code="1", country="KR", consent=True,
    )
    item = LineItem(id="a", base_cost=Decimal("10"), quantity=1, currency=CurrencyCode.USD)
    outcome = await container.checkout_service.start_checkout([item], form, lang="en")

    assert container.checkout_settings.endpoint == "https://api.shop.test/checkout"
    assert outcome.ok
    assert outcome.redirect.url == "https://pay"

    await container.aclose()
    await http.aclose()


def test_bootstrap_logging_reads_logging_section(config):
    logger = bootstrap_logging()
    try:
        assert logger.name == "realizeit"
        assert all(not hasattr(h, "baseFilename") for h in logger.handlers)      # file: null
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

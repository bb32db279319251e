"""🧪 test_exception_handler_service.py - unit-тести для ExceptionHandlerService

Перевіряє:
- Дослівний показ UserVisibleError
- Fallback для непередбачених винятків із логуванням трасування
- Прокидання CancelledError
- Сповіщення зі списком порушень валідації
"""

import asyncio
import logging

import pytest

from realizeit.errors import (
    CheckoutEndpointError,
    CurrencyRateNotFoundError,
    ExceptionHandlerService,
    PaymentNotConfiguredError,
)


@pytest.fixture
def handler():
    return ExceptionHandlerService()


def test_user_visible_error_shown_verbatim(handler, caplog):
    err = CheckoutEndpointError("Checkout endpoint error: 500", status_code=500, url="https://x")

    with caplog.at_level(logging.WARNING, logger="realizeit"):
        note = handler.to_notification(err)

    assert note.title == "Checkout failed"
    assert note.description == "Checkout endpoint error: 500"
    assert note.variant == "destructive"
    assert "CheckoutEndpointError" in caplog.text


def test_custom_title(handler):
    note = handler.to_notification(PaymentNotConfiguredError("Stripe failed to initialize"), title="Payment")
    assert note.title == "Payment"


def test_unexpected_error_is_logged_with_traceback(handler, caplog):
    with caplog.at_level(logging.ERROR, logger="realizeit"):
        note = handler.to_notification(RuntimeError("boom"))

    assert note.description == "boom"
    assert caplog.records[-1].exc_info is not None


def test_blank_message_falls_back(handler):
    assert handler.to_notification(RuntimeError("")).description == "Unexpected error"


def test_app_error_without_user_visibility(handler):
    note = handler.to_notification(CurrencyRateNotFoundError("USD", "JPY"))
    assert "JPY" in note.description


def test_cancelled_error_propagates(handler):
    with pytest.raises(asyncio.CancelledError):
        handler.to_notification(asyncio.CancelledError())


def test_validation_notification():
    note = ExceptionHandlerService.validation_notification(("A", "B"))
    assert note.title == "Checkout incomplete"
    assert note.description == "A\nB"
    assert note.lines == ("A", "B")

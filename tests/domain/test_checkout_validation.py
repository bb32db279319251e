"""🧪 test_checkout_validation.py - unit-тести для validate_checkout_readiness

Перевіряє:
- Накопичення всіх порушень у фіксованому порядку
- Окремі правила (імʼя, email, адреса, згода, кошик, сума)
- Fallback на email залогіненого користувача
- Пробіли навколо email обрізаються до перевірки
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from realizeit.domain.checkout import (
    MSG_ADDRESS,
    MSG_CITY,
    MSG_CONSENT,
    MSG_COUNTRY,
    MSG_EMAIL,
    MSG_EMPTY_CART,
    MSG_FULL_NAME,
    MSG_POSTAL_CODE,
    MSG_ZERO_TOTAL,
    ShippingForm,
    is_checkout_ready,
    is_valid_email,
    validate_checkout_readiness,
)


@pytest.fixture
def complete_form():
    return ShippingForm(
        email="buyer@example.com",
        full_name="Kim Minji",
        address1="12 Teheran-ro",
        city="Seoul",
        postal_code="06236",
        country="KR",
        consent=True,
    )


def test_complete_form_passes(complete_form, make_item):
    assert validate_checkout_readiness([make_item()], complete_form, Decimal("31.02")) == []
    assert is_checkout_ready([make_item()], complete_form, Decimal("31.02"))


def test_everything_missing_reports_all_in_order():
    form = ShippingForm(country="")
    errors = validate_checkout_readiness([], form, 0)

    assert errors == [
        MSG_FULL_NAME,
        MSG_EMAIL,
        MSG_ADDRESS,
        MSG_CITY,
        MSG_POSTAL_CODE,
        MSG_COUNTRY,
        MSG_CONSENT,
        MSG_EMPTY_CART,
        MSG_ZERO_TOTAL,
    ]


def test_only_consent_missing(complete_form, make_item):
    form = replace(complete_form, consent=False)
    assert validate_checkout_readiness([make_item()], form, Decimal("10")) == [
        "You must accept the IP/rights and sales terms."
    ]


@pytest.mark.parametrize(
    "field,value,message",
    [
        ("full_name", "K", MSG_FULL_NAME),
        ("full_name", "   ", MSG_FULL_NAME),
        ("email", "not-an-email", MSG_EMAIL),
        ("email", "a@b", MSG_EMAIL),
        ("address1", "abc", MSG_ADDRESS),
        ("city", "", MSG_CITY),
        ("postal_code", " ", MSG_POSTAL_CODE),
        ("country", "", MSG_COUNTRY),
    ],
)
def test_single_rule_violation(complete_form, make_item, field, value, message):
    form = replace(complete_form, **{field: value})
    assert validate_checkout_readiness([make_item()], form, Decimal("10")) == [message]


def test_empty_cart_and_zero_total_are_separate(complete_form, make_item):
    assert validate_checkout_readiness([], complete_form, Decimal("5")) == [MSG_EMPTY_CART]
    assert validate_checkout_readiness([make_item()], complete_form, Decimal("0")) == [MSG_ZERO_TOTAL]
    assert validate_checkout_readiness([make_item()], complete_form, Decimal("-1")) == [MSG_ZERO_TOTAL]


def test_account_email_fills_empty_form_email(complete_form, make_item):
    form = replace(complete_form, email="")

    assert validate_checkout_readiness([make_item()], form, 10) == [MSG_EMAIL]
    assert validate_checkout_readiness([make_item()], form, 10, user_email="me@realizeit.app") == []


@pytest.mark.parametrize(
    "value,expected",
    [("a@b.co", True), ("x.y@mail.example.kr", True), ("a b@c.d", False), ("", False), ("@b.c", False)],
)
def test_is_valid_email(value, expected):
    assert is_valid_email(value) is expected


def test_form_email_is_trimmed_before_check(complete_form, make_item):
    form = replace(complete_form, email="  buyer@example.com ")

    assert validate_checkout_readiness([make_item()], form, 10) == []
    assert form.to_payload()["email"] == "buyer@example.com"


def test_blank_form_email_falls_back_to_account(complete_form, make_item):
    form = replace(complete_form, email="   ")

    assert validate_checkout_readiness([make_item()], form, 10, user_email=" me@realizeit.app") == []

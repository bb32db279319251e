"""🧪 test_shipping_form.py - unit-тести для ShippingForm

Перевіряє:
- Країну за замовчуванням за мовою
- Накладання збереженої адреси
- Поле email у тілі запиту
"""

from realizeit.domain.checkout import ShippingForm


def test_for_locale_picks_country():
    assert ShippingForm.for_locale("kr").country == "KR"
    assert ShippingForm.for_locale("ko").country == "KR"
    assert ShippingForm.for_locale("en").country == "US"
    assert ShippingForm.for_locale("").country == "US"


def test_defaults():
    form = ShippingForm()
    assert form.consent is False
    assert form.save_address is True
    assert form.marketing_opt_in is False


def test_merged_with_saved_address():
    saved = {
        "fullName": "Kim Minji",
        "postalCode": "06236",
        "country": "KR",
        "marketingOptIn": 1,
        "phone": None,
        "unknownKey": "ignored",
    }
    form = ShippingForm(phone="010-0000-0000").merged_with(saved)

    assert form.full_name == "Kim Minji"
    assert form.postal_code == "06236"
    assert form.country == "KR"
    assert form.marketing_opt_in is True
    assert form.phone == "010-0000-0000"


def test_payload_uses_camel_case_and_account_email():
    payload = ShippingForm(full_name="Lee", postal_code="1").to_payload(user_email=" me@realizeit.app ")

    assert payload["fullName"] == "Lee"
    assert payload["postalCode"] == "1"
    assert payload["email"] == "me@realizeit.app"
    assert payload["saveAddress"] is True


def test_form_email_wins_over_account_email():
    assert ShippingForm(email="form@x.io").effective_email("acct@x.io") == "form@x.io"

from __future__ import annotations

import pytest

from vendor_api.services.validators import (
    bank_details_errors,
    normalize_iban,
    normalize_phone_number,
    password_policy_errors,
    phone_errors,
    validate_bic,
    validate_iban,
    validate_phone_number,
)


@pytest.mark.parametrize(
    "iban",
    [
        "DE89 3704 0044 0532 0130 00",
        "DE89370400440532013000",
        "GB33BUKB20201555555555",
        "GB82 WEST 1234 5698 7654 32",
    ],
)
def test_valid_iban_passes(iban: str) -> None:
    result = validate_iban(iban)
    assert result.is_valid
    assert result.error_message == ""


@pytest.mark.parametrize(
    "iban",
    ["DE88 3704 0044 0532 0130 00", "DE79 3704 0044 0532 0130 00", "GB34BUKB20201555555555"],
)
def test_mutated_check_digit_fails_checksum(iban: str) -> None:
    result = validate_iban(iban)
    assert not result.is_valid
    assert result.error_message.startswith("Invalid IBAN check digits")


def test_all_zero_iban_is_rejected() -> None:
    assert not validate_iban("DE00 0000 0000 0000 0000 00").is_valid


@pytest.mark.parametrize("iban", ["DE89 3704", "DE89 3704 0044 0532 0130 0000 00"])
def test_malformed_iban_fails_format(iban: str) -> None:
    result = validate_iban(iban)
    assert not result.is_valid
    assert result.error_message.startswith("Invalid IBAN format")


@pytest.mark.parametrize("value", ["", None])
def test_missing_iban_and_bic(value) -> None:
    assert validate_iban(value).error_message == "IBAN is required."
    assert validate_bic(value).error_message == "BIC is required."


@pytest.mark.parametrize("bic", ["COBADEFFXXX", "BUKBGB22", "DEUTDEFF"])
def test_valid_bic_passes(bic: str) -> None:
    assert validate_bic(bic).is_valid


@pytest.mark.parametrize("bic", ["DEUT", "DEUTDEF", "DEUTDEFF5", "DEUTDEFF50012"])
def test_bic_with_wrong_length_fails(bic: str) -> None:
    result = validate_bic(bic)
    assert not result.is_valid
    assert result.error_message.startswith("Invalid BIC format")


def test_bank_details_errors_are_keyed_by_wire_field() -> None:
    assert bank_details_errors("DE89370400440532013000", "COBADEFFXXX") == {}

    errors = bank_details_errors("DE00", "X", prefix="bankAccounts[1].")
    assert set(errors) == {"bankAccounts[1].iban", "bankAccounts[1].bic"}


@pytest.mark.parametrize("phone", ["+1 650-253-0000", "+44 20 8366 1177", "+442083661177"])
def test_valid_phone_passes(phone: str) -> None:
    assert validate_phone_number(phone).is_valid


@pytest.mark.parametrize("phone", ["0049 30 2345678", "1 650 253 0000", "(650) 253-0000"])
def test_phone_without_plus_fails(phone: str) -> None:
    result = validate_phone_number(phone)
    assert not result.is_valid
    assert result.error_message == "Phone should start with a plus sign."


def test_empty_phone_is_required() -> None:
    assert validate_phone_number("").error_message == "Phone number is required."


@pytest.mark.parametrize("phone", ["+44 12", "+999 1234 5678", "+"])
def test_unparseable_or_invalid_phone_fails(phone: str) -> None:
    result = validate_phone_number(phone)
    assert not result.is_valid
    assert result.error_message.startswith("Invalid phone number")


def test_phone_errors_uses_given_field_name() -> None:
    assert phone_errors("+44 20 8366 1177") == {}
    assert list(phone_errors("123", field="contactPersons[0].phone")) == ["contactPersons[0].phone"]


def test_normalize_phone_number_keeps_plus_and_digits() -> None:
    assert normalize_phone_number("+49 (30) 234-5678") == "+49302345678"
    assert normalize_phone_number("+1.650.253.0000 ext") == "+16502530000"


def test_password_policy() -> None:
    assert password_policy_errors("Admin123!") == []

    errors = password_policy_errors("abc")
    assert len(errors) == 4  # too short, no digit, no uppercase, no symbol
    assert any("at least 6 characters" in e for e in errors)


def test_normalize_iban_returns_compact_form():
    assert normalize_iban("DE89 3704 0044 0532 0130 00") == "DE89370400440532013000"
    assert normalize_iban("GB82WEST12345698765432") == "GB82WEST12345698765432"

"""Field-format validators for bank details and phone numbers.

Each validator returns a :class:`ValidationResult` instead of raising, so a
caller can collect the reasons for several fields before rejecting a
request. The format rules themselves come from ``schwifty`` (ISO 13616 IBAN,
ISO 9362 BIC) and ``phonenumbers`` (libphonenumber metadata).
"""

import re
from typing import NamedTuple

import phonenumbers
from phonenumbers import NumberParseException
from schwifty import BIC, IBAN
from schwifty.exceptions import InvalidChecksumDigits, SchwiftyException


class ValidationResult(NamedTuple):
    is_valid: bool
    error_message: str = ""


VALID = ValidationResult(True)

_NON_PHONE_CHARS = re.compile(r"[^+0-9]")

# Rules of the default identity password policy
_PASSWORD_MIN_LENGTH = 6


def validate_iban(iban: str | None) -> ValidationResult:
    """Check structure and the ISO 7064 mod-97 check digits of an IBAN."""
    if not iban:
        return ValidationResult(False, "IBAN is required.")
    try:
        IBAN(iban)
    except InvalidChecksumDigits as exc:
        return ValidationResult(False, f"Invalid IBAN check digits: {exc}")
    except SchwiftyException as exc:
        return ValidationResult(False, f"Invalid IBAN format: {exc}")
    return VALID


def validate_bic(bic: str | None) -> ValidationResult:
    """Check a BIC against the 8/11 character bank/country/location/branch layout."""
    if not bic:
        return ValidationResult(False, "BIC is required.")
    try:
        BIC(bic)
    except SchwiftyException as exc:
        return ValidationResult(False, f"Invalid BIC format: {exc}")
    return VALID


def validate_phone_number(phone: str | None) -> ValidationResult:
    """Accept only international numbers that are valid for their region."""
    if not phone:
        return ValidationResult(False, "Phone number is required.")
    if not phone.startswith("+"):
        return ValidationResult(False, "Phone should start with a plus sign.")
    try:
        number = phonenumbers.parse(phone, None)
    except NumberParseException as exc:
        return ValidationResult(False, f"Invalid phone number: {exc}")
    if not phonenumbers.is_valid_number(number):
        return ValidationResult(False, "Invalid phone number: not a valid number for any region.")
    return VALID


def normalize_iban(iban: str) -> str:
    """Electronic form of a valid IBAN: "DE89 3704 0044 ..." -> "DE8937040044..."."""
    return IBAN(iban).compact


def normalize_phone_number(phone: str) -> str:
    """Strip everything except digits and the plus sign: "+49 (30) 123-4" -> "+49301234"."""
    return _NON_PHONE_CHARS.sub("", phone)


def password_policy_errors(password: str) -> list[str]:
    """Return every unmet password rule (empty list when the password is acceptable)."""
    errors = []
    if len(password) < _PASSWORD_MIN_LENGTH:
        errors.append(f"Passwords must be at least {_PASSWORD_MIN_LENGTH} characters.")
    if not any(ch.isdigit() for ch in password):
        errors.append("Passwords must have at least one digit ('0'-'9').")
    if not any(ch.islower() for ch in password):
        errors.append("Passwords must have at least one lowercase ('a'-'z').")
    if not any(ch.isupper() for ch in password):
        errors.append("Passwords must have at least one uppercase ('A'-'Z').")
    if all(ch.isalnum() for ch in password):
        errors.append("Passwords must have at least one non alphanumeric character.")
    return errors


def bank_details_errors(iban: str | None, bic: str | None, prefix: str = "") -> dict[str, str]:
    """Run the IBAN and BIC checks; map failing wire fields to their reasons."""
    errors = {}
    iban_result = validate_iban(iban)
    if not iban_result.is_valid:
        errors[f"{prefix}iban"] = iban_result.error_message
    bic_result = validate_bic(bic)
    if not bic_result.is_valid:
        errors[f"{prefix}bic"] = bic_result.error_message
    return errors


def phone_errors(phone: str | None, field: str = "phone") -> dict[str, str]:
    result = validate_phone_number(phone)
    return {} if result.is_valid else {field: result.error_message}

"""
Photostat Validation Utilities
Request field checks and phone number formatting/validation
"""
import re
from typing import List, Dict, Any

from .constants import PhoneConstants, ErrorMessages
from .exceptions import PhoneFormatError


NON_DIGITS = re.compile(r'[^\d]')


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> List[str]:
    """
    Validate that all required fields are present in the data.

    Args:
        data: Dictionary containing the data to validate
        required_fields: List of required field names

    Returns:
        List of missing field names (empty if all fields are present)
    """
    if not isinstance(data, dict):
        return list(required_fields)

    missing_fields = []
    for field in required_fields:
        if field not in data or data[field] is None or data[field] == "":
            missing_fields.append(field)

    return missing_fields


def normalize_phone_number(value: str) -> str:
    """Strip every non-digit character."""
    if not isinstance(value, str):
        return ""
    return NON_DIGITS.sub('', value)


def format_phone_number(value: str) -> str:
    """
    Progressive display formatting applied on every keystroke.

    0-3 digits are shown raw, 4-6 as "(AAA) BBB" and 7 or more as
    "(AAA) BBB-CCCC". Digits past the tenth are not displayed.

    Args:
        value: Raw user input, possibly already formatted

    Returns:
        Formatted phone number (falsy input is returned unchanged)
    """
    if not value:
        return value

    digits = normalize_phone_number(value)
    if len(digits) < 4:
        return digits
    if len(digits) < 7:
        return f"({digits[:3]}) {digits[3:]}"
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:PhoneConstants.DISPLAY_DIGITS]}"


def is_valid_phone_number(value: str) -> bool:
    """E.164-like check: optional '+', first digit 1-9, 2 to 15 digits."""
    if not isinstance(value, str):
        return False
    return re.match(PhoneConstants.PHONE_PATTERN, value) is not None


def validate_phone_number(value: str) -> str:
    """
    Normalize and validate a phone number before submission.

    Returns:
        The normalized digit string

    Raises:
        PhoneFormatError: If the normalized value is not a valid number
    """
    normalized = normalize_phone_number(value)
    if not is_valid_phone_number(normalized):
        raise PhoneFormatError(ErrorMessages.INVALID_PHONE, value=normalized)
    return normalized

# roster/utils/phone.py
import re

_SEPARATORS = re.compile(r"[\s()\-]")
MOBILE_PATTERN = re.compile(r"^(?:\+?61|0)4\d{8}$")
LANDLINE_PATTERN = re.compile(r"^(?:\+?61|0)[2378]\d{8}$")


def clean_phone(phone: str) -> str:
    """Drop spaces, parentheses and hyphens."""
    return _SEPARATORS.sub("", phone)


def is_valid_phone(phone: str) -> bool:
    cleaned = clean_phone(phone)
    return bool(MOBILE_PATTERN.match(cleaned) or LANDLINE_PATTERN.match(cleaned))


def format_phone(phone: str) -> str:
    """Format an Australian number for display.

    ``+61 412 345 678``, ``0412 345 678`` or ``02 1234 5678``. Anything that
    does not start with ``+61`` or ``0`` is returned as given.
    """
    if not phone:
        return ""
    cleaned = clean_phone(phone)

    if cleaned.startswith("+61"):
        number = cleaned[3:]
        if number.startswith("4"):
            return f"+61 {number[:3]} {number[3:6]} {number[6:]}"
        return f"+61 {number[:1]} {number[1:5]} {number[5:]}"
    if cleaned.startswith("04"):
        return f"{cleaned[:4]} {cleaned[4:7]} {cleaned[7:]}"
    if cleaned.startswith("0"):
        return f"{cleaned[:2]} {cleaned[2:6]} {cleaned[6:]}"
    return phone

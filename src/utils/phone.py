from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

# Fallback when a configured country code has no digits at all
FALLBACK_COUNTRY_CODE = "91"
WHATSAPP_BASE_URL = "https://wa.me"

MIN_E164_DIGITS = 8
MAX_E164_DIGITS = 15

_NON_DIGIT = re.compile(r"[^0-9]")
_NON_DIALABLE = re.compile(r"[^0-9+]")


def sanitize_country_code(cc: str | None) -> str:
    """Keep digits only so inputs like ' +91 ' still work."""
    digits = _NON_DIGIT.sub("", cc or "")
    return digits or FALLBACK_COUNTRY_CODE


def _is_valid_length(digits: str) -> bool:
    return MIN_E164_DIGITS <= len(digits) <= MAX_E164_DIGITS


def _plus(digits: str) -> str | None:
    return f"+{digits}" if _is_valid_length(digits) else None


def normalize_to_e164(
    raw: str | None, default_country_code: str = FALLBACK_COUNTRY_CODE
) -> str | None:
    """Best-effort '+<digits>' form of a human-entered phone number.

    Numbers without an international prefix are classified by digit count:
    10 digits, or 11 digits with a leading trunk '0', are treated as local
    numbers in `default_country_code`; 11-15 digits are assumed to already
    carry a country code. Returns None for anything that does not fit.
    The raw input remains the value of record.
    """
    trimmed = (raw or "").strip()
    if not trimmed:
        return None

    if trimmed.startswith("+"):
        return _plus(_NON_DIGIT.sub("", trimmed[1:]))

    digits = _NON_DIGIT.sub("", trimmed)
    if digits.startswith("00"):
        return _plus(digits[2:])

    length = len(digits)
    if length == 10:
        return _plus(sanitize_country_code(default_country_code) + digits)
    if length == 11 and digits.startswith("0"):
        return _plus(sanitize_country_code(default_country_code) + digits[1:])
    if 11 <= length <= 15:
        return _plus(digits)
    return None


def build_tel_href(
    raw: str | None, default_country_code: str = FALLBACK_COUNTRY_CODE
) -> str | None:
    s = (raw or "").strip()
    if not s:
        return None
    e164 = normalize_to_e164(s, default_country_code)
    if e164:
        return f"tel:{e164}"
    stripped = _NON_DIALABLE.sub("", s)
    if not stripped or stripped == "+":
        return None
    return f"tel:{stripped}"


def build_mailto_href(raw: str | None) -> str | None:
    s = (raw or "").strip()
    if not s or "@" not in s:
        return None
    return f"mailto:{s}"


def build_whatsapp_link(e164: str | None, text: str | None = None) -> str | None:
    """wa.me link for an E.164 number; WhatsApp expects digits only in the path."""
    if not e164:
        return None
    digits = _NON_DIGIT.sub("", e164)
    if not _is_valid_length(digits):
        return None
    base = f"{WHATSAPP_BASE_URL}/{digits}"
    if not text:
        return base
    return f"{base}?text={quote(text, safe='')}"


@dataclass(slots=True)
class ContactLinks:
    e164: str | None
    tel: str | None
    mailto: str | None
    whatsapp: str | None


def build_contact_links(
    phone: str | None,
    email: str | None = None,
    *,
    text: str | None = None,
    default_country_code: str = FALLBACK_COUNTRY_CODE,
) -> ContactLinks:
    e164 = normalize_to_e164(phone, default_country_code)
    return ContactLinks(
        e164=e164,
        tel=build_tel_href(phone, default_country_code),
        mailto=build_mailto_href(email),
        whatsapp=build_whatsapp_link(e164, text),
    )

from __future__ import annotations

import re
import unicodedata

from src.domain.models.breed import AkcInfo, FciInfo
from src.domain.value_objects.breed_type import BreedType

BOM = "\ufeff"

MIX_BREED_LABEL = "Mix-breed"
CROSS_BREED_LABEL = "Cross-breed"
INDIE_LABEL = "Indie (Indian Pariah)"

_STRIPPED_PUNCTUATION = re.compile(r"[()'’.,/]")
_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9]+")
_WORD_START = re.compile(r"\b[a-z]")
_SHORT_CODE_IN_PARENS = re.compile(r"\(([a-z0-9]{2,6})\)")
_KNOWN_ACRONYMS = re.compile(r"\b(dsh|dmh|dlh|akc|fci)\b", re.IGNORECASE)


def strip_bom(text: str | None) -> str:
    return (text or "").removeprefix(BOM)


def matching_key(label: str | None) -> str:
    """Key used to decide whether two labels name the same breed.

    Only used for matching; display labels are never rewritten with it.
    """
    s = strip_bom(label).lower().replace("&", "and")
    s = _STRIPPED_PUNCTUATION.sub("", s)
    return _WHITESPACE.sub(" ", s).strip()


def _fold_ascii(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(label: str | None) -> str:
    """Stable record key: lowercase letters, digits and single hyphens."""
    s = _fold_ascii(matching_key(label)).replace(" ", "-")
    return _NON_SLUG.sub("-", s).strip("-")


def collation_key(label: str) -> tuple[str, str]:
    """Sort key approximating a locale-aware comparison of display labels."""
    return (_fold_ascii(label).casefold(), label)


def to_title_case(s: str | None) -> str:
    if not s:
        return ""
    return _WORD_START.sub(lambda m: m.group(0).upper(), s.lower())


def is_all_caps_label(s: str) -> bool:
    letters = re.sub(r"[^A-Za-z]+", "", s)
    return bool(letters) and letters == letters.upper()


def normalize_breed_label(raw: str | None) -> str:
    """Display form for a dog breed typed or picked in an intake form."""
    text = (raw or "").strip()
    if not text:
        return ""
    lower = text.lower()
    for special in (MIX_BREED_LABEL, CROSS_BREED_LABEL, INDIE_LABEL):
        if lower == special.lower():
            return special
    if is_all_caps_label(text):
        return to_title_case(text)
    return text


def normalize_free_text_breed(raw: str | None) -> str:
    """Display form for free-typed breeds (cats), e.g. 'domestic short hair (dsh)'."""
    text = (raw or "").strip()
    if not text:
        return ""
    text = to_title_case(text)
    text = _SHORT_CODE_IN_PARENS.sub(lambda m: f"({m.group(1).upper()})", text)
    return _KNOWN_ACRONYMS.sub(lambda m: m.group(0).upper(), text)


def breed_type_from_label(label: str | None) -> BreedType:
    lower = (label or "").strip().lower()
    if lower == MIX_BREED_LABEL.lower():
        return BreedType.MIX_BREED
    if lower == CROSS_BREED_LABEL.lower():
        return BreedType.CROSS_BREED
    return BreedType.PUREBRED


def format_fci_text(fci: FciInfo | None) -> str | None:
    if fci is None:
        return None
    group_no = fci.group_no
    group_name = to_title_case(fci.group_name) if fci.group_name else None
    if group_no and group_name:
        return f"FCI: Group {group_no} - {group_name}"
    if group_no:
        return f"FCI: Group {group_no}"
    if group_name:
        return f"FCI: {group_name}"
    return None


def format_akc_text(akc: AkcInfo | None) -> str | None:
    if akc is None or not akc.group_name:
        return None
    return f"AKC: {to_title_case(akc.group_name)}"

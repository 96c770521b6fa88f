# webtools_geocoding/geocode/formatted_address.py
"""
Best-effort split of a single formatted address string into address fields.

Older versions of the Webtools service only returned something like
"10 Avenue Gambetta, 75020, Paris, Île-de-France" per match. There is no
reliable way to tell the parts apart, so this is a guess based on where the
digits are. Wrong guesses are expected and are not bugs.
"""
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

from .models import PROVIDER_NAME

_NUMERIC = re.compile(r"^\d+$")
_LETTER = re.compile(r"[^\W\d_]")
_DIGIT = re.compile(r"\d")


def _is_numeric(value: str) -> bool:
    return bool(_NUMERIC.match(value))


def _has_digit(value: str) -> bool:
    return bool(_DIGIT.search(value))


def _mostly_digits(value: str) -> bool:
    digits = len(_DIGIT.findall(value))
    return digits > len(value) - digits


# strictest first
POSTAL_CODE_FILTERS: Sequence[Callable[[str], bool]] = (
    _is_numeric,
    _mostly_digits,
    _has_digit,
)


def split_street(part: str) -> Dict[str, Optional[str]]:
    """'10 Avenue Gambetta' -> number '10', name 'Avenue Gambetta'."""
    tokens = part.split()
    number = None
    if tokens and _is_numeric(tokens[0]):
        number = tokens.pop(0)
    elif tokens and _is_numeric(tokens[-1]):
        number = tokens.pop()
    return {"streetNumber": number, "streetName": " ".join(tokens) or None}


def _pop_postal_code(parts: List[str]) -> Optional[str]:
    for accept in POSTAL_CODE_FILTERS:
        for i, part in enumerate(parts):
            if accept(part):
                return parts.pop(i)
    return None


def _pop_locality(parts: List[str]) -> Optional[str]:
    for i, part in enumerate(parts):
        if not _has_digit(part):
            return parts.pop(i)
    return None


def parse_formatted_address(formatted_address: str, coordinates: Sequence[float]) -> Dict[str, Any]:
    """
    Returns a mapper dict (same keys as geocode.mapper.map_feature) for the
    given formatted address and [longitude, latitude] pair.
    """
    data: Dict[str, Any] = {
        "providedBy": PROVIDER_NAME,
        "longitude": coordinates[0],
        "latitude": coordinates[1],
        "streetNumber": None,
        "streetName": None,
        "postalCode": None,
        "locality": None,
        "adminLevels": [],
    }
    parts = [p.strip() for p in (formatted_address or "").split(",")]
    parts = [p for p in parts if p]
    if not parts:
        return data

    if _LETTER.search(parts[0]) and _has_digit(parts[0]):
        data.update(split_street(parts.pop(0)))

    data["postalCode"] = _pop_postal_code(parts)
    data["locality"] = _pop_locality(parts)

    level = 1
    for part in parts:
        if not _has_digit(part):
            data["adminLevels"].append({"name": part, "level": level})
            level += 1
    return data

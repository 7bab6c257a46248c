"""Free-text personal name parsing.

Recovers first/middle/last name components from loosely structured input in
Western "title first [middle] last [suffix]" order. Leading honorific titles
and trailing generational or professional suffixes are discarded.
"""

import re
from typing import NamedTuple

from people_model.exceptions import NameFormatError
from people_model.logging_config import get_logger

logger = get_logger(__name__)

TITLES: frozenset[str] = frozenset(
    {
        "mr",
        "mrs",
        "miss",
        "ms",
        "mx",
        "dr",
        "sir",
        "prof",
        "rev",
    }
)

SUFFIXES: frozenset[str] = frozenset(
    {
        "jr",
        "sr",
        "esq",
        "phd",
        "md",
    }
)

ROMAN_NUMERALS: frozenset[str] = frozenset(
    {"I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"}
)

_NUMERIC = re.compile(r"\d+(st|nd|rd|th)?\.?", re.IGNORECASE)


class ParsedName(NamedTuple):
    first_name: str
    middle_name: str | None
    last_name: str
    titles: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ()


def _normalize(token: str) -> str:
    return token.replace(".", "").lower()


def is_title(token: str) -> bool:
    return _normalize(token) in TITLES


def is_suffix(token: str) -> bool:
    return _normalize(token) in SUFFIXES


def is_generational(token: str) -> bool:
    """Roman numerals and ordinals such as III, 2nd or 111."""
    return token.rstrip(".") in ROMAN_NUMERALS or bool(_NUMERIC.fullmatch(token))


def tokenize(text: str) -> list[str]:
    return text.split()


def parse_name(text: str | None) -> ParsedName:
    """Split text into name components.

    Known suffixes (Jr, Sr, ...) are always stripped from the end. Roman
    numerals and numbers are stripped only while two tokens would remain, so
    a bare "Ed I" keeps its last name.

    Raises:
        NameFormatError: fewer than two tokens remain after stripping.
    """
    tokens = tokenize(text or "")

    start = 0
    while start < len(tokens) and is_title(tokens[start]):
        start += 1

    end = len(tokens)
    while end > start:
        token = tokens[end - 1]
        if is_suffix(token) or (is_generational(token) and end - start > 2):
            end -= 1
        else:
            break

    remaining = tokens[start:end]

    if len(remaining) < 2:
        logger.debug("name_parse_failed", text=text, tokens=len(remaining))
        raise NameFormatError(text)

    middle_name = " ".join(remaining[1:-1]) or None

    return ParsedName(
        first_name=remaining[0],
        middle_name=middle_name,
        last_name=remaining[-1],
        titles=tuple(tokens[:start]),
        suffixes=tuple(tokens[end:]),
    )

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

PREFIX_LENGTH = 3
PAD = "\0"


class KeywordType(Enum):
    MONTH_NAME = "month_name"
    AM_PM = "am_pm"
    TIME_ZONE_NAME = "time_zone_name"
    INVALID = "invalid"


class KeywordEntry(NamedTuple):
    prefix: str
    type: KeywordType
    value: int


# Order matters: the first accepted row wins. The INVALID row terminates the
# scan and doubles as the "not found" result.
KEYWORDS: tuple[KeywordEntry, ...] = (
    KeywordEntry("jan", KeywordType.MONTH_NAME, 1),
    KeywordEntry("feb", KeywordType.MONTH_NAME, 2),
    KeywordEntry("mar", KeywordType.MONTH_NAME, 3),
    KeywordEntry("apr", KeywordType.MONTH_NAME, 4),
    KeywordEntry("may", KeywordType.MONTH_NAME, 5),
    KeywordEntry("jun", KeywordType.MONTH_NAME, 6),
    KeywordEntry("jul", KeywordType.MONTH_NAME, 7),
    KeywordEntry("aug", KeywordType.MONTH_NAME, 8),
    KeywordEntry("sep", KeywordType.MONTH_NAME, 9),
    KeywordEntry("oct", KeywordType.MONTH_NAME, 10),
    KeywordEntry("nov", KeywordType.MONTH_NAME, 11),
    KeywordEntry("dec", KeywordType.MONTH_NAME, 12),
    KeywordEntry("am" + PAD, KeywordType.AM_PM, 0),
    KeywordEntry("pm" + PAD, KeywordType.AM_PM, 12),
    KeywordEntry("ut" + PAD, KeywordType.TIME_ZONE_NAME, 0),
    KeywordEntry("utc", KeywordType.TIME_ZONE_NAME, 0),
    KeywordEntry("gmt", KeywordType.TIME_ZONE_NAME, 0),
    KeywordEntry("cdt", KeywordType.TIME_ZONE_NAME, -5),
    KeywordEntry("cst", KeywordType.TIME_ZONE_NAME, -6),
    KeywordEntry("edt", KeywordType.TIME_ZONE_NAME, -4),
    KeywordEntry("est", KeywordType.TIME_ZONE_NAME, -5),
    KeywordEntry("mdt", KeywordType.TIME_ZONE_NAME, -6),
    KeywordEntry("mst", KeywordType.TIME_ZONE_NAME, -7),
    KeywordEntry("pdt", KeywordType.TIME_ZONE_NAME, -7),
    KeywordEntry("pst", KeywordType.TIME_ZONE_NAME, -8),
    KeywordEntry(PAD * PREFIX_LENGTH, KeywordType.INVALID, 0),
)

NOT_FOUND = len(KEYWORDS) - 1


def word_prefix(word: str) -> str:
    """Lowercased first three characters of *word*, padded with NULs."""
    return word[:PREFIX_LENGTH].lower().ljust(PREFIX_LENGTH, PAD)


def lookup(prefix: str, word_length: int) -> int:
    """Return the index of the keyword matching *prefix*.

    ``prefix`` must already be lowercase and padded to three characters. A word
    longer than the keyword is only accepted for month names ("january" -> "jan").
    Returns ``NOT_FOUND`` (the index of the INVALID row) when nothing matches.
    """
    i = 0
    while KEYWORDS[i].type is not KeywordType.INVALID:
        entry = KEYWORDS[i]
        if entry.prefix == prefix[:PREFIX_LENGTH] and (
            word_length <= PREFIX_LENGTH or entry.type is KeywordType.MONTH_NAME
        ):
            return i
        i += 1
    return i


def get_type(index: int) -> KeywordType:
    return KEYWORDS[index].type


def get_value(index: int) -> int:
    return KEYWORDS[index].value


def classify(word: str) -> KeywordEntry:
    """Classify a raw alphabetic word, e.g. ``classify("January")``."""
    return KEYWORDS[lookup(word_prefix(word), len(word))]


__all__ = [
    "KeywordType",
    "KeywordEntry",
    "KEYWORDS",
    "NOT_FOUND",
    "PREFIX_LENGTH",
    "word_prefix",
    "lookup",
    "get_type",
    "get_value",
    "classify",
]

from .keywords import KeywordType, KeywordEntry, lookup, classify
from .record import DateRecord, OutputSlot
from .composers import (
    ComposerError,
    ComposerFullError,
    ComposerStateError,
    DayComposer,
    TimeComposer,
    TimeZoneComposer,
)
from .parser import DateParseError, parse_date, parse_date_strict

__all__ = [
    "KeywordType",
    "KeywordEntry",
    "lookup",
    "classify",
    "DateRecord",
    "OutputSlot",
    "ComposerError",
    "ComposerFullError",
    "ComposerStateError",
    "DayComposer",
    "TimeComposer",
    "TimeZoneComposer",
    "DateParseError",
    "parse_date",
    "parse_date_strict",
]

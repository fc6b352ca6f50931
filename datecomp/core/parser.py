from __future__ import annotations

import logging
from typing import Optional

from .composers import ComposerError, DayComposer, TimeComposer, TimeZoneComposer
from .keywords import KeywordType, classify
from .record import DateRecord

LOGGER = logging.getLogger(__name__)

# Numbers saturate instead of growing without bound; anything this large is
# rejected by the composers anyway.
_NUMBER_LIMIT = (2 ** 31 - 1) // 10 - 10


class DateParseError(ValueError):
    def __init__(self, text: str, reason: str = "unrecognized date") -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class _Reject(Exception):
    """Internal signal: the string is not a valid date."""


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.has_read_number = False

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def next(self) -> None:
        self.pos += 1

    def skip(self, ch: str) -> bool:
        if self.peek() == ch:
            self.next()
            return True
        return False

    def skip_whitespace(self) -> bool:
        if self.peek().isspace():
            self.next()
            return True
        return False

    def is_digit(self) -> bool:
        return "0" <= self.peek() <= "9"

    def is_word_char(self) -> bool:
        # letters and anything above them (non-ASCII included)
        return self.peek() >= "A"

    def is_sign(self) -> bool:
        return self.peek() in ("+", "-")

    def sign_value(self) -> int:
        return -1 if self.peek() == "-" else 1

    def read_number(self) -> int:
        n = 0
        while self.is_digit():
            if n < _NUMBER_LIMIT:
                n = n * 10 + ord(self.peek()) - ord("0")
            self.next()
        self.has_read_number = True
        return n

    def read_word(self) -> str:
        start = self.pos
        while self.is_word_char():
            self.next()
        return self.text[start:self.pos]

    def skip_parentheses(self) -> None:
        balance = 0
        while True:
            ch = self.peek()
            if ch == ")":
                balance -= 1
            elif ch == "(":
                balance += 1
            self.next()
            if balance <= 0 or self.at_end():
                break


def _scan(text: str, day: DayComposer, time: TimeComposer, tz: TimeZoneComposer) -> None:
    """Feed every token of *text* to the matching composer."""
    rd = _Reader(text)
    while not rd.at_end():
        if rd.is_digit():
            n = rd.read_number()
            if rd.skip(":"):
                if rd.skip(":"):
                    # "n::" means hour with an empty minute
                    if not time.is_empty():
                        raise _Reject("hour after time already started")
                    time.add(n)
                    time.add(0)
                else:
                    time.add(n)
            elif tz.is_expecting(n):
                tz.set_minute(n)
            elif time.is_expecting(n):
                time.add_final(n)
                if not rd.at_end() and not rd.skip_whitespace():
                    raise _Reject("time must be followed by whitespace")
            else:
                day.add(n)
                rd.skip("-")
        elif rd.is_word_char():
            word = rd.read_word()
            entry = classify(word)
            if entry.type is KeywordType.AM_PM and not time.is_empty():
                time.set_hour_offset(entry.value)
            elif entry.type is KeywordType.MONTH_NAME:
                day.set_named_month(entry.value)
                rd.skip("-")
            elif entry.type is KeywordType.TIME_ZONE_NAME and rd.has_read_number:
                tz.set_offset_hours(entry.value)
            elif rd.has_read_number:
                raise _Reject(f"unexpected word {word!r}")
        elif rd.is_sign() and (tz.is_utc() or not time.is_empty()):
            tz.set_sign(rd.sign_value())
            rd.next()
            n = rd.read_number()
            if rd.skip(":"):
                tz.set_hour(n)
                tz.set_minute(None)
            else:
                tz.set_hour(n // 100)
                tz.set_minute(n % 100)
        elif rd.peek() == "(":
            rd.skip_parentheses()
        elif (rd.is_sign() or rd.peek() == ")") and rd.has_read_number:
            raise _Reject(f"unexpected {rd.peek()!r}")
        else:
            rd.next()


def parse_date(text: str) -> Optional[DateRecord]:
    """Parse a free-form date string such as ``"Jan 5 2010 10:00 PM PST"``.

    Returns a :class:`DateRecord` (0-based month, offset in seconds) or ``None``
    when the string is not a valid date.
    """
    if not text:
        return None

    day = DayComposer()
    time = TimeComposer()
    tz = TimeZoneComposer()
    try:
        _scan(text, day, time, tz)
    except (_Reject, ComposerError) as exc:
        LOGGER.debug("date-parse rejected text=%r reason=%s", text, exc)
        return None

    record = DateRecord()
    if day.write(record) and time.write(record) and tz.write(record):
        return record
    LOGGER.debug(
        "date-parse invalid text=%r day=%s named_month=%s time=%s tz_sign=%s",
        text,
        day.components(),
        day.named_month,
        time.components(),
        tz.sign,
    )
    return None


def parse_date_strict(text: str) -> DateRecord:
    """Like :func:`parse_date` but raises :class:`DateParseError` on failure."""
    record = parse_date(text)
    if record is None:
        raise DateParseError(text)
    return record

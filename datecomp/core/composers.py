"""Accumulators that collect scanned date/time tokens and resolve them into a record.

Each composer is created per parse, fed tokens in the order they appear, and
finalized once with ``write``. ``write`` returns ``False`` (and leaves the
record untouched) when the collected values do not form a valid date, time
or offset. Misuse of the accumulation API itself (too many components, a
second month name, ...) raises a :class:`ComposerError`.
"""
from __future__ import annotations

from typing import Optional

from .record import DateRecord, fits_small_int

CAPACITY = 3


class ComposerError(ValueError):
    pass


class ComposerFullError(ComposerError):
    pass


class ComposerStateError(ComposerError):
    pass


def _between(x: int, lo: int, hi: int) -> bool:
    return lo <= x <= hi


def is_month(x: int) -> bool:
    return _between(x, 1, 12)


def is_day(x: int) -> bool:
    return _between(x, 1, 31)


def is_hour(x: int) -> bool:
    return _between(x, 0, 23)


def is_hour12(x: int) -> bool:
    return _between(x, 0, 12)


def is_minute(x: int) -> bool:
    return _between(x, 0, 59)


def is_second(x: int) -> bool:
    return _between(x, 0, 59)


def normalize_year(year: int) -> int:
    """Expand two-digit years: 0-49 -> 20xx, 50-99 -> 19xx."""
    if _between(year, 0, 49):
        return year + 2000
    if _between(year, 50, 99):
        return year + 1900
    return year


class _Components:
    """Ordered buffer of at most three integers."""

    def __init__(self) -> None:
        self._comp: list[int] = []

    @property
    def count(self) -> int:
        return len(self._comp)

    def is_empty(self) -> bool:
        return not self._comp

    def is_full(self) -> bool:
        return len(self._comp) >= CAPACITY

    def add(self, value: int) -> None:
        if self.is_full():
            raise ComposerFullError(f"{type(self).__name__} already holds {CAPACITY} components")
        self._comp.append(int(value))

    def components(self) -> tuple[int, ...]:
        return tuple(self._comp)


class DayComposer(_Components):
    def __init__(self) -> None:
        super().__init__()
        self.named_month: Optional[int] = None

    def is_full(self) -> bool:
        # a month name takes one of the three slots
        return len(self._comp) + (self.named_month is not None) >= CAPACITY

    def set_named_month(self, month: int) -> None:
        if self.named_month is not None:
            raise ComposerStateError("month name already set")
        if self.is_full():
            raise ComposerFullError(f"DayComposer already holds {CAPACITY} components")
        if not is_month(month):
            raise ComposerStateError(f"invalid month number: {month}")
        self.named_month = month

    def write(self, record: DateRecord) -> bool:
        comp = self._comp
        n = len(comp)
        year = 0  # unset year resolves to 2000
        if self.named_month is None:
            if n < 2:
                return False
            if n == 3 and not is_day(comp[0]):
                # Y-M-D
                year, month, day = comp
            else:
                # M-D(-Y)
                month, day = comp[0], comp[1]
                if n == 3:
                    year = comp[2]
        else:
            month = self.named_month
            if n < 1:
                return False
            if n == 1:
                day = comp[0]
            elif not is_day(comp[0]):
                # year first: Y-M-D, M-Y-D or Y-D-M
                year, day = comp[0], comp[1]
            else:
                # day first: D-M-Y, M-D-Y or D-Y-M
                day, year = comp[0], comp[1]

        year = normalize_year(year)
        if not fits_small_int(year) or not is_month(month) or not is_day(day):
            return False

        record.year = year
        record.month = month - 1
        record.day = day
        return True


class TimeComposer(_Components):
    def __init__(self) -> None:
        super().__init__()
        self.hour_offset: Optional[int] = None

    def add_final(self, value: int) -> None:
        """Add the last component and pad the remaining slots with zero."""
        self.add(value)
        while not self.is_full():
            self._comp.append(0)

    def is_expecting(self, value: int) -> bool:
        return (self.count == 1 and is_minute(value)) or (self.count == 2 and is_second(value))

    def set_hour_offset(self, offset: int) -> None:
        if self.hour_offset is not None:
            raise ComposerStateError("AM/PM already set")
        if offset not in (0, 12):
            raise ComposerStateError(f"hour offset must be 0 or 12, got {offset}")
        self.hour_offset = offset

    def write(self, record: DateRecord) -> bool:
        hour, minute, second = (list(self._comp) + [0, 0, 0])[:CAPACITY]

        if self.hour_offset is not None:
            if not is_hour12(hour):
                return False
            hour = hour % 12 + self.hour_offset

        if not is_hour(hour) or not is_minute(minute) or not is_second(second):
            return False

        record.hour = hour
        record.minute = minute
        record.second = second
        return True


class TimeZoneComposer:
    def __init__(self) -> None:
        self.sign: Optional[int] = None
        self.hour: Optional[int] = None
        self.minute: Optional[int] = None

    def set_sign(self, sign: int) -> None:
        if sign not in (1, -1):
            raise ComposerStateError(f"sign must be +1 or -1, got {sign}")
        self.sign = sign

    def set_hour(self, value: int) -> None:
        self.hour = value

    def set_minute(self, value: Optional[int]) -> None:
        self.minute = value

    def set_offset_hours(self, hours: int) -> None:
        """Apply a named zone such as ``pst`` (-8)."""
        self.sign = -1 if hours < 0 else 1
        self.hour = abs(hours)
        self.minute = 0

    def is_expecting(self, value: int) -> bool:
        return self.hour is not None and self.minute is None and is_minute(value)

    def is_utc(self) -> bool:
        return self.hour == 0 and self.minute == 0

    def write(self, record: DateRecord) -> bool:
        if self.sign is None:
            record.utc_offset = None
            return True
        hour = self.hour or 0
        minute = self.minute or 0
        total_seconds = self.sign * (hour * 3600 + minute * 60)
        if not fits_small_int(total_seconds):
            return False
        record.utc_offset = total_seconds
        return True

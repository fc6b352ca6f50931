from __future__ import annotations

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel

# Representable range of a small integer slot (31-bit signed).
SMALL_INT_MIN = -(2 ** 30)
SMALL_INT_MAX = 2 ** 30 - 1


def fits_small_int(value: int) -> bool:
    return SMALL_INT_MIN <= value <= SMALL_INT_MAX


class OutputSlot(IntEnum):
    YEAR = 0
    MONTH = 1
    DAY = 2
    HOUR = 3
    MINUTE = 4
    SECOND = 5
    UTC_OFFSET = 6


class DateRecord(BaseModel):
    """
    Normalized result of a date/time parse.

    Attributes:
        year (Optional[int]): Full year, two-digit years already expanded.
        month (Optional[int]): 0-based month (0 = January).
        day (Optional[int]): Day of month, 1-31.
        hour (Optional[int]): 0-23.
        minute (Optional[int]): 0-59.
        second (Optional[int]): 0-59.
        utc_offset (Optional[int]): Signed seconds east of UTC. ``None`` means the
            input named no time zone.
    """
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    utc_offset: Optional[int] = None

    def as_list(self) -> list[Optional[int]]:
        return [getattr(self, slot.name.lower()) for slot in OutputSlot]

    def is_complete(self) -> bool:
        # utc_offset may legitimately stay None
        return all(v is not None for v in self.as_list()[: OutputSlot.UTC_OFFSET])

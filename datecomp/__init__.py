from .core import DateRecord, parse_date, parse_date_strict

__all__ = ["DateRecord", "parse_date", "parse_date_strict"]

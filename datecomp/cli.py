# datecomp/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from datecomp.config import configure_logging, load_settings
from datecomp.core.parser import parse_date

LOGGER = logging.getLogger(__name__)


def format_record(text: str, record) -> str:
    if record is None:
        return f"{text!r}: invalid date"
    offset = "none" if record.utc_offset is None else f"{record.utc_offset:+d}s"
    return (
        f"{text!r}: {record.year:04d}-{record.month + 1:02d}-{record.day:02d} "
        f"{record.hour:02d}:{record.minute:02d}:{record.second:02d} offset={offset}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Console entry point:
      datecomp "Jan 5 2010 10:00 PM PST" "12/25/99"
    Exits 0 when every input parsed, 1 otherwise.
    """
    parser = argparse.ArgumentParser(description="Parse loosely formatted date strings")
    parser.add_argument("texts", nargs="+", help="Date strings to parse")
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per line")
    parser.add_argument("--config", type=str, default=None, help="YAML settings file (overrides DATECOMP_CONFIG)")
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    configure_logging(settings)

    failures = 0
    for text in args.texts:
        record = parse_date(text)
        if record is None:
            failures += 1
        if args.json:
            payload = {"text": text, "ok": record is not None,
                       "record": record.model_dump() if record else None}
            print(json.dumps(payload))
        else:
            print(format_record(text, record))

    LOGGER.info("date-parse cli total=%s failed=%s", len(args.texts), failures)
    return 1 if failures else 0


if __name__ == "__main__":
    # When executed as `python -m datecomp.cli ...`
    sys.exit(main())

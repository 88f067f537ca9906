# coding: utf-8
"""Print the latest Wasabi storage utilization as a JSON line.

Usage::

    wasabi-usage --access-key KEY --secret-key SECRET
    wasabi-usage KEY SECRET

On success a single line such as
``{"active":"1.00","deleted":"0.00","objects":5}`` is written to stdout.
Any failure prints a diagnostic to stderr and exits with status 1.
"""

import logging
import sys
from typing import Optional, Sequence

from config import get_log_level
from wasabi_usage import (
    UsageError,
    UsageRecord,
    build_parser,
    credentials_from_args,
    fetch_latest_record,
    render_summary,
    summarize,
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr so stdout only carries the summary."""
    logging.basicConfig(
        level=get_log_level(level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Execute one report and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        credentials = credentials_from_args(args)
        record = fetch_latest_record(credentials)
        summary = summarize(UsageRecord.from_mapping(record))
        line = render_summary(summary)
    except UsageError as exc:
        logging.debug("Usage report failed", exc_info=True)
        logging.error("%s", exc)
        print(exc, file=sys.stderr)
        return 1
    logging.info(
        "Active %s TiB, deleted %s TiB, %s objects",
        summary.active,
        summary.deleted,
        summary.objects,
    )
    print(line)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

"""Wasabi storage utilization reporter."""

from .client import STATS_URL, build_headers, fetch_latest_record
from .credentials import Credentials, build_parser, credentials_from_args, resolve_credentials
from .errors import (
    BodyReadError,
    InvalidRecordShape,
    MalformedResponse,
    MissingCredentials,
    NoRecords,
    OutputSerializationError,
    RequestError,
    UnexpectedStatus,
    UsageError,
)
from .report import TIB, UsageRecord, UsageSummary, format_tib, render_summary, summarize

__all__ = [
    "STATS_URL",
    "TIB",
    "build_headers",
    "fetch_latest_record",
    "Credentials",
    "build_parser",
    "credentials_from_args",
    "resolve_credentials",
    "UsageRecord",
    "UsageSummary",
    "format_tib",
    "render_summary",
    "summarize",
    "UsageError",
    "MissingCredentials",
    "RequestError",
    "UnexpectedStatus",
    "BodyReadError",
    "MalformedResponse",
    "NoRecords",
    "InvalidRecordShape",
    "OutputSerializationError",
]

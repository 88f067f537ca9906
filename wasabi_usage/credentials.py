"""Command line parsing for the access-key/secret pair."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import MissingCredentials


@dataclass(frozen=True)
class Credentials:
    """Wasabi access key pair used to sign the single stats request."""

    access_key: str
    secret_key: str

    def __repr__(self) -> str:
        return f"Credentials(access_key={self.access_key!r}, secret_key='***')"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wasabi-usage",
        allow_abbrev=False,
        description="Print the latest Wasabi storage utilization as JSON.",
    )
    parser.add_argument(
        "--access-key",
        "-access-key",
        dest="access_key",
        default="",
        help="Wasabi Access Key ID.",
    )
    parser.add_argument(
        "--secret-key",
        "-secret-key",
        dest="secret_key",
        default="",
        help="Wasabi Secret Access Key.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="KEY",
        help="Access key and secret key, used when the flags are not given.",
    )
    return parser


def credentials_from_args(args: argparse.Namespace) -> Credentials:
    """Combine flags and positional arguments into a credential pair.

    Each flag wins over its positional counterpart: the first positional
    argument fills a missing access key and the second fills a missing
    secret key.
    """
    positional: List[str] = list(args.args or [])
    access_key = args.access_key or ""
    secret_key = args.secret_key or ""
    if not access_key and len(positional) > 0:
        access_key = positional[0]
    if not secret_key and len(positional) > 1:
        secret_key = positional[1]
    if not access_key or not secret_key:
        raise MissingCredentials()
    return Credentials(access_key, secret_key)


def resolve_credentials(argv: Optional[Sequence[str]] = None) -> Credentials:
    """Parse ``argv`` and return the resolved credentials."""
    return credentials_from_args(build_parser().parse_args(argv))

"""HTTP access to the Wasabi stats API."""
from __future__ import annotations

import logging
import math
from typing import Any, Dict

import requests

from .credentials import Credentials
from .errors import (
    BodyReadError,
    InvalidRecordShape,
    MalformedResponse,
    NoRecords,
    RequestError,
    UnexpectedStatus,
)

STATS_URL = "https://stats.wasabisys.com/v1/standalone/utilizations?latest=true"


def build_headers(credentials: Credentials) -> Dict[str, str]:
    """Return the request headers; the API takes ``key:secret`` verbatim."""
    return {"Authorization": f"{credentials.access_key}:{credentials.secret_key}"}


def _reject_constant(name: str) -> float:
    raise ValueError(f"unsupported JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} out of range")
    return value


def _float_sized_int(text: str) -> int:
    value = int(text)
    try:
        float(value)
    except OverflowError:
        raise ValueError(f"number {text[:20]}... out of range") from None
    return value


def fetch_latest_record(credentials: Credentials) -> Dict[str, Any]:
    """Fetch the latest utilization and return its first record.

    Raises a :class:`~wasabi_usage.errors.UsageError` subclass for every
    failure. The connection is released before this function returns.
    """
    headers = build_headers(credentials)
    logging.info(
        "Requesting latest utilization for access key %s", credentials.access_key
    )
    try:
        resp = requests.get(STATS_URL, headers=headers, stream=True)
    except requests.RequestException as exc:
        raise RequestError(f"Error making request: {exc}") from exc

    with resp:
        logging.debug("Stats API answered with status %s", resp.status_code)
        if resp.status_code != requests.codes.ok:
            raise UnexpectedStatus(resp.status_code)
        try:
            body = resp.content
        except (requests.RequestException, OSError) as exc:
            raise BodyReadError(f"Error reading response: {exc}") from exc
        logging.debug("Read %s bytes of response body", len(body))
        try:
            data = resp.json(
                parse_constant=_reject_constant,
                parse_float=_finite_float,
                parse_int=_float_sized_int,
            )
        except ValueError as exc:
            raise MalformedResponse(f"Error parsing JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedResponse("Error parsing JSON: top-level value is not an object")
    records = data.get("Records")
    if not isinstance(records, list) or not records:
        raise NoRecords()
    logging.debug("Response contains %s records, using the first", len(records))
    record = records[0]
    if not isinstance(record, dict):
        raise InvalidRecordShape()
    return record

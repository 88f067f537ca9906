"""Turn a raw utilization record into the printed summary."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .errors import OutputSerializationError

TIB = 1_099_511_627_776  # 2**40 bytes


def _number(value: Any) -> float:
    """Return ``value`` as a float, or 0.0 when it is not a JSON number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


@dataclass
class UsageRecord:
    """The numeric fields of interest from one utilization record."""

    padded_storage_bytes: float = 0.0
    metadata_storage_bytes: float = 0.0
    deleted_storage_bytes: float = 0.0
    billable_objects: float = 0.0

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "UsageRecord":
        # Missing or non-numeric fields count as zero.
        return cls(
            padded_storage_bytes=_number(record.get("PaddedStorageSizeBytes")),
            metadata_storage_bytes=_number(record.get("MetadataStorageSizeBytes")),
            deleted_storage_bytes=_number(record.get("DeletedStorageSizeBytes")),
            billable_objects=_number(record.get("NumBillableObjects")),
        )


@dataclass
class UsageSummary:
    active: str
    deleted: str
    objects: int

    def to_dict(self) -> Dict[str, Any]:
        return {"active": self.active, "deleted": self.deleted, "objects": self.objects}


def format_tib(value: float) -> str:
    """Format a TiB value with two decimals, rounding half-way cases."""
    return f"{value:.2f}"


def summarize(record: UsageRecord) -> UsageSummary:
    active = (record.padded_storage_bytes + record.metadata_storage_bytes) / TIB
    deleted = record.deleted_storage_bytes / TIB
    return UsageSummary(
        active=format_tib(active),
        deleted=format_tib(deleted),
        # truncates toward zero
        objects=int(record.billable_objects),
    )


def render_summary(summary: UsageSummary) -> str:
    """Encode the summary as a single compact JSON line."""
    try:
        return json.dumps(summary.to_dict(), separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise OutputSerializationError(f"Error marshaling output JSON: {exc}") from exc

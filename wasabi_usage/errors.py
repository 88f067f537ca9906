"""Exceptions raised while producing a usage report.

The message of each exception is the full diagnostic printed on stderr.
"""
from __future__ import annotations


class UsageError(Exception):
    """Base class for every failure that ends a usage run."""


class MissingCredentials(UsageError):
    def __init__(self) -> None:
        super().__init__(
            "Error: Access Key ID and Secret Access Key must be provided as arguments or flags"
        )


class RequestError(UsageError):
    """The GET request could not be completed."""


class UnexpectedStatus(UsageError):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Error: received status code {status_code}")


class BodyReadError(UsageError):
    """The response body could not be read."""


class MalformedResponse(UsageError):
    """The response body is not valid JSON."""


class NoRecords(UsageError):
    def __init__(self) -> None:
        super().__init__("Error: no records found in response")


class InvalidRecordShape(UsageError):
    def __init__(self) -> None:
        super().__init__("Error: invalid record format")


class OutputSerializationError(UsageError):
    """The summary could not be encoded as JSON."""

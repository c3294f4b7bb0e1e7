"""Non-raising wrapper around the extractor."""

from typing import NamedTuple, Optional

from uuid7ts.errors import UUIDv7Error
from uuid7ts.extract import extract_timestamp_from_uuid_v7


class ExtractResult(NamedTuple):
    """Either a millisecond timestamp or the error that stopped extraction."""

    timestamp_ms: Optional[int] = None
    error: Optional[UUIDv7Error] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        if self.error is not None:
            raise self.error
        return self.timestamp_ms


def try_extract_timestamp(uuid) -> ExtractResult:
    """Like extract_timestamp_from_uuid_v7, but returns the error instead of raising it."""
    try:
        return ExtractResult(timestamp_ms=extract_timestamp_from_uuid_v7(uuid))
    except UUIDv7Error as e:
        return ExtractResult(error=e)

"""UUID v7 timestamp extraction.

UUID v7 stores a Unix timestamp in milliseconds in its first 48 bits
(12 hex chars), giving the exact date and time the ID was created.
"""

import logging
from datetime import datetime, timedelta, timezone

from uuid7ts.digest import parse_digest
from uuid7ts.errors import DateRangeError, PrecisionError

logger = logging.getLogger(__name__)

MAX_TIMESTAMP_MS = 2 ** 48 - 1
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# 9999-12-31T23:59:59.999Z, the last millisecond datetime can hold
MAX_DATETIME_MS = 253402300799999


def extract_timestamp_from_uuid_v7(uuid: str) -> int:
    """Extract epoch milliseconds from a UUID v7 string.

    Args:
        uuid: UUID string, hyphenated or not, any case.

    Returns:
        Milliseconds since the Unix epoch, 0 <= ms <= 2**48 - 1.

    Raises:
        InvalidInputError, FormatError, VersionMismatchError: see
            uuid7ts.digest.parse_digest.
        PrecisionError: the value is not an exact 48-bit count.
    """
    parsed = parse_digest(uuid)
    millis = parsed.timestamp_field

    # Must also survive a 53-bit float mantissa unchanged
    if not 0 <= millis <= MAX_TIMESTAMP_MS or float(millis) != millis:
        raise PrecisionError("extracted timestamp is not a finite number")

    logger.debug("Decoded %s -> %d ms", parsed.digest, millis)
    return millis


def ms_to_datetime(ms: int) -> datetime:
    """Epoch milliseconds to an aware UTC datetime."""
    if not 0 <= ms <= MAX_DATETIME_MS:
        raise DateRangeError(
            f"timestamp {ms} ms is outside the representable date range"
        )
    return EPOCH + timedelta(milliseconds=ms)


def format_iso(dt: datetime) -> str:
    """Render as YYYY-MM-DDTHH:MM:SS.sssZ. Naive values are taken as UTC."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.isoformat(timespec="milliseconds") + "Z"


def extract_timestamp_as_datetime(uuid: str) -> datetime:
    """Same as extract_timestamp_from_uuid_v7 but returns a UTC datetime."""
    return ms_to_datetime(extract_timestamp_from_uuid_v7(uuid))


def extract_timestamp_as_iso_string(uuid: str) -> str:
    return format_iso(extract_timestamp_as_datetime(uuid))

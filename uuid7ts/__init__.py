from uuid7ts.errors import (
    UUIDv7Error,
    InvalidInputError,
    FormatError,
    VersionMismatchError,
    PrecisionError,
    DateRangeError,
)
from uuid7ts.digest import CanonicalDigest, normalize, parse_digest
from uuid7ts.extract import (
    MAX_TIMESTAMP_MS,
    extract_timestamp_from_uuid_v7,
    extract_timestamp_as_datetime,
    extract_timestamp_as_iso_string,
    ms_to_datetime,
    format_iso,
)
from uuid7ts.result import ExtractResult, try_extract_timestamp

__version__ = "0.1.0"

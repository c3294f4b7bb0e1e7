"""Normalization and validation of UUID v7 strings.

A UUID is reduced to its canonical digest: 32 lowercase hex characters
with the group separators removed. The version nibble sits at offset 12
of the digest (first character of the third group).
"""

import re
from dataclasses import dataclass

from uuid7ts.errors import FormatError, InvalidInputError, VersionMismatchError

SEPARATOR = "-"
DIGEST_LENGTH = 32
TIMESTAMP_HEX_LENGTH = 12  # 48 bits
VERSION_INDEX = 12
EXPECTED_VERSION = "7"

_DIGEST_RE = re.compile(r"[0-9a-f]{32}")


@dataclass(frozen=True)
class CanonicalDigest:
    """Validated digest of a single UUID v7 string."""

    raw: str
    digest: str

    @property
    def version_nibble(self) -> str:
        return self.digest[VERSION_INDEX]

    @property
    def timestamp_hex(self) -> str:
        return self.digest[:TIMESTAMP_HEX_LENGTH]

    @property
    def timestamp_field(self) -> int:
        """Big-endian unsigned value of the first 48 bits."""
        return int(self.timestamp_hex, 16)


def normalize(uuid: str) -> str:
    """Strip hyphens, then lowercase. Whitespace is left alone."""
    return uuid.replace(SEPARATOR, "").lower()


def validate_input(uuid) -> None:
    if not isinstance(uuid, str) or not uuid:
        raise InvalidInputError("uuid must be a non-empty string")


def validate_digest(digest: str) -> None:
    if not _DIGEST_RE.fullmatch(digest):
        raise FormatError("invalid UUID format")


def validate_version(digest: str) -> None:
    nibble = digest[VERSION_INDEX]
    if nibble != EXPECTED_VERSION:
        raise VersionMismatchError(nibble)


def parse_digest(uuid: str) -> CanonicalDigest:
    """Run the input, format and version gates in order.

    Args:
        uuid: UUID string, hyphenated or not, any case.

    Returns:
        CanonicalDigest for the input.

    Raises:
        InvalidInputError: not a string, or empty.
        FormatError: not 32 hex characters once hyphens are removed.
        VersionMismatchError: version nibble is not 7.
    """
    validate_input(uuid)
    digest = normalize(uuid)
    validate_digest(digest)
    validate_version(digest)
    return CanonicalDigest(raw=uuid, digest=digest)

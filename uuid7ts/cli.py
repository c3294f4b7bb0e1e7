"""
Print the creation time encoded in a UUID v7.

Usage:
    uuid7ts 017f7f58-9abc-7abc-8123-0123456789ab            # ISO-8601 (default)
    uuid7ts 017f7f589abc7abc81230123456789ab --format ms    # epoch milliseconds
    uuid7ts <uuid> --format all                              # ms, datetime and ISO
"""

import argparse
import logging
from typing import List, Optional

from uuid7ts.config import Config, OUTPUT_FORMATS
from uuid7ts.errors import UUIDv7Error
from uuid7ts.extract import extract_timestamp_from_uuid_v7, format_iso, ms_to_datetime

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def render(uuid: str, output_format: str) -> List[str]:
    """Decode one UUID and return the output lines for the given format."""
    ms = extract_timestamp_from_uuid_v7(uuid)
    if output_format == "ms":
        return [str(ms)]

    dt = ms_to_datetime(ms)
    if output_format == "datetime":
        return [str(dt)]
    if output_format == "iso":
        return [format_iso(dt)]
    return [
        f"ms:       {ms}",
        f"datetime: {dt}",
        f"iso:      {format_iso(dt)}",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Extract the timestamp from a UUID v7")
    parser.add_argument("uuid", help="UUID v7, hyphenated or not")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: OUTPUT_FORMAT from .env, else iso)",
    )
    parser.add_argument("--env-file", default=None, help="Load settings from this .env file")
    args = parser.parse_args(argv)

    try:
        config = Config(args.env_file)
        output_format = config.output_format_for(args.format)
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Configuration error: %s", e)
        return 2

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    try:
        lines = render(args.uuid, output_format)
    except UUIDv7Error as e:
        logger.error("%s: %s", args.uuid, e)
        return 1

    for line in lines:
        print(line)
    return 0

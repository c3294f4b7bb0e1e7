"""Central configuration — loads settings from .env file.

Only the command-line tool reads these; the extraction functions take
no configuration.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Project root = directory containing the uuid7ts package
_PROJECT_DIR = Path(__file__).parent.parent.resolve()

# Load .env from project root
_env_path = _PROJECT_DIR / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("ms", "datetime", "iso", "all")


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self, env_file: Optional[str] = None):
        if env_file:
            load_dotenv(env_file, override=True)

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL: {self.log_level!r} "
                f"(expected one of {', '.join(LOG_LEVELS)})"
            )

        # Default CLI output: ms | datetime | iso | all
        # Validated in output_format_for()
        self.output_format: str = os.getenv("OUTPUT_FORMAT", "iso").strip().lower()

    def output_format_for(self, override: Optional[str] = None) -> str:
        """Return the explicit override if given, else the validated default."""
        if override:
            return override
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid OUTPUT_FORMAT: {self.output_format!r} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        return self.output_format

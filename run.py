#!/usr/bin/env python3
"""
Print the creation time encoded in a UUID v7.

Usage:
    python run.py 017f7f58-9abc-7abc-8123-0123456789ab            # ISO-8601 (default)
    python run.py 017f7f589abc7abc81230123456789ab --format ms    # epoch milliseconds
    python run.py <uuid> --format all                              # ms, datetime and ISO
"""

import sys

from uuid7ts.cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Scan for unused message keys without requiring an editable install."""

from __future__ import annotations

import sys
from pathlib import Path

# Make the src directory importable when running directly from a checkout.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from msgbundle.scanner import main


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations
import os
from typing import Optional


REPORT_OUTPUT_DIR = os.getenv("REPORT_OUTPUT_DIR", "./out")
REPORT_TIMEZONE: Optional[str] = os.getenv("REPORT_TIMEZONE") or None
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

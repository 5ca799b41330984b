"""Environment-variable-based configuration for the CSV uploader."""

from __future__ import annotations

import os
from pathlib import Path

GARMIN_EMAIL: str = os.environ.get("GARMIN_EMAIL", "")
GARMIN_PASSWORD: str = os.environ.get("GARMIN_PASSWORD", "")
TOKEN_DIR: Path = Path(os.environ.get("GARMIN_TOKEN_DIR", "~/.garminconnect")).expanduser()
CSV_DIALECT: str = os.environ.get("CSV_DIALECT", "comma")
UPLOAD_DELAY_S: float = float(os.environ.get("UPLOAD_DELAY_S", "0.4"))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

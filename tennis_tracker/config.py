from __future__ import annotations

from pathlib import Path
import os

try:
    from dotenv import load_dotenv
    load_dotenv()
except Exception:
    # python-dotenv is optional; ignore if not installed
    pass

# Default save location, relative to the working directory the tracker is
# started from. ``DATA_FILE`` is read once so tests can monkeypatch it.
DEFAULT_DATA_FILE = Path("data") / "TennisTournamentTracker.json"
DATA_FILE = Path(os.getenv("TRACKER_DATA_FILE") or DEFAULT_DATA_FILE)

# Separator printed between command outputs
DIVIDER = "=" * 45


def get_log_level() -> str:
    """Return the logging level name for diagnostic output."""
    return os.getenv("TRACKER_LOG_LEVEL", "WARNING").upper()


__all__ = [
    "DEFAULT_DATA_FILE",
    "DATA_FILE",
    "DIVIDER",
    "get_log_level",
]

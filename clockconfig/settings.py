# clockconfig/settings.py
"""
Base settings (paths, port, UI timings).
"""
from __future__ import annotations
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = Path(os.environ.get("CLOCKCONFIG_DATA_DIR") or PROJECT_ROOT / "data")
CONFIG_PATH = Path(os.environ.get("CLOCKCONFIG_CONFIG") or DATA_DIR / "config.json")
HOST = "0.0.0.0"
PORT = int(os.environ.get("CLOCKCONFIG_PORT") or 8080)

# Notification timings (seconds)
NOTIFICATION_DISMISS_S = 10.0
NOTIFICATION_HIDE_S = 0.5

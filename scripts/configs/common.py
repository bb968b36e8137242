"""Shared configuration — languages, defaults, and helpers for the scripts."""

import sys
from pathlib import Path

# Add src/ to Python path (needed before importing config.* dataclasses)
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "src"))

from outline import RTL_LANGUAGES  # noqa: E402, F401

# --- Wikipedia editions offered by default ---
LANGUAGES = {
    "en": "English",
    "de": "Deutsch",
    "fr": "Français",
    "es": "Español",
    "it": "Italiano",
    "nl": "Nederlands",
    "pl": "Polski",
    "pt": "Português",
    "ru": "Русский",
    "ja": "日本語",
    "zh": "中文",
    "id": "Bahasa Indonesia",
    "ar": "العربية",       # right-to-left
    "he": "עברית",         # right-to-left
}

# --- Shared defaults ---
DEFAULT_LANGUAGE = "en"
REQUEST_TIMEOUT = 10    # seconds
OUTPUT_DIR = "output"


class TeeLogger:
    """Duplicate stdout to a log file."""
    def __init__(self, log_path):
        self.terminal = sys.stdout
        self.log = open(log_path, "a", buffering=1)  # noqa: SIM115
    def write(self, msg):
        self.terminal.write(msg)
        self.log.write(msg)
    def flush(self):
        self.terminal.flush()
        self.log.flush()

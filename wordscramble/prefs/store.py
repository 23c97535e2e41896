"""
Best-score persistence.

The only state that outlives a process is the best score, kept under a
single named slot in a small JSON file:

    {"bestScore": 175}

Location: $WORDSCRAMBLE_HOME/prefs.json, else ~/.wordscramble/prefs.json.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "bestScore"
PREFS_FILENAME = "prefs.json"


def default_prefs_path() -> Path:
    home = os.getenv("WORDSCRAMBLE_HOME", "").strip()
    base = Path(home) if home else Path.home() / ".wordscramble"
    return base / PREFS_FILENAME


class BestScoreStore:
    def __init__(self, path: Optional[Path | str] = None):
        self.path = Path(path) if path is not None else default_prefs_path()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable prefs file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> int:
        """Stored best score, or 0 if nothing usable is stored."""
        value = self._read().get(BEST_SCORE_KEY, 0)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring invalid %s=%r in %s", BEST_SCORE_KEY, value, self.path)
            return 0
        return value

    def save(self, value: int) -> str:
        """
        Write the best score, preserving any other keys in the file.
        Returns the path written.
        """
        data = self._read()
        data[BEST_SCORE_KEY] = int(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return str(self.path)

    def record(self, value: int) -> bool:
        """Persist `value` only if it beats the stored best. Returns True if written."""
        if value <= self.load():
            return False
        self.save(value)
        logger.info("New best score %d saved to %s", value, self.path)
        return True

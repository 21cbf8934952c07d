"""Persisted best score."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreError(ValueError):
    """Raised when the high score file can't be understood."""


@dataclass
class HighScoreStore:
    """Keeps the best game total in a small JSON file."""

    path: Path

    def load(self) -> int:
        """Return the stored high score, or 0 if nothing is stored yet."""
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text())
        except OSError as e:
            raise HighScoreError(f"Can't read high score file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise HighScoreError(f"Corrupt high score file {self.path}: {e}") from e

        score = data.get("high_score") if isinstance(data, dict) else None
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            raise HighScoreError(f"No valid high_score in {self.path}")
        return score

    def save(self, score: int, force: bool = False) -> bool:
        """Store ``score`` if it beats the current best. Returns True if written.

        With ``force`` the stored value is overwritten without being read,
        which replaces an unreadable file.
        """
        if not force and score <= self.load():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": score}))
        except OSError as e:
            raise HighScoreError(f"Can't write high score file {self.path}: {e}") from e
        logger.info("New high score %d saved to %s", score, self.path)
        return True

# storage.py
"""Best-score persistence. Reads degrade to 0 and writes to no-ops when the store is unavailable."""
from pathlib import Path
from typing import Optional, Union
import json
import logging

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "snake_best_score"
DEFAULT_PATH = Path.home() / ".gridsnake" / "scores.json"


def _coerce_score(raw) -> int:
    if isinstance(raw, bool):
        return 0
    try:
        val = int(raw)
    except (TypeError, ValueError, OverflowError):
        return 0
    return val if val > 0 else 0


class BestScoreStore:
    """Single best-score value kept in a small JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else DEFAULT_PATH

    def get(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Could not read best score from %s: %s", self.path, exc)
            return 0
        if not isinstance(data, dict):
            return 0
        return _coerce_score(data.get(BEST_SCORE_KEY))

    def set(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({BEST_SCORE_KEY: int(score)}, f)
        except OSError as exc:
            logger.warning("Could not save best score to %s: %s", self.path, exc)


class MemoryScoreStore:
    """In-process store, used when nothing should touch the disk."""

    def __init__(self, value: int = 0):
        self.value = _coerce_score(value)

    def get(self) -> int:
        return self.value

    def set(self, score: int) -> None:
        self.value = int(score)

"""
scores.py — Best-score persistence.

One JSON file acts as a small key/value store. The best scores live in a
single record under SCORES_KEY:

    {"snakeHighScores": {"easy": 12, "normal": 7, "hard": 0}}

Anything missing, unreadable or malformed counts as "no record" (0).
Write failures are logged and otherwise ignored.
"""

import json
import logging
import os
from pathlib import Path

from .config import DIFFICULTIES, SCORES_KEY

logger = logging.getLogger(__name__)


def _sanitize(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value


class ScoreStore:
    """Best score per difficulty, persisted to `path`."""

    def __init__(self, path):
        self.path = Path(path)
        self._best: dict[str, int] = self._load()

    def get_best(self, difficulty: str) -> int:
        self._check(difficulty)
        return self._best[difficulty]

    def set_best(self, difficulty: str, value: int) -> None:
        self._check(difficulty)
        self._best[difficulty] = _sanitize(value)
        self._save()

    def all_best(self) -> dict[str, int]:
        return dict(self._best)

    # ── Private helpers ──────────────────────────────────────────
    @staticmethod
    def _check(difficulty: str) -> None:
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty: {difficulty!r}")

    def _read_storage(self) -> dict:
        if not self.path.exists():
            logger.debug("no score file at %s", self.path)
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("could not read scores from %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring malformed score file %s", self.path)
            return {}
        return data

    def _load(self) -> dict[str, int]:
        record = self._read_storage().get(SCORES_KEY)
        if not isinstance(record, dict):
            record = {}
        return {name: _sanitize(record.get(name, 0)) for name in DIFFICULTIES}

    def _save(self) -> None:
        # Other keys in the file belong to someone else; keep them.
        storage = self._read_storage()
        storage[SCORES_KEY] = dict(self._best)
        # Replaced whole, never written in place.
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(storage, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.warning("could not save scores to %s: %s", self.path, exc)

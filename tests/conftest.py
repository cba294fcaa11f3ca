import os
import random

# Headless pygame for the controller tests; must be set before pygame.init().
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from classic_snake.scores import ScoreStore


class MemoryScores:
    """In-memory stand-in with the same interface as ScoreStore."""

    def __init__(self, **best):
        self.best = {"easy": 0, "normal": 0, "hard": 0}
        self.best.update(best)
        self.writes = []

    def get_best(self, difficulty):
        return self.best[difficulty]

    def set_best(self, difficulty, value):
        self.writes.append((difficulty, value))
        self.best[difficulty] = value

    def all_best(self):
        return dict(self.best)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def memory_scores():
    return MemoryScores()


@pytest.fixture
def score_path(tmp_path):
    return tmp_path / "storage.json"


@pytest.fixture
def score_store(score_path):
    return ScoreStore(score_path)

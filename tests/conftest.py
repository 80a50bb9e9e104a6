import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from ghosthunt.engine.turn import TurnEngine  # noqa: E402
from ghosthunt.settings import Settings  # noqa: E402


class ScriptedRng:
    """Deterministic stand-in for random.Random.

    ``random()`` replays the given values (repeating the last one forever);
    ``randrange`` always picks index 0.
    """

    def __init__(self, values: Iterable[float] = (0.99,)) -> None:
        self.values: List[float] = list(values) or [0.99]
        self.calls = 0

    def random(self) -> float:
        i = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[i]

    def randrange(self, stop: int) -> int:
        return 0


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def engine(settings) -> TurnEngine:
    eng = TurnEngine(settings=settings, rng=ScriptedRng())
    eng.start_game()
    return eng

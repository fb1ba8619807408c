import os
import random
import sys
from pathlib import Path

import pytest

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import station_quiz
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from station_quiz.core.models import QuizState, Station


def make_station(name: str, ward: str = "新宿区", lines=("JR山手線",)) -> Station:
    """Helper to create test stations."""
    return Station(name, ward, tuple(lines))


# Common test fixtures
@pytest.fixture
def stations() -> tuple[Station, ...]:
    """Six-station catalog, sorted by name like the loader's output."""
    raw = [
        make_station("上野", "台東区", ["JR山手線", "東京メトロ銀座線"]),
        make_station("品川", "港区", ["JR山手線", "京急本線"]),
        make_station("新宿", "新宿区", ["JR山手線", "JR中央線"]),
        make_station("東京", "千代田区", ["JR山手線", "JR中央線"]),
        make_station("池袋", "豊島区", ["JR山手線", "JR埼京線"]),
        make_station("渋谷", "渋谷区", ["JR山手線", "JR埼京線"]),
    ]
    return tuple(sorted(raw, key=lambda s: s.name))


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible draws."""
    return random.Random(12345)


@pytest.fixture
def make_state(stations):
    """Factory for distinct QuizState values: make_state(i) uses stations i and i+1."""
    def _make(i: int) -> QuizState:
        n = len(stations)
        return QuizState(origin=stations[i % n], destination=stations[(i + 1) % n])
    return _make

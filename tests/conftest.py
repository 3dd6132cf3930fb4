from pathlib import Path

import pytest

from handy.rules.loader import load_rules
from handy.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


class StubRandomSource:
    """Random source replaying a fixed list of draws."""

    def __init__(self, *draws: float) -> None:
        self._draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self.calls % len(self._draws)]
        self.calls += 1
        return value


class StubEvent:
    def __init__(self) -> None:
        self.stopped = 0

    def stop_propagation(self) -> str:
        self.stopped += 1
        return "stopped"


@pytest.fixture
def rules() -> Rules:
    """The project rules file, loaded the way applications load it."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def stub_source():
    return StubRandomSource


@pytest.fixture
def event() -> StubEvent:
    return StubEvent()

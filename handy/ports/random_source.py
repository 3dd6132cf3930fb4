from typing import Protocol


class RandomSourcePort(Protocol):
    def random(self) -> float:
        """Return the next float in [0, 1)."""
        ...

import logging
import random

logger = logging.getLogger(__name__)


class SystemRandomSource:
    def __init__(self, seed: int | None = None, source: random.Random | None = None):
        if source is not None and seed is not None:
            raise ValueError("Pass either a seed or a source, not both")
        if seed is not None:
            logger.debug("Seeding random source with %s", seed)
        self._random = source or random.Random(seed)

    def random(self) -> float:
        return self._random.random()

    def reseed(self, seed: int | None) -> None:
        self._random.seed(seed)

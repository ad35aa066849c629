"""Random id source adapter.

Implements IdSourcePort by drawing uniformly distributed integers from
a bounded range with a private random.Random instance.
"""

import logging
import random

from clientele.core.ports import IdSourcePort

logger = logging.getLogger(__name__)

DEFAULT_LOWER = 100000
DEFAULT_UPPER = 999999


class RandomIdSource(IdSourcePort):
    """Draws candidate ids in [lower, upper).

    A fixed seed makes the sequence of draws reproducible. The generator
    is private to the instance, so seeding it does not affect the global
    random module.
    """

    def __init__(
        self,
        lower: int = DEFAULT_LOWER,
        upper: int = DEFAULT_UPPER,
        seed: int | None = None,
    ):
        """Initialize the random id source.

        Args:
            lower: Smallest id that may be drawn (inclusive, must be positive).
            upper: Upper bound of the range (exclusive).
            seed: Optional seed for reproducible draws.

        Raises:
            ValueError: If the range is empty or not positive.
        """
        if lower <= 0:
            raise ValueError(f"lower must be positive, got {lower}")
        if upper <= lower:
            raise ValueError(f"upper ({upper}) must be greater than lower ({lower})")
        self.lower = lower
        self.upper = upper
        self._random = random.Random(seed)
        if seed is not None:
            logger.debug(f"Random id source seeded with {seed}")

    def draw(self) -> int:
        return self._random.randrange(self.lower, self.upper)

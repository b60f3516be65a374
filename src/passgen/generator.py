import logging
import random
from dataclasses import dataclass, field

from .dto import Criteria
from .exc import CriteriaError, NoCharacterClassError

__all__ = ("Generator",)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Generator:
    """
    Draws candidates from the pooled characters of the included classes.

    Every character is drawn independently and uniformly, with replacement. Pass a
    seeded :class:`random.Random` as ``rng`` to get a reproducible sequence.
    """

    rng: random.Random = field(default_factory=random.SystemRandom)

    def generate(self, criteria: Criteria) -> str:
        """
        Raises:
            CriteriaError: If the length has not been collected yet.
            NoCharacterClassError: If no character class is included.
        """
        if criteria.length is None:
            raise CriteriaError("Password length has not been set")

        # declaration order, overlapping pools keep their duplicates
        pool = "".join(cc.characters for cc in criteria.included_classes())
        if not pool:
            raise NoCharacterClassError()

        logger.debug(
            "drawing %d character(s) from a pool of %d", criteria.length, len(pool)
        )
        return "".join(self.rng.choice(pool) for _ in range(criteria.length))

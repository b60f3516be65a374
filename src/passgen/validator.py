import logging
from dataclasses import dataclass

from .dto import CharacterClass, Criteria

__all__ = ("Validator",)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Validator:
    """Checks a candidate against the criteria it was generated from."""

    def is_valid(self, password: str, criteria: Criteria) -> bool:
        """
        Returns True if ``password`` has the requested length and holds at least one
        character of every included class. Excluded classes are never checked.

        All checks run even after one has failed, so that each one is logged.
        """
        logger.debug("validating password")

        is_valid = self.check_length(password, criteria)

        for cc in criteria.included_classes():
            is_valid = self.check_includes(password, cc) and is_valid

        if is_valid:
            logger.debug("all checks passed, will now complete")
        else:
            logger.debug("failures found, will retry")

        return is_valid

    def check_length(self, password: str, criteria: Criteria) -> bool:
        if len(password) == criteria.length:
            logger.debug("PASS: password is %d characters long", len(password))
            return True

        logger.debug(
            "FAIL: password is %d characters long, expected %s",
            len(password),
            criteria.length,
        )
        return False

    def check_includes(self, password: str, cc: CharacterClass) -> bool:
        if cc.matches(password):
            logger.debug("PASS: %s found", cc.name)
            return True

        logger.debug("FAIL: %s not found", cc.name)
        return False

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .dto import CharacterClass, Criteria
from .prompt import AbstractInputProvider

__all__ = ("Collector", "parse_int")

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: str) -> Optional[int]:
    """
    Parses the leading integer of ``value``, ignoring whatever follows it.

    Example::

        parse_int("12")     # 12
        parse_int(" 16px")  # 16
        parse_int("abc")    # None
    """
    if not (match := _LEADING_INT.match(value)):
        return None

    try:
        return int(match.group(1))
    except ValueError:
        # past the interpreter's integer string conversion limit
        return None


@dataclass(slots=True)
class Collector:
    """Fills in :class:`Criteria` from the answers of an input provider."""

    provider: AbstractInputProvider

    def collect(self, criteria: Criteria, min_length: int, max_length: int) -> None:
        logger.debug("collecting password parameters")
        criteria.length = self.collect_length(min_length, max_length)
        self.collect_inclusions(criteria.classes)

    def collect_length(self, min_length: int, max_length: int) -> int:
        """
        Asks for a length until the answer is an integer within
        ``[min_length, max_length]``. There is no limit on the number of attempts.
        """
        question = (
            "How many characters do you want the password to be? "
            "Choose between %d and %d characters." % (min_length, max_length)
        )

        while True:
            length = parse_int(self.provider.prompt(question))

            if length is not None and min_length <= length <= max_length:
                break

            logger.debug("rejected password length %r", length)
            self.provider.alert(
                "Please provide a valid number for your password's length!"
            )

        logger.debug("password length will be %d characters", length)
        return length

    def collect_inclusions(self, classes: Iterable[CharacterClass]) -> None:
        for cc in classes:
            cc.included = self.provider.confirm(
                "Would you like to include %s?" % cc.name.lower()
            )
            logger.debug(
                "%s will %sbe included", cc.name, "" if cc.included else "not "
            )

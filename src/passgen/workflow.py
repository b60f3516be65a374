import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from .collector import Collector
from .dto import Criteria
from .exc import NoCharacterClassError, RetryLimitExceededError
from .generator import Generator
from .validator import Validator

__all__ = ("PasswordWorkflow", "State")

logger = logging.getLogger(__name__)


class State(StrEnum):
    PENDING = "pending"
    COLLECTING = "collecting"
    GENERATING = "generating"
    VALIDATING = "validating"
    ABORTED = "aborted"
    FAILED = "failed"
    DONE = "done"


@dataclass(slots=True)
class PasswordWorkflow:
    """
    Collects the criteria, then generates candidates until one passes validation.

    From a high level:

      - collect the criteria for password generation.
      - if no character class is included, alert the user and abort.
      - generate a candidate and validate it, retrying until it passes.
      - return the password, or an empty string if the run was aborted.

    ``max_attempts`` caps the number of candidates; by default there is no cap.
    """

    collector: Collector
    min_length: int = 8
    max_length: int = 128
    generator: Generator = field(default_factory=Generator)
    validator: Validator = field(default_factory=Validator)
    max_attempts: Optional[int] = None
    criteria: Criteria = field(default_factory=Criteria.default)

    state: State = field(init=False, default=State.PENDING)
    attempts: int = field(init=False, default=0)

    def run(self) -> str:
        """
        Raises:
            RetryLimitExceededError: If ``max_attempts`` candidates all failed.
        """
        self._transition(State.COLLECTING)
        self.collector.collect(self.criteria, self.min_length, self.max_length)

        if not self.criteria.has_any_included():
            self._transition(State.ABORTED)
            self.collector.provider.alert(NoCharacterClassError().message)
            return ""

        while self.max_attempts is None or self.attempts < self.max_attempts:
            self._transition(State.GENERATING)
            password = self.generator.generate(self.criteria)
            self.attempts += 1

            self._transition(State.VALIDATING)
            if self.validator.is_valid(password, self.criteria):
                self._transition(State.DONE)
                return password

        self._transition(State.FAILED)
        raise RetryLimitExceededError(
            "No password satisfied the criteria",
            ctx=RetryLimitExceededError.Context(attempts=self.attempts),
        )

    def _transition(self, state: State) -> None:
        logger.debug("%s -> %s", self.state, state)
        self.state = state

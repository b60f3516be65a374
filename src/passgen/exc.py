from dataclasses import dataclass
from typing import TypedDict

from typing_extensions import override

__all__ = (
    "ApplicationError",
    "CriteriaError",
    "NoCharacterClassError",
    "RetryLimitExceededError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class CriteriaError(ApplicationError):
    """
    Raised when the criteria are not complete enough to generate or validate a
    password.
    """


@dataclass(slots=True)
class NoCharacterClassError(CriteriaError):
    """Raised when no character class has been included."""

    message: str = (
        "You must include at least one type of character to generate a password!"
    )


@dataclass(slots=True)
class RetryLimitExceededError(ApplicationError):
    """
    Raised when no candidate passed validation within the configured number of
    attempts.
    """

    class Context(TypedDict):
        attempts: int

    ctx: Context | None = None

    @override
    def format_message(self) -> str:
        return "%s (gave up after %d attempt(s))" % (
            self.message,
            (self.ctx or {"attempts": 0})["attempts"],
        )

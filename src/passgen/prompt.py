from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Optional

import click
from rich.console import Console
from rich.text import Text
from typing_extensions import override

__all__ = (
    "AbstractInputProvider",
    "ClickInputProvider",
    "PresetInputProvider",
    "ScriptedInputProvider",
)


class AbstractInputProvider(ABC):
    """Answers the questions the collector asks."""

    @abstractmethod
    def prompt(self, text: str) -> str: ...

    @abstractmethod
    def confirm(self, text: str) -> bool: ...

    @abstractmethod
    def alert(self, text: str) -> None: ...


@dataclass(slots=True)
class ClickInputProvider(AbstractInputProvider):
    """
    Blocking terminal prompts.

    Alerts go to stderr so that stdout carries nothing but the password. When stdin
    is closed, ``click`` raises :class:`click.Abort` and the run cannot proceed.
    """

    console: Console = field(default_factory=lambda: Console(stderr=True))

    @override
    def prompt(self, text: str) -> str:
        return str(click.prompt(text, type=str, err=True))

    @override
    def confirm(self, text: str) -> bool:
        return click.confirm(text, default=False, err=True)

    @override
    def alert(self, text: str) -> None:
        self.console.print(Text(f"=> {text}", style="yellow"))


@dataclass(slots=True)
class ScriptedInputProvider(AbstractInputProvider):
    """
    Replays canned answers in order, recording every question and alert.

    Raises:
        LookupError: When asked more questions than there are answers.
    """

    answers: deque[str | bool]
    questions: list[str] = field(default_factory=list)
    alerts: list[str] = field(default_factory=list)

    @classmethod
    def from_answers(cls, answers: Iterable[str | bool]) -> "ScriptedInputProvider":
        return cls(answers=deque(answers))

    def _next(self, text: str) -> str | bool:
        self.questions.append(text)
        try:
            return self.answers.popleft()
        except IndexError:
            raise LookupError("No answer left for %r" % text) from None

    @override
    def prompt(self, text: str) -> str:
        return str(self._next(text))

    @override
    def confirm(self, text: str) -> bool:
        return bool(self._next(text))

    @override
    def alert(self, text: str) -> None:
        self.alerts.append(text)


@dataclass(slots=True)
class PresetInputProvider(AbstractInputProvider):
    """
    Answers from values given up front (e.g. command line options) and hands every
    other question to ``fallback``.

    ``inclusions`` maps a question's subject, as it appears in the question, to the
    answer.
    """

    fallback: AbstractInputProvider
    length: Optional[int] = None
    inclusions: Mapping[str, bool] = field(default_factory=dict)

    @override
    def prompt(self, text: str) -> str:
        if self.length is not None:
            answer, self.length = str(self.length), None
            return answer
        return self.fallback.prompt(text)

    @override
    def confirm(self, text: str) -> bool:
        for subject, answer in self.inclusions.items():
            if subject.lower() in text.lower():
                return answer
        return self.fallback.confirm(text)

    @override
    def alert(self, text: str) -> None:
        self.fallback.alert(text)

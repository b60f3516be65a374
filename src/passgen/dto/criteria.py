import functools
from collections.abc import Iterator
from typing import Annotated, Optional

import annotated_types
import pydantic

__all__ = (
    "LOWERCASE_LETTERS",
    "NUMBERS",
    "SPECIAL_CHARACTERS",
    "CharacterClass",
    "Criteria",
    "uppercase_of",
)


LOWERCASE_LETTERS = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SPECIAL_CHARACTERS = " `~!@#$%^&*()_+-=[]\\{}|;':\",./<>?"


@functools.cache
def uppercase_of(characters: str) -> str:
    """Returns the upper-cased pool, computed once per distinct input."""
    return characters.upper()


class CharacterClass(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(validate_assignment=True)

    name: str = pydantic.Field(min_length=1)
    # an empty pool could never be satisfied by a candidate
    characters: str = pydantic.Field(min_length=1)
    included: bool = False

    def matches(self, text: str) -> bool:
        """Returns True on the first character of the pool found in ``text``."""
        for char in self.characters:
            if char in text:
                return True
        return False


class Criteria(pydantic.BaseModel):
    """
    The choices governing one generation attempt.

    ``length`` stays unset until the collector fills it in. The classes are kept in
    declaration order, which is also the order their pools are pooled in.
    """

    model_config = pydantic.ConfigDict(validate_assignment=True)

    length: Optional[Annotated[int, annotated_types.Ge(1)]] = None
    classes: list[CharacterClass] = pydantic.Field(min_length=1)

    @classmethod
    def default(cls, length: Optional[int] = None) -> "Criteria":
        return cls(
            length=length,
            classes=[
                CharacterClass(name="Lowercase letters", characters=LOWERCASE_LETTERS),
                CharacterClass(
                    name="Uppercase letters",
                    characters=uppercase_of(LOWERCASE_LETTERS),
                ),
                CharacterClass(name="Numbers", characters=NUMBERS),
                CharacterClass(
                    name="Special characters", characters=SPECIAL_CHARACTERS
                ),
            ],
        )

    def has_any_included(self) -> bool:
        return any(cc.included for cc in self.classes)

    def included_classes(self) -> Iterator[CharacterClass]:
        return (cc for cc in self.classes if cc.included)

    def get_class(self, name: str) -> CharacterClass:
        """
        Looks a class up by its name, case-insensitively. The first word of the name
        is accepted too, so ``"numbers"`` and ``"special"`` both resolve.

        Raises:
            KeyError: If no class matches ``name``.
        """
        needle = name.strip().lower()
        for cc in self.classes:
            label = cc.name.lower()
            if needle in (label, label.split()[0]):
                return cc
        raise KeyError(name)

from .criteria import CharacterClass, Criteria

__all__ = (
    "CharacterClass",
    "Criteria",
)

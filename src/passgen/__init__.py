from .collector import Collector
from .dto import CharacterClass, Criteria
from .generator import Generator
from .validator import Validator
from .workflow import PasswordWorkflow, State

__all__ = (
    "CharacterClass",
    "Collector",
    "Criteria",
    "Generator",
    "PasswordWorkflow",
    "State",
    "Validator",
)

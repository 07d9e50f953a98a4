"""
passgen.charclass
Character classes, their literal alphabets and how generation treats them.
"""

from enum import Enum
from typing import FrozenSet, Iterable, List


class CharacterClass(Enum):
    LOWER_LETTERS = "lower"
    UPPER_LETTERS = "upper"
    NUMBERS = "digits"
    SPECIAL_CHARACTERS = "special"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]

    @classmethod
    def parse(cls, tag: str) -> "CharacterClass":
        """Accept the tag names used by the CLI, the API and the config file."""
        if not isinstance(tag, str):
            raise ValueError(f"character class must be a string, got {tag!r}")
        key = tag.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"unknown character class: {tag!r}") from None


class GroupMode(Enum):
    # guaranteed characters take the place of regular draws
    REPLACE = "replace"
    # guaranteed characters are added on top of the requested length
    APPEND = "append"


ALPHABETS = {
    CharacterClass.LOWER_LETTERS: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.UPPER_LETTERS: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.NUMBERS: "0123456789",
    CharacterClass.SPECIAL_CHARACTERS: "!@#$%^&*()_+-=[]{}|;:',.<>?/",
}

# Pool and per-group order.
CLASS_ORDER: List[CharacterClass] = [
    CharacterClass.LOWER_LETTERS,
    CharacterClass.UPPER_LETTERS,
    CharacterClass.NUMBERS,
    CharacterClass.SPECIAL_CHARACTERS,
]

ALL_CLASSES: FrozenSet[CharacterClass] = frozenset(CLASS_ORDER)

_ALIASES = {
    "lower": CharacterClass.LOWER_LETTERS,
    "lowercase": CharacterClass.LOWER_LETTERS,
    "upper": CharacterClass.UPPER_LETTERS,
    "uppercase": CharacterClass.UPPER_LETTERS,
    "digits": CharacterClass.NUMBERS,
    "numbers": CharacterClass.NUMBERS,
    "special": CharacterClass.SPECIAL_CHARACTERS,
    "symbols": CharacterClass.SPECIAL_CHARACTERS,
}


def parse_classes(tags: Iterable[str]) -> FrozenSet[CharacterClass]:
    return frozenset(CharacterClass.parse(t) for t in tags)


def ordered(classes: Iterable[CharacterClass]) -> List[CharacterClass]:
    """Return the given classes in pool order."""
    wanted = set(classes)
    return [c for c in CLASS_ORDER if c in wanted]

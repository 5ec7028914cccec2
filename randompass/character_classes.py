from __future__ import annotations

import enum
import random
import string

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping, Optional


class EmptyCharacterClassError(ValueError):
    """Raised when a character is requested from a class with no characters."""


class ClassKind(enum.Enum):
    """The four character classes, in round-robin order."""

    UPPER_LATIN = 'UpperLatin'
    LOWER_LATIN = 'LowerLatin'
    DIGITS = 'Digits'
    SPECIAL = 'Special'


@dataclass(frozen=True)
class CharacterClass:
    """
    An immutable set of characters usable in a password.

    Attributes:
        kind: Which of the four classes this is.
        characters: Ordered collection of allowed characters.
    """

    kind: ClassKind
    characters: str

    @property
    def size(self) -> int:
        """Number of characters in the collection."""
        return len(self.characters)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.characters

    def random_character(self, rng: Optional[random.Random] = None) -> str:
        """
        Return one uniformly random character from the collection.

        Args:
            rng: Random source; the module-level generator when omitted.

        Raises:
            EmptyCharacterClassError: If the collection is empty.
        """
        if not self.characters:
            msg = f'Character class {self.kind.value} has no characters.'
            raise EmptyCharacterClassError(msg)

        return (rng or random).choice(self.characters)


SPECIAL_CHARACTERS: Final[str] = '@#$%^&*()_+!~'

UPPER_LATIN: Final = CharacterClass(ClassKind.UPPER_LATIN, string.ascii_uppercase)
LOWER_LATIN: Final = CharacterClass(ClassKind.LOWER_LATIN, string.ascii_lowercase)
DIGITS: Final = CharacterClass(ClassKind.DIGITS, string.digits)
SPECIAL: Final = CharacterClass(ClassKind.SPECIAL, SPECIAL_CHARACTERS)

CHARACTER_CLASSES: Final[tuple[CharacterClass, ...]] = (
    UPPER_LATIN,
    LOWER_LATIN,
    DIGITS,
    SPECIAL,
)

CHARACTER_CLASS_BY_KIND: Final[Mapping[ClassKind, CharacterClass]] = MappingProxyType(
    {char_class.kind: char_class for char_class in CHARACTER_CLASSES},
)

ALL_CHARACTERS: Final[str] = ''.join(c.characters for c in CHARACTER_CLASSES)


def random_character(
    char_class: CharacterClass,
    rng: Optional[random.Random] = None,
) -> str:
    """Return a uniformly random character from ``char_class``."""
    return char_class.random_character(rng)


def classify(char: str) -> Optional[ClassKind]:
    """
    Return the class a single character belongs to.

    Returns:
        The matching ClassKind, or None for characters outside every class.
    """
    for char_class in CHARACTER_CLASSES:
        if char in char_class:
            return char_class.kind
    return None

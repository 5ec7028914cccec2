from __future__ import annotations

import logging
import random
import sys

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, TextIO, Tuple

from .character_classes import (
    DIGITS,
    LOWER_LATIN,
    SPECIAL,
    UPPER_LATIN,
    CharacterClass,
    ClassKind,
)
from .config import DEFAULT_LENGTH
from .entropy import estimate_entropy

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = 'Password is empty'


@dataclass(frozen=True)
class GenerationRequest:
    """Which character classes to use and how long the password should be."""

    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_special: bool = True
    length: int = DEFAULT_LENGTH

    def selected_classes(self) -> Tuple[CharacterClass, ...]:
        """Return the selected classes in round-robin order."""
        flags = (
            (self.use_upper, UPPER_LATIN),
            (self.use_lower, LOWER_LATIN),
            (self.use_digits, DIGITS),
            (self.use_special, SPECIAL),
        )
        return tuple(char_class for used, char_class in flags if used)


@dataclass(frozen=True)
class GeneratedPassword:
    """
    A generated password and its metadata.

    Attributes:
        password: The generated characters.
        length: Number of characters in the password.
        classes: Classes that contributed at least one character.
        entropy: Estimated entropy in bits.
    """

    password: str = ''
    length: int = 0
    classes: FrozenSet[ClassKind] = frozenset()
    entropy: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.password

    def display(self, stream: Optional[TextIO] = None) -> None:
        """
        Write the password to ``stream`` (stdout by default).

        An explicit message is written instead when there is nothing to show.
        """
        out = stream if stream is not None else sys.stdout
        print(EMPTY_MESSAGE if self.is_empty else self.password, file=out)

    def __str__(self) -> str:
        return self.password


EMPTY_PASSWORD = GeneratedPassword()


@dataclass
class PasswordGenerator:
    """Generate random passwords by round-robin over the selected classes."""

    rng: random.Random = field(default_factory=random.SystemRandom)

    def generate(self, request: GenerationRequest) -> GeneratedPassword:
        """
        Build a password for ``request``.

        Returns:
            The generated password, or EMPTY_PASSWORD if no class is selected.
        """
        classes = request.selected_classes()

        if not classes:
            logger.debug('No character class selected, returning empty password')
            return EMPTY_PASSWORD

        chars = self._fill(classes, request.length)
        self._shuffle(chars)

        password = ''.join(chars)
        contributed = frozenset(
            c.kind for c in classes if any(ch in c for ch in password)
        )
        entropy = estimate_entropy(password)

        logger.debug(
            'Generated %d characters from %s (entropy %.2f bits)',
            len(password),
            ', '.join(k.value for k in sorted(contributed, key=_kind_order)),
            entropy,
        )
        return GeneratedPassword(
            password=password,
            length=len(password),
            classes=contributed,
            entropy=entropy,
        )

    def _fill(self, classes: Tuple[CharacterClass, ...], length: int) -> List[str]:
        """
        Pick one character per selected class per pass until ``length`` is hit.

        The last pass may stop before reaching every class.
        """
        chars: List[str] = []
        missing = length

        while missing > 0:
            for char_class in classes:
                if missing <= 0:
                    break
                chars.append(char_class.random_character(self.rng))
                missing -= 1

        return chars

    def _shuffle(self, chars: List[str]) -> None:
        """Fisher-Yates shuffle in place."""
        self.rng.shuffle(chars)


def _kind_order(kind: ClassKind) -> int:
    return list(ClassKind).index(kind)


def generate(
    use_upper: bool,
    use_lower: bool,
    use_digits: bool,
    use_special: bool,
    length: int,
    rng: Optional[random.Random] = None,
) -> GeneratedPassword:
    """
    Generate a password from the selected character classes.

    Args:
        use_upper: Include uppercase Latin letters.
        use_lower: Include lowercase Latin letters.
        use_digits: Include digits.
        use_special: Include special symbols.
        length: Desired number of characters; zero or less yields no characters.
        rng: Optional random source, mainly for reproducible output.

    Returns:
        A GeneratedPassword, or EMPTY_PASSWORD when every flag is False.
    """
    request = GenerationRequest(
        use_upper=use_upper,
        use_lower=use_lower,
        use_digits=use_digits,
        use_special=use_special,
        length=length,
    )
    generator = PasswordGenerator(rng) if rng is not None else PasswordGenerator()
    return generator.generate(request)

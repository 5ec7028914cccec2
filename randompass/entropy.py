"""
Password strength estimation.

The estimate is ``effective_length * log2(base)``:

- base is the summed size of every character class present in the password,
  plus one for each distinct character outside the known classes;
- effective length counts characters left to right, skipping the third and
  later character of a run of identical characters or of a run walking
  forward through a common sequence (digits, the alphabet, keyboard rows).
"""
from __future__ import annotations

import math

from typing import Final, FrozenSet, Tuple

from .character_classes import CHARACTER_CLASS_BY_KIND, classify

COMMON_SEQUENCES: Final[Tuple[str, ...]] = (
    '0123456789',
    'abcdefghijklmnopqrstuvwxyz',
    'qwertyuiop',
    'asdfghjkl',
    'zxcvbnm',
)

MAX_RUN: Final[int] = 2

_SEQUENCE_PAIRS: Final[FrozenSet[Tuple[str, str]]] = frozenset(
    (seq[i], seq[i + 1])
    for seq in COMMON_SEQUENCES
    for i in range(len(seq) - 1)
)

STRENGTH_THRESHOLDS: Final[Tuple[Tuple[float, str], ...]] = (
    (28, 'Very Weak'),
    (36, 'Weak'),
    (60, 'Moderate'),
    (80, 'Strong'),
)


def alphabet_size(password: str) -> int:
    """Return the size of the alphabet the password appears to draw from."""
    kinds = set()
    others = set()

    for char in password:
        kind = classify(char)
        if kind is None:
            others.add(char)
        else:
            kinds.add(kind)

    return sum(CHARACTER_CLASS_BY_KIND[k].size for k in kinds) + len(others)


def effective_length(password: str) -> int:
    """
    Return the length of the password after discounting patterns.

    Repeats are matched exactly; sequences are matched case-insensitively.
    """
    length = 0
    repeat_run = 0
    sequence_run = 0
    prev = ''

    for char in password:
        repeat_run = repeat_run + 1 if char == prev else 1
        if prev and (prev.lower(), char.lower()) in _SEQUENCE_PAIRS:
            sequence_run += 1
        else:
            sequence_run = 1

        if repeat_run <= MAX_RUN and sequence_run <= MAX_RUN:
            length += 1
        prev = char

    return length


def estimate_entropy(password: str) -> float:
    """
    Estimate the entropy of a password in bits.

    Never raises; empty input, or an alphabet of a single symbol, scores 0.0.
    """
    if not password:
        return 0.0

    base = alphabet_size(password)
    if base <= 1:
        return 0.0

    return effective_length(password) * math.log2(base)


def strength_label(bits: float) -> str:
    """Map an entropy estimate to a human-readable strength label."""
    for limit, label in STRENGTH_THRESHOLDS:
        if bits < limit:
            return label
    return 'Very Strong'

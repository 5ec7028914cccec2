from .character_classes import (
    ALL_CHARACTERS,
    CHARACTER_CLASS_BY_KIND,
    CHARACTER_CLASSES,
    DIGITS,
    LOWER_LATIN,
    SPECIAL,
    UPPER_LATIN,
    CharacterClass,
    ClassKind,
    EmptyCharacterClassError,
    random_character,
)
from .entropy import estimate_entropy, strength_label
from .password_generator import (
    EMPTY_PASSWORD,
    GeneratedPassword,
    GenerationRequest,
    PasswordGenerator,
    generate,
)

__all__ = [
    'ALL_CHARACTERS',
    'CHARACTER_CLASS_BY_KIND',
    'CHARACTER_CLASSES',
    'DIGITS',
    'EMPTY_PASSWORD',
    'LOWER_LATIN',
    'SPECIAL',
    'UPPER_LATIN',
    'CharacterClass',
    'ClassKind',
    'EmptyCharacterClassError',
    'GeneratedPassword',
    'GenerationRequest',
    'PasswordGenerator',
    'estimate_entropy',
    'generate',
    'random_character',
    'strength_label',
]

import io
import itertools
import random
import string

from collections import Counter

import pytest

from randompass import (
    ALL_CHARACTERS,
    EMPTY_PASSWORD,
    ClassKind,
    GeneratedPassword,
    GenerationRequest,
    PasswordGenerator,
    estimate_entropy,
    generate,
)
from randompass.character_classes import DIGITS, LOWER_LATIN, SPECIAL, UPPER_LATIN
from randompass.config import DEFAULT_LENGTH

FLAG_COMBINATIONS = [
    flags for flags in itertools.product([True, False], repeat=4) if any(flags)
]


class RecordingRandom(random.Random):
    """Seeded Random that remembers what it was asked to shuffle."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.before_shuffle: list = []

    def shuffle(self, x, *args, **kwargs):
        self.before_shuffle = list(x)
        super().shuffle(x, *args, **kwargs)


class TestGenerate:
    @pytest.mark.parametrize('flags', FLAG_COMBINATIONS)
    @pytest.mark.parametrize('length', [0, 1, 2, 3, 5, 12, 64])
    def test_length_matches_request(self, flags, length):
        result = generate(*flags, length, rng=random.Random(length))
        assert len(result.password) == length
        assert result.length == length

    @pytest.mark.parametrize('flags', FLAG_COMBINATIONS)
    def test_characters_come_from_selected_classes(self, flags):
        selected = [c for used, c in zip(flags, (UPPER_LATIN, LOWER_LATIN, DIGITS, SPECIAL)) if used]
        allowed = set(''.join(c.characters for c in selected))

        for seed in range(20):
            result = generate(*flags, 40, rng=random.Random(seed))
            assert set(result.password) <= allowed

    def test_all_classes_length_12(self):
        result = generate(True, True, True, True, 12)
        assert len(result.password) == 12
        assert all(c in ALL_CHARACTERS for c in result.password)
        assert result.classes == frozenset(ClassKind)

    def test_lowercase_only_length_8(self):
        result = generate(False, True, False, False, 8)
        assert len(result.password) == 8
        assert all(c in string.ascii_lowercase for c in result.password)
        assert result.classes == {ClassKind.LOWER_LATIN}

    def test_digits_only(self):
        result = generate(False, False, True, False, 10)
        assert len(result.password) == 10
        assert result.password.isdigit()

    def test_special_only(self):
        result = generate(False, False, False, True, 6)
        assert len(result.password) == 6
        assert all(c in '@#$%^&*()_+!~' for c in result.password)

    @pytest.mark.parametrize('length', [0, 5, 100])
    def test_no_class_selected_returns_sentinel(self, length):
        result = generate(False, False, False, False, length)
        assert result is EMPTY_PASSWORD
        assert result.length == 0
        assert result.classes == frozenset()
        assert result.entropy == 0.0

    def test_negative_length_gives_empty_password(self):
        result = generate(True, True, True, True, -3)
        assert result.password == ''
        assert result.length == 0
        assert result.entropy == 0.0

    def test_entropy_is_computed_from_output(self):
        result = generate(True, True, True, True, 20, rng=random.Random(3))
        assert result.entropy == pytest.approx(estimate_entropy(result.password))
        assert result.entropy > 0

    def test_seeded_rng_is_reproducible(self):
        first = generate(True, True, True, True, 24, rng=random.Random(99))
        second = generate(True, True, True, True, 24, rng=random.Random(99))
        assert first == second


class TestRoundRobin:
    def test_classes_are_evenly_represented(self):
        result = generate(True, True, True, True, 40, rng=random.Random(5))
        kinds = Counter(
            kind
            for char in result.password
            for kind, members in (
                (ClassKind.UPPER_LATIN, UPPER_LATIN),
                (ClassKind.LOWER_LATIN, LOWER_LATIN),
                (ClassKind.DIGITS, DIGITS),
                (ClassKind.SPECIAL, SPECIAL),
            )
            if char in members
        )
        assert set(kinds.values()) == {10}

    def test_partial_pass_favours_earlier_classes(self):
        result = generate(True, True, True, True, 3, rng=random.Random(11))
        assert result.classes == {
            ClassKind.UPPER_LATIN,
            ClassKind.LOWER_LATIN,
            ClassKind.DIGITS,
        }

    def test_unshuffled_sequence_cycles_in_fixed_order(self):
        rng = RecordingRandom(21)
        PasswordGenerator(rng).generate(
            GenerationRequest(use_upper=True, use_lower=False, use_digits=True, use_special=True, length=7),
        )
        order = (UPPER_LATIN, DIGITS, SPECIAL, UPPER_LATIN, DIGITS, SPECIAL, UPPER_LATIN)
        assert len(rng.before_shuffle) == 7
        for char, char_class in zip(rng.before_shuffle, order):
            assert char in char_class

    def test_shuffle_is_a_permutation(self):
        rng = RecordingRandom(8)
        result = PasswordGenerator(rng).generate(GenerationRequest(length=50))
        assert Counter(rng.before_shuffle) == Counter(result.password)


class TestGenerationRequest:
    def test_defaults_select_everything(self):
        request = GenerationRequest()
        assert request.selected_classes() == (UPPER_LATIN, LOWER_LATIN, DIGITS, SPECIAL)
        assert request.length == 16

    def test_selection_keeps_fixed_order(self):
        request = GenerationRequest(use_upper=False, use_lower=True, use_digits=False, use_special=True)
        assert request.selected_classes() == (LOWER_LATIN, SPECIAL)

    def test_nothing_selected(self):
        request = GenerationRequest(False, False, False, False, 10)
        assert request.selected_classes() == ()


class TestGeneratedPassword:
    def test_display_writes_password(self):
        out = io.StringIO()
        GeneratedPassword(password='abc', length=3).display(out)
        assert out.getvalue() == 'abc\n'

    def test_display_empty_sentinel(self):
        out = io.StringIO()
        EMPTY_PASSWORD.display(out)
        assert out.getvalue() == 'Password is empty\n'

    def test_display_defaults_to_stdout(self, capsys):
        generate(False, False, True, False, 4, rng=random.Random(0)).display()
        captured = capsys.readouterr().out.strip()
        assert len(captured) == 4
        assert captured.isdigit()

    def test_is_immutable(self):
        result = generate(True, False, False, False, 4)
        with pytest.raises(AttributeError):
            result.password = 'x'  # type: ignore[misc]

    def test_str_is_the_password(self):
        assert str(GeneratedPassword(password='Xy7#', length=4)) == 'Xy7#'


def test_default_generator_uses_system_random():
    assert isinstance(PasswordGenerator().rng, random.SystemRandom)


def test_request_default_length_follows_settings():
    assert GenerationRequest().length == DEFAULT_LENGTH

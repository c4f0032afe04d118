"""Tests for RandomStringGenerator."""

from collections.abc import Sequence

import pytest

from toolkit.services.random_string_service import (
    RANDOM_STRING_SOURCE,
    RandomStringGenerator,
    random_string,
)


class FirstChoiceSource:
    """Deterministic source that always picks the first element."""

    def choice(self, seq: Sequence[str]) -> str:
        return seq[0]


class BrokenSource:
    """Source whose entropy pool is unavailable."""

    def choice(self, seq: Sequence[str]) -> str:
        raise OSError("entropy source unavailable")


class TestAlphabet:
    """Tests for the random string alphabet."""

    def test_alphabet_has_64_unique_symbols(self) -> None:
        assert len(RANDOM_STRING_SOURCE) == 64
        assert len(set(RANDOM_STRING_SOURCE)) == 64

    def test_alphabet_includes_underscore_and_plus(self) -> None:
        assert "_" in RANDOM_STRING_SOURCE
        assert "+" in RANDOM_STRING_SOURCE


class TestGenerate:
    """Tests for random string generation."""

    @pytest.mark.parametrize("length", [1, 10, 25, 100])
    def test_length_is_exact(self, length: int) -> None:
        assert len(RandomStringGenerator().generate(length)) == length

    def test_zero_length_is_empty(self) -> None:
        assert RandomStringGenerator().generate(0) == ""

    def test_negative_length_raises(self) -> None:
        with pytest.raises(ValueError):
            RandomStringGenerator().generate(-1)

    def test_characters_come_from_alphabet(self) -> None:
        value = RandomStringGenerator().generate(500)
        assert set(value) <= set(RANDOM_STRING_SOURCE)

    def test_samples_do_not_collide(self) -> None:
        generator = RandomStringGenerator()
        samples = {generator.generate(16) for _ in range(200)}
        assert len(samples) == 200

    def test_injected_source_is_used(self) -> None:
        generator = RandomStringGenerator(source=FirstChoiceSource())
        assert generator.generate(5) == "aaaaa"

    def test_source_failure_propagates(self) -> None:
        generator = RandomStringGenerator(source=BrokenSource())
        with pytest.raises(OSError, match="entropy"):
            generator.generate(8)


class TestModuleHelper:
    """Tests for the random_string convenience function."""

    def test_random_string_length(self) -> None:
        assert len(random_string(10)) == 10

    def test_random_string_differs(self) -> None:
        assert random_string(32) != random_string(32)

"""Cryptographically secure random string generation."""

import secrets
from collections.abc import Sequence
from typing import Protocol

RANDOM_STRING_SOURCE = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_+"


class RandomSource(Protocol):
    """Anything that can pick an element uniformly from a sequence."""

    def choice(self, seq: Sequence[str]) -> str: ...


class RandomStringGenerator:
    """Generates strings drawn from a 64-symbol alphabet.

    The default source is the operating system CSPRNG. Errors raised by the
    source propagate unchanged; there is no fallback to a weaker generator.
    """

    def __init__(self, source: RandomSource | None = None) -> None:
        self._source: RandomSource = source or secrets.SystemRandom()

    def generate(self, n: int) -> str:
        """Return a string of exactly ``n`` random characters."""
        if n < 0:
            raise ValueError(f"Random string length must be non-negative, got {n}")
        return "".join(self._source.choice(RANDOM_STRING_SOURCE) for _ in range(n))


_default_generator = RandomStringGenerator()


def random_string(n: int) -> str:
    """Generate a random string with the shared secure generator."""
    return _default_generator.generate(n)

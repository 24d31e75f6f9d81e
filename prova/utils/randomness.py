import secrets
from typing import Iterable, Protocol

from prova.errors import InvalidParameters


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int:
        """Returns an integer drawn uniformly from [0, upper)."""


class SecretsRandomSource:
    """
    Uniform sampling backed by the operating system CSPRNG.

    secrets draws from os.urandom, which keeps no per-process state, so one
    instance can be shared by sessions running on different threads without
    their nonces becoming correlated.
    """

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise InvalidParameters(f"Sampling bound must be positive, got {upper}")
        return secrets.randbelow(upper)


class ScriptedRandomSource:
    """Replays a fixed sequence of values, each exactly once. Used to reproduce worked examples."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        self.position = 0

    def randbelow(self, upper: int) -> int:
        if self.position >= len(self.values):
            raise InvalidParameters("Scripted random values exhausted, a nonce can not be replayed")

        value = self.values[self.position]
        if not 0 <= value < upper:
            raise InvalidParameters(f"Scripted value {value} is outside [0, {upper})")

        self.position += 1
        return value


def default_random_source() -> RandomSource:
    return SecretsRandomSource()

# scatter_engine/core/utils/rng.py
from __future__ import annotations
from typing import Union

# золотое сечение для 64 бит
_DEF_CONST = 0x9E3779B97F4A7C15
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _splitmix64(x: int) -> int:
    x = (x + _DEF_CONST) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    return z ^ (z >> 31)


def seed_from_any(x: Union[int, str, bytes]) -> int:
    """int -> как есть (64 бита), str/bytes -> FNV-1a, чтобы сид можно было задать именем."""
    if isinstance(x, bool):
        raise TypeError("Unsupported seed type")
    if isinstance(x, int):
        return x & _MASK64
    if isinstance(x, bytes):
        acc = 0xcbf29ce484222325
        for b in x:
            acc ^= b
            acc = (acc * 0x100000001B3) & _MASK64
        return acc
    if isinstance(x, str):
        return seed_from_any(x.encode("utf-8"))
    raise TypeError("Unsupported seed type")


class RNG:
    """Маленький детерминированный генератор splitmix64: один сид -> один поток на любой платформе."""

    __slots__ = ("state",)

    def __init__(self, seed: Union[int, str, bytes]):
        self.state = seed_from_any(seed)

    def u64(self) -> int:
        self.state = _splitmix64(self.state)
        return self.state

    def uniform(self) -> float:
        """Float в [0, 1)."""
        return (self.u64() >> 11) * (1.0 / (1 << 53))

    def uniform_range(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self.uniform()

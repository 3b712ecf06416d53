"""A UUID held as two unsigned 64-bit halves."""

from __future__ import annotations

from dataclasses import dataclass

_U64_LIMIT = 1 << 64


@dataclass(frozen=True)
class UUID:
    """A 128-bit identifier split into its most and least significant halves."""

    most: int
    least: int

    def __post_init__(self) -> None:
        for name in ("most", "least"):
            value = getattr(self, name)
            if not 0 <= value < _U64_LIMIT:
                raise ValueError(f"{name} must fit in an unsigned 64-bit integer, got {value}")

    def __str__(self) -> str:
        return f"{self.most:x}{self.least:x}"
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntWidth:
    """A fixed-width integer type, e.g. u16 or i16."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def __str__(self) -> str:
        return self.name


U16 = IntWidth("u16", 16, signed=False)
I16 = IntWidth("i16", 16, signed=True)

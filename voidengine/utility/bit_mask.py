"""A set of enum flags stored as one integer."""

from __future__ import annotations

import enum
from typing import Generic, TypeVar

F = TypeVar("F", bound=enum.Enum)


def _bits(flag: enum.Enum | int) -> int:
    bits = flag.value if isinstance(flag, enum.Enum) else int(flag)
    if bits < 0:
        raise ValueError(f"flag bits must not be negative, got {bits}")
    return bits


class BitMask(Generic[F]):
    """Flags of one enum type combined into a single integer value."""

    __slots__ = ("_value",)

    def __init__(self, value: F | int = 0) -> None:
        self._value = _bits(value)

    def set(self, flag: F, value: bool = True) -> None:
        """Set the flag, or unset it when value is false."""
        if value:
            self._value |= _bits(flag)
        else:
            self.unset(flag)

    def unset(self, flag: F) -> None:
        """Clear the flag."""
        self._value &= ~_bits(flag)

    def toggle(self, flag: F) -> None:
        """Flip the flag."""
        self._value ^= _bits(flag)

    def clear(self) -> None:
        """Clear every flag."""
        self._value = 0

    def is_set(self, flag: F) -> bool:
        """Whether any bit of the flag is set."""
        return (self._value & _bits(flag)) != 0

    def value(self) -> int:
        """The raw integer value of the mask."""
        return self._value

    def copy(self) -> BitMask[F]:
        return BitMask(self._value)

    def __ior__(self, flag: F) -> BitMask[F]:
        self.set(flag)
        return self

    def __iand__(self, flag: F) -> BitMask[F]:
        # In-place "and" clears the flag, as the mask's own contract defines it.
        self.unset(flag)
        return self

    def __ixor__(self, flag: F) -> BitMask[F]:
        self.toggle(flag)
        return self

    def __or__(self, flag: F) -> BitMask[F]:
        result = self.copy()
        result.set(flag)
        return result

    def __and__(self, flag: F) -> BitMask[F]:
        return BitMask(self._value & _bits(flag))

    def __xor__(self, flag: F) -> BitMask[F]:
        result = self.copy()
        result.toggle(flag)
        return result

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BitMask):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitMask({self._value:#x})"
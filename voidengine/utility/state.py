"""A value that remembers what it was before its last change."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class State(Generic[T]):
    """Holds a current and a previous value of some state."""

    __slots__ = ("current", "previous")

    def __init__(self, initial: T | None = None) -> None:
        self.current = initial
        self.previous = initial

    def set(self, state: T) -> None:
        """Move the current value to previous and make state current."""
        self.previous = self.current
        self.current = state

    def changed(self) -> bool:
        """Whether the last set changed the value."""
        return self.previous != self.current

    def entered(self, state: T) -> bool:
        """Whether the value has just become state."""
        return self.previous != state and self.current == state

    def exited(self, state: T) -> bool:
        """Whether the value has just stopped being state."""
        return self.previous == state and self.current != state

    def __eq__(self, other: object) -> bool:
        return self.current == other

    def __ne__(self, other: object) -> bool:
        return self.current != other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"State(current={self.current!r}, previous={self.previous!r})"
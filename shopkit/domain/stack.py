"""
Stack abstract data type.

Last-in-first-out container with access restricted to the top element.

Key behaviors:
- push never fails
- pop/peek on an empty stack raise EmptyStackError (never a silent default)
- size() is always the count of held elements
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when reading from or popping an empty stack."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: stack is empty")


class Stack(Generic[T]):
    """
    Generic LIFO stack.

    Examples:
        stack: Stack[int] = Stack()
        stack.push(1)
        stack.pop()  # -> 1
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = []
        if items is not None:
            for item in items:
                self.push(item)

    def push(self, item: T) -> None:
        """Place item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyStackError("pop")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyStackError("peek")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

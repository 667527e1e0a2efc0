"""A last-in, first-out stack with a small console demonstration."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Stack:
    """Last-in, first-out container."""

    def __init__(self):
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def push(self, value: Any) -> None:
        """Place a value on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def display(self) -> str:
        """Describe the stack contents, top first."""
        return "Items in stack: [" + "".join(f" {item}" for item in self) + " ]"

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"


def main(argv=None) -> int:
    """Run a short demonstration of the stack."""
    stack = Stack()
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    print(stack.display())
    stack.pop()
    x = stack.pop()
    y = stack.peek()
    print(stack.display())
    print(f"x = {x}")
    print(f"y = {y}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
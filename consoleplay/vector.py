"""A growable array of floats with an explicit capacity."""

from __future__ import annotations

from collections.abc import Iterator

INITIAL_CAPACITY = 4


class Vector:
    """Sequence of floats whose capacity doubles when it fills up."""

    def __init__(self):
        self._items: list[float] = []
        self._capacity = INITIAL_CAPACITY

    def _make_room(self) -> None:
        if self.full():
            self._capacity = max(1, self._capacity * 2)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"vector index {index} out of range")

    def push_back(self, value: float) -> None:
        """Append a value at the end."""
        self._make_room()
        self._items.append(float(value))

    def push_front(self, value: float) -> None:
        """Insert a value at the start."""
        self.insert(0, value)

    def pop_back(self) -> None:
        """Drop the last value; does nothing when empty."""
        if self._items:
            self._items.pop()

    def pop_front(self) -> None:
        """Drop the first value; does nothing when empty."""
        if self._items:
            del self._items[0]

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self._items[index] = float(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def front(self) -> float:
        """Return the first value."""
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> float:
        """Return the last value."""
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) == self._capacity

    def resize(self, size: int, fill: float = 0.0) -> None:
        """Set the size and capacity to ``size``, padding with ``fill``."""
        if size < 0:
            raise ValueError("size must not be negative")
        del self._items[size:]
        self._items.extend(float(fill) for _ in range(size - len(self._items)))
        self._capacity = size

    def clear(self) -> None:
        """Remove every value, keeping the capacity."""
        self._items.clear()

    def insert(self, index: int, value: float) -> None:
        """Insert a value before position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} out of range")
        self._make_room()
        self._items.insert(index, float(value))

    def erase(self, index: int) -> None:
        """Remove the value at ``index``."""
        self._check_index(index)
        del self._items[index]

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"


def main(argv=None) -> int:
    """Run a short demonstration of the vector."""
    vector = Vector()
    for value in (2, 10, 5, 3):
        vector.push_back(value)
    vector.pop_front()
    print(f"{vector.front():g}")
    vector[0] = 2
    print(f"{vector.front():g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
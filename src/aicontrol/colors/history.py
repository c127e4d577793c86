"""Recently used colors.

Hides how the history is stored and kept distinct. Entries are ordered most
recent first and indexed from 1 externally ("history color 1" is the newest).
"""

from collections.abc import Callable, Iterator

from ..errors import HistoryColorNotFoundError
from .models import Color

DEFAULT_CAPACITY = 8

HistoryObserver = Callable[[tuple[Color, ...]], None]


class ColorHistory:
    """Bounded, duplicate-free sequence of colors, newest first.

    Two colors are duplicates when they share a hex form. Observers receive a
    snapshot after every mutation.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._colors: list[Color] = []
        self._observers: list[HistoryObserver] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, color: Color) -> None:
        """Move or insert a color to the front, evicting the oldest entry."""
        self._colors = [c for c in self._colors if c.hex != color.hex]
        self._colors.insert(0, color)
        del self._colors[self._capacity:]
        self._notify()

    def get(self, index: int) -> Color:
        """Get the entry at a 1-based index.

        Raises:
            HistoryColorNotFoundError: If the index is out of range
        """
        if index < 1 or index > len(self._colors):
            raise HistoryColorNotFoundError(index, len(self._colors))
        return self._colors[index - 1]

    def size(self) -> int:
        return len(self._colors)

    def clear(self) -> None:
        self._colors.clear()
        self._notify()

    def snapshot(self) -> tuple[Color, ...]:
        return tuple(self._colors)

    def subscribe(self, observer: HistoryObserver) -> None:
        """Register an observer called with a snapshot after each change."""
        self._observers.append(observer)

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for observer in self._observers:
            observer(snapshot)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.snapshot())

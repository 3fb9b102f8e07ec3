"""Two-dimensional grids used to run and render the Game of Life."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, NamedTuple, TypeVar

from .bits import BitAggregator, BitEnumerator
from .color import Color

T = TypeVar("T")


class Point(NamedTuple):
    """An integer cartesian point."""

    x: int
    y: int


_ORIGIN = Point(0, 0)


class Grid(ABC, Generic[T]):
    """A fixed-size grid of values stored row by row."""

    def __init__(self, width: int, height: int, fill: T) -> None:
        self.width = width
        self.height = height
        self._cells: list[T] = [fill] * (width * height)

    @property
    def capacity(self) -> int:
        return len(self._cells)

    def _offset(self, point: Point) -> int:
        return point.y * self.width + point.x

    def set_all(self, value: T) -> None:
        self._cells = [value] * len(self._cells)

    def set_value(self, value: T, point: Point) -> None:
        self._cells[self._offset(point)] = value

    def get_value(self, point: Point) -> T:
        return self._cells[self._offset(point)]

    def points(self) -> Iterator[Point]:
        """Yield every point, row by row from the top left."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def neighborhood(self, point: Point) -> Iterator[tuple[Point, Point]]:
        """Yield ``(offset, point)`` for the 3x3 block around ``point``, wrapping at the edges."""
        for oy in (-1, 0, 1):
            for ox in (-1, 0, 1):
                yield Point(ox, oy), Point((point.x + ox) % self.width, (point.y + oy) % self.height)

    @abstractmethod
    def color_for_value(self, value: T) -> Color:
        """Return the colour used to display ``value``."""

    def colors(self) -> list[float]:
        """Return the flattened r, g, b components of every cell."""
        result: list[float] = []
        for value in self._cells:
            c = self.color_for_value(value)
            result.extend((c.r, c.g, c.b))
        return result


class ChangeGrid(Grid[bool]):
    """Tracks which cells need consideration in the next generation."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height, False)

    def set_changed(self, point: Point) -> None:
        """Mark ``point`` and its eight neighbours as needing consideration."""
        for _, p in self.neighborhood(point):
            self.set_value(True, p)

    def color_for_value(self, value: bool) -> Color:
        return Color.red if value else Color.blue


class CellGrid(Grid[bool]):
    """Boolean cells that can advance one generation of Conway's Game of Life."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height, False)

    @staticmethod
    def _is_alive_in_next_generation(alive: bool, neighbors: int) -> bool:
        if alive:
            return neighbors in (2, 3)
        return neighbors == 3

    def _count_neighbors(self, point: Point) -> int:
        return sum(
            1
            for offset, p in self.neighborhood(point)
            if offset != _ORIGIN and self.get_value(p)
        )

    def data(self) -> bytes:
        """Return the cells packed into bytes, most significant bit first."""
        aggregator = BitAggregator()
        for value in self._cells:
            aggregator.append(value)
        return aggregator.data()

    def set_data(self, data: bytes) -> None:
        """Load cells from bytes; the grid must hold exactly eight cells per byte."""
        if len(data) * 8 != self.capacity:
            raise ValueError("Data size does not match grid capacity.")
        self._cells = list(BitEnumerator(data))

    def next_generation(
        self,
        current_change_grid: ChangeGrid,
        next_cell_grid: CellGrid,
        next_change_grid: ChangeGrid,
    ) -> None:
        """Write the next generation and its change map into the given grids."""
        next_cell_grid.set_all(False)
        next_change_grid.set_all(False)
        for p in self.points():
            alive = self.get_value(p)
            if current_change_grid.get_value(p):
                next_alive = self._is_alive_in_next_generation(alive, self._count_neighbors(p))
                if next_alive:
                    next_cell_grid.set_value(True, p)
                if alive != next_alive:
                    next_change_grid.set_changed(p)
            else:
                next_cell_grid.set_value(alive, p)

    def color_for_value(self, value: bool) -> Color:
        return Color.white if value else Color.black


class FracGrid(Grid[float]):
    """Fractions in [0..1] that onion-skin generations into a grayscale image."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height, 0.0)

    def overlay(self, cell_grid: CellGrid, frac: float) -> None:
        """Set ``frac`` wherever ``cell_grid`` has a live cell."""
        for p in self.points():
            if cell_grid.get_value(p):
                self.set_value(frac, p)

    def color_for_value(self, value: float) -> Color:
        return Color.black.lerp_to(Color.white, value)
"""Colouring and symmetrising a grayscale grid into the finished image."""

from __future__ import annotations

from typing import NamedTuple

from .color import Color
from .color_func import ColorFunc
from .grid import FracGrid, Grid, Point
from .version import Pattern


class _Transform(NamedTuple):
    transpose: bool
    reflect_x: bool
    reflect_y: bool


_TRANSFORMS: dict[Pattern, tuple[_Transform, ...]] = {
    Pattern.SNOWFLAKE: (
        _Transform(False, False, False),
        _Transform(False, True, False),
        _Transform(False, False, True),
        _Transform(False, True, True),
    ),
    Pattern.PINWHEEL: (
        _Transform(False, False, False),
        _Transform(True, True, False),
        _Transform(True, False, True),
        _Transform(False, True, True),
    ),
    Pattern.FIDUCIAL: (_Transform(False, False, False),),
}


class ColorGrid(Grid[Color]):
    """A grid of colours built from a fraction grid, a gradient and a symmetry."""

    def __init__(self, frac_grid: FracGrid, gradient: ColorFunc, pattern: Pattern) -> None:
        multiplier = 1 if pattern == Pattern.FIDUCIAL else 2
        super().__init__(frac_grid.width * multiplier, frac_grid.height * multiplier, Color())
        transforms = _TRANSFORMS.get(pattern, ())
        for p in frac_grid.points():
            color = gradient(frac_grid.get_value(p))
            for transform in transforms:
                self.set_value(color, self._transform_point(p, transform))

    def _transform_point(self, point: Point, transform: _Transform) -> Point:
        x, y = point
        if transform.transpose:
            x, y = y, x
        if transform.reflect_x:
            x = self.width - 1 - x
        if transform.reflect_y:
            y = self.height - 1 - y
        return Point(x, y)

    def color_for_value(self, value: Color) -> Color:
        return value
"""Gradient functions mapping a fraction in [0..1] to a colour."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .color import Color
from .numeric import modulo

ColorFunc = Callable[[float], Color]


def reverse(func: ColorFunc) -> ColorFunc:
    """Return the gradient run backwards."""

    def reversed_func(t: float) -> Color:
        return func(1 - t)

    return reversed_func


def blend(colors: Iterable[Color]) -> ColorFunc:
    """Return a gradient through ``colors`` at equal intervals."""
    palette = tuple(colors)
    if not palette:
        palette = (Color.black, Color.black)
    elif len(palette) == 1:
        palette = palette * 2

    if len(palette) == 2:
        first, second = palette

        def two_color(t: float) -> Color:
            return first.lerp_to(second, t)

        return two_color

    segments = len(palette) - 1

    def multi_color(t: float) -> Color:
        if t >= 1:
            return palette[-1]
        if t <= 0:
            return palette[0]
        s = t * segments
        segment = int(s)
        return palette[segment].lerp_to(palette[segment + 1], modulo(s, 1))

    return multi_color
"""RGB and HSB colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .numeric import _f32, clamped, modulo


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels nominally in [0..1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    white: ClassVar[Color]
    black: ClassVar[Color]
    red: ClassVar[Color]
    green: ClassVar[Color]
    blue: ClassVar[Color]
    cyan: ClassVar[Color]
    magenta: ClassVar[Color]
    yellow: ClassVar[Color]

    def lerp_to(self, other: Color, t: float) -> Color:
        """Blend towards ``other`` by the clamped fraction ``t``."""
        f = clamped(t)
        return Color(
            clamped(self.r * (1 - f) + other.r * f),
            clamped(self.g * (1 - f) + other.g * f),
            clamped(self.b * (1 - f) + other.b * f),
        )

    def lighten(self, t: float) -> Color:
        return self.lerp_to(Color.white, t)

    def darken(self, t: float) -> Color:
        return self.lerp_to(Color.black, t)

    def burn(self, t: float) -> Color:
        """Apply a colour-burn of strength ``t``."""
        f = max(1.0 - t, 1.0e-7)
        return Color(
            min(1.0 - (1.0 - self.r) / f, 1.0),
            min(1.0 - (1.0 - self.g) / f, 1.0),
            min(1.0 - (1.0 - self.b) / f, 1.0),
        )

    def luminance(self) -> float:
        """Perceived brightness, computed at single precision."""
        total = 0.0
        for weighted in (_f32(0.299 * self.r), _f32(0.587 * self.g), _f32(0.114 * self.b)):
            total = _f32(total + _f32(weighted * weighted))
        return _f32(math.sqrt(total))

    @classmethod
    def from_uint8_values(cls, r: int, g: int, b: int) -> Color:
        return cls(r / 255, g / 255, b / 255)

    @classmethod
    def from_hsb(cls, hsb: HSBColor) -> Color:
        return hsb.color()


Color.white = Color(1.0, 1.0, 1.0)
Color.black = Color(0.0, 0.0, 0.0)
Color.red = Color(1.0, 0.0, 0.0)
Color.green = Color(0.0, 1.0, 0.0)
Color.blue = Color(0.0, 0.0, 1.0)
Color.cyan = Color(0.0, 1.0, 1.0)
Color.magenta = Color(1.0, 0.0, 1.0)
Color.yellow = Color(1.0, 1.0, 0.0)


@dataclass(frozen=True)
class HSBColor:
    """A colour in hue/saturation/brightness space."""

    hue: float
    saturation: float = 1.0
    brightness: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> HSBColor:
        r, g, b = color.r, color.g, color.b
        max_value = max(r, g, b)
        min_value = min(r, g, b)
        d = max_value - min_value
        saturation = 0.0 if max_value == 0 else d / max_value

        if max_value == min_value:
            hue = 0.0
        elif max_value == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif max_value == g:
            hue = ((b - r) / d + 2) / 6
        elif max_value == b:
            hue = ((r - g) / d + 4) / 6
        else:
            raise ValueError("Internal error.")
        return cls(hue, saturation, max_value)

    def color(self) -> Color:
        v = clamped(self.brightness)
        s = clamped(self.saturation)
        if s <= 0:
            return Color(v, v, v)

        h = modulo(self.hue, 1)
        if h < 0:
            h += 1
        h *= 6
        i = math.floor(_f32(h))
        f = h - i
        p = v * (1 - s)
        q = v * (1 - s * f)
        t = v * (1 - s * (1 - f))
        sectors = (
            (v, t, p),
            (q, v, p),
            (p, v, t),
            (p, q, v),
            (t, p, v),
            (v, p, q),
        )
        if not 0 <= i < len(sectors):
            raise ValueError("Internal error.")
        return Color(*sectors[i])
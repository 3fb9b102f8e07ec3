"""Selecting the colour gradient for a LifeHash from a stream of entropy bits."""

from __future__ import annotations

from .bits import BitEnumerator
from .color import Color, HSBColor
from .color_func import ColorFunc, blend, reverse
from .numeric import lerp, modulo
from .version import Version

_GRAYSCALE: ColorFunc = blend((Color.black, Color.white))

_SPECTRUM: ColorFunc = blend(
    (
        Color.from_uint8_values(0, 168, 222),
        Color.from_uint8_values(51, 51, 145),
        Color.from_uint8_values(233, 19, 136),
        Color.from_uint8_values(235, 45, 46),
        Color.from_uint8_values(253, 233, 43),
        Color.from_uint8_values(0, 158, 84),
        Color.from_uint8_values(0, 168, 222),
    )
)

_SPECTRUM_CMYK_SAFE: ColorFunc = blend(
    (
        Color.from_uint8_values(0, 168, 222),
        Color.from_uint8_values(41, 60, 130),
        Color.from_uint8_values(210, 59, 130),
        Color.from_uint8_values(217, 63, 53),
        Color.from_uint8_values(244, 228, 81),
        Color.from_uint8_values(0, 158, 84),
        Color.from_uint8_values(0, 168, 222),
    )
)


def _make_hue(t: float) -> Color:
    return HSBColor(t).color()


def _oriented(gradient: ColorFunc, is_reversed: bool) -> ColorFunc:
    return reverse(gradient) if is_reversed else gradient


def _select_grayscale(entropy: BitEnumerator) -> ColorFunc:
    return _GRAYSCALE if entropy.next() else reverse(_GRAYSCALE)


def _adjust_for_luminance(color: Color, contrast_color: Color) -> Color:
    lum = color.luminance()
    contrast_lum = contrast_color.luminance()
    threshold = 0.6
    offset = abs(lum - contrast_lum)
    if offset > threshold:
        return color
    boost = 0.7
    t = lerp(0, threshold, boost, 0, offset)
    if contrast_lum > lum:
        return color.darken(t).burn(t * 0.6)
    return color.lighten(t).burn(t * 0.6)


def _monochromatic(entropy: BitEnumerator, hue_generator: ColorFunc) -> ColorFunc:
    hue = entropy.next_frac()
    is_tint = entropy.next()
    is_reversed = entropy.next()
    key_advance = entropy.next_frac() * 0.3 + 0.05
    neutral_advance = entropy.next_frac() * 0.3 + 0.05

    key_color = hue_generator(hue)
    if is_tint:
        contrast_brightness = 1.0
        key_color = key_color.darken(0.5)
    else:
        contrast_brightness = 0.0
    neutral_color = _GRAYSCALE(contrast_brightness)

    key_color_2 = key_color.lerp_to(neutral_color, key_advance)
    neutral_color_2 = neutral_color.lerp_to(key_color, neutral_advance)
    return _oriented(blend((key_color_2, neutral_color_2)), is_reversed)


def _monochromatic_fiducial(entropy: BitEnumerator) -> ColorFunc:
    hue = entropy.next_frac()
    is_reversed = entropy.next()
    is_tint = entropy.next()

    contrast_color = Color.white if is_tint else Color.black
    key_color = _adjust_for_luminance(_SPECTRUM_CMYK_SAFE(hue), contrast_color)
    return _oriented(blend((key_color, contrast_color, key_color)), is_reversed)


def _complementary(entropy: BitEnumerator, hue_generator: ColorFunc) -> ColorFunc:
    spectrum1 = entropy.next_frac()
    spectrum2 = modulo(spectrum1 + 0.5, 1)
    lighter_advance = entropy.next_frac() * 0.3
    darker_advance = entropy.next_frac() * 0.3
    is_reversed = entropy.next()

    color1 = hue_generator(spectrum1)
    color2 = hue_generator(spectrum2)
    if color1.luminance() > color2.luminance():
        darker_color, lighter_color = color2, color1
    else:
        darker_color, lighter_color = color1, color2

    gradient = blend((darker_color.darken(darker_advance), lighter_color.lighten(lighter_advance)))
    return _oriented(gradient, is_reversed)


def _complementary_fiducial(entropy: BitEnumerator) -> ColorFunc:
    spectrum1 = entropy.next_frac()
    spectrum2 = modulo(spectrum1 + 0.5, 1)
    is_tint = entropy.next()
    is_reversed = entropy.next()
    neutral_color_bias = entropy.next()

    neutral_color = Color.white if is_tint else Color.black
    color1 = _SPECTRUM_CMYK_SAFE(spectrum1)
    color2 = _SPECTRUM_CMYK_SAFE(spectrum2)

    biased_neutral = neutral_color.lerp_to(color1 if neutral_color_bias else color2, 0.2).burn(0.1)
    gradient = blend(
        (
            _adjust_for_luminance(color1, biased_neutral),
            biased_neutral,
            _adjust_for_luminance(color2, biased_neutral),
        )
    )
    return _oriented(gradient, is_reversed)


def _triadic(entropy: BitEnumerator, hue_generator: ColorFunc) -> ColorFunc:
    spectrum1 = entropy.next_frac()
    spectrum2 = modulo(spectrum1 + 1.0 / 3, 1)
    spectrum3 = modulo(spectrum1 + 2.0 / 3, 1)
    lighter_advance = entropy.next_frac() * 0.3
    darker_advance = entropy.next_frac() * 0.3
    is_reversed = entropy.next()

    darker_color, middle_color, lighter_color = sorted(
        (hue_generator(spectrum1), hue_generator(spectrum2), hue_generator(spectrum3)),
        key=Color.luminance,
    )
    gradient = blend(
        (
            lighter_color.lighten(lighter_advance),
            middle_color,
            darker_color.darken(darker_advance),
        )
    )
    return _oriented(gradient, is_reversed)


def _with_neutral(colors: list[Color], neutral_color: Color, insert_index: int) -> list[Color]:
    if insert_index == 1:
        colors[0] = _adjust_for_luminance(colors[0], neutral_color)
        colors[1] = _adjust_for_luminance(colors[1], neutral_color)
        colors[2] = _adjust_for_luminance(colors[2], colors[1])
    elif insert_index == 2:
        colors[1] = _adjust_for_luminance(colors[1], neutral_color)
        colors[2] = _adjust_for_luminance(colors[2], neutral_color)
        colors[0] = _adjust_for_luminance(colors[0], colors[1])
    else:
        raise ValueError("Internal error.")
    colors.insert(insert_index, neutral_color)
    return colors


def _triadic_fiducial(entropy: BitEnumerator) -> ColorFunc:
    spectrum1 = entropy.next_frac()
    spectrum2 = modulo(spectrum1 + 1.0 / 3, 1)
    spectrum3 = modulo(spectrum1 + 2.0 / 3, 1)
    is_tint = entropy.next()
    insert_index = entropy.next_uint8() % 2 + 1
    is_reversed = entropy.next()

    neutral_color = Color.white if is_tint else Color.black
    colors = [_SPECTRUM_CMYK_SAFE(s) for s in (spectrum1, spectrum2, spectrum3)]
    return _oriented(blend(_with_neutral(colors, neutral_color, insert_index)), is_reversed)


def _analogous(entropy: BitEnumerator, hue_generator: ColorFunc) -> ColorFunc:
    spectrum1 = entropy.next_frac()
    spectrum2 = modulo(spectrum1 + 1.0 / 12, 1)
    spectrum3 = modulo(spectrum1 + 2.0 / 12, 1)
    spectrum4 = modulo(spectrum1 + 3.0 / 12, 1)
    advance = entropy.next_frac() * 0.5 + 0.2
    is_reversed = entropy.next()

    color1 = hue_generator(spectrum1)
    color2 = hue_generator(spectrum2)
    color3 = hue_generator(spectrum3)
    color4 = hue_generator(spectrum4)

    if color1.luminance() < color4.luminance():
        darkest, dark, light, lightest = color1, color2, color3, color4
    else:
        darkest, dark, light, lightest = color4, color3, color2, color1

    gradient = blend(
        (
            darkest.darken(advance),
            dark.darken(advance / 2),
            light.lighten(advance / 2),
            lightest.lighten(advance),
        )
    )
    return _oriented(gradient, is_reversed)


def _analogous_fiducial(entropy: BitEnumerator) -> ColorFunc:
    spectrum1 = entropy.next_frac()
    spectrum2 = modulo(spectrum1 + 1.0 / 10, 1)
    spectrum3 = modulo(spectrum1 + 2.0 / 10, 1)
    is_tint = entropy.next()
    insert_index = entropy.next_uint8() % 2 + 1
    is_reversed = entropy.next()

    neutral_color = Color.white if is_tint else Color.black
    colors = [_SPECTRUM_CMYK_SAFE(s) for s in (spectrum1, spectrum2, spectrum3)]
    return _oriented(blend(_with_neutral(colors, neutral_color, insert_index)), is_reversed)


def select_gradient(entropy: BitEnumerator, version: Version) -> ColorFunc:
    """Choose the gradient for ``version``, drawing the bits it needs from ``entropy``."""
    if version == Version.GRAYSCALE_FIDUCIAL:
        return _select_grayscale(entropy)

    value = entropy.next_uint2()

    if version == Version.VERSION1:
        builders = (
            lambda: _monochromatic(entropy, _make_hue),
            lambda: _complementary(entropy, _SPECTRUM),
            lambda: _triadic(entropy, _SPECTRUM),
            lambda: _analogous(entropy, _SPECTRUM),
        )
    elif version in (Version.VERSION2, Version.DETAILED):
        builders = (
            lambda: _monochromatic(entropy, _SPECTRUM_CMYK_SAFE),
            lambda: _complementary(entropy, _SPECTRUM_CMYK_SAFE),
            lambda: _triadic(entropy, _SPECTRUM_CMYK_SAFE),
            lambda: _analogous(entropy, _SPECTRUM_CMYK_SAFE),
        )
    elif version == Version.FIDUCIAL:
        builders = (
            lambda: _monochromatic_fiducial(entropy),
            lambda: _complementary_fiducial(entropy),
            lambda: _triadic_fiducial(entropy),
            lambda: _analogous_fiducial(entropy),
        )
    else:
        return _GRAYSCALE

    return builders[value]()
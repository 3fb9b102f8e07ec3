"""LifeHash versions and the symmetry patterns they use."""

from __future__ import annotations

from enum import Enum

from .bits import BitEnumerator


class Version(Enum):
    """The available versions of LifeHash."""

    VERSION1 = 0
    """Deprecated. Uses the HSB gamut; not CMYK-friendly."""
    VERSION2 = 1
    """CMYK-friendly gamut. Recommended for most purposes."""
    DETAILED = 2
    """Double resolution. CMYK-friendly gamut."""
    FIDUCIAL = 3
    """High-contrast, for machine-vision fiducials. CMYK-friendly gamut."""
    GRAYSCALE_FIDUCIAL = 4
    """High-contrast grayscale, for machine-vision fiducials."""


class Pattern(Enum):
    """The symmetries used by LifeHash."""

    SNOWFLAKE = 0
    """Mirror around the central axes."""
    PINWHEEL = 1
    """Rotate around the centre."""
    FIDUCIAL = 2
    """Identity."""


def select_pattern(entropy: BitEnumerator, version: Version) -> Pattern:
    """Choose the symmetry for ``version``, drawing a bit from ``entropy`` if needed."""
    if version in (Version.FIDUCIAL, Version.GRAYSCALE_FIDUCIAL):
        return Pattern.FIDUCIAL
    return Pattern.SNOWFLAKE if entropy.next() else Pattern.PINWHEEL
"""Making LifeHash images from strings, data or SHA-256 digests."""

from __future__ import annotations

from dataclasses import dataclass

from .bits import BitEnumerator
from .color_grid import ColorGrid
from .digest import DIGEST_LENGTH, sha256
from .gradients import select_gradient
from .grid import CellGrid, ChangeGrid, FracGrid
from .hexutil import to_data
from .numeric import clamped, lerp_from
from .version import Version, select_pattern


@dataclass(frozen=True)
class Image:
    """An RGB or RGBA image, row by row from the top left."""

    width: int
    height: int
    colors: bytes


def _make_image(
    width: int,
    height: int,
    float_colors: list[float],
    module_size: int,
    has_alpha: bool,
) -> Image:
    if module_size <= 0:
        raise ValueError("Invalid module size.")

    scaled_width = width * module_size
    scaled_height = height * module_size
    result = bytearray()
    for target_y in range(scaled_height):
        source_row = (target_y // module_size) * width
        for target_x in range(scaled_width):
            offset = (source_row + target_x // module_size) * 3
            result.extend(int(clamped(c) * 255) for c in float_colors[offset : offset + 3])
            if has_alpha:
                result.append(255)
    return Image(scaled_width, scaled_height, bytes(result))


def _initial_cells(digest: bytes, version: Version) -> bytes:
    if version == Version.VERSION1:
        return digest
    if version == Version.VERSION2:
        # Ensure that VERSION2 in no way resembles VERSION1.
        return sha256(digest)
    first = digest
    # Ensure that grayscale fiducials in no way resemble the colour fiducials.
    if version == Version.GRAYSCALE_FIDUCIAL:
        first = sha256(first)
    blocks = [first]
    for _ in range(3):
        blocks.append(sha256(blocks[-1]))
    return b"".join(blocks)


def _run_life(digest: bytes, version: Version, length: int, max_generations: int) -> list[bytes]:
    current_cells = CellGrid(length, length)
    next_cells = CellGrid(length, length)
    current_changes = ChangeGrid(length, length)
    next_changes = ChangeGrid(length, length)

    next_cells.set_data(_initial_cells(digest, version))
    next_changes.set_all(True)

    seen: set[bytes] = set()
    history: list[bytes] = []
    while len(history) < max_generations:
        current_cells, next_cells = next_cells, current_cells
        current_changes, next_changes = next_changes, current_changes

        data = current_cells.data()
        fingerprint = sha256(data)
        if fingerprint in seen:
            break
        seen.add(fingerprint)
        history.append(data)

        current_cells.next_generation(current_changes, next_cells, next_changes)
    return history


def _frac_grid(history: list[bytes], length: int, normalize: bool) -> FracGrid:
    cells = CellGrid(length, length)
    frac_grid = FracGrid(length, length)
    count = len(history)
    for generation, data in enumerate(history, start=1):
        cells.set_data(data)
        frac_grid.overlay(cells, clamped(lerp_from(0, count, generation)))

    # Normalisation was left out of VERSION1; it remains so for compatibility.
    if normalize:
        values = [frac_grid.get_value(p) for p in frac_grid.points()]
        low, high = min(values), max(values)
        for p in frac_grid.points():
            frac_grid.set_value(lerp_from(low, high, frac_grid.get_value(p)), p)
    return frac_grid


def make_from_digest(
    digest: bytes,
    version: Version = Version.VERSION2,
    module_size: int = 1,
    has_alpha: bool = False,
) -> Image:
    """Make a LifeHash from a 32-byte SHA-256 digest."""
    digest = bytes(digest)
    if len(digest) != DIGEST_LENGTH:
        raise ValueError("Digest must be 32 bytes.")
    if not isinstance(version, Version):
        raise ValueError("Invalid version.")

    if version in (Version.VERSION1, Version.VERSION2):
        length, max_generations = 16, 150
    else:
        length, max_generations = 32, 300

    history = _run_life(digest, version, length, max_generations)
    frac_grid = _frac_grid(history, length, normalize=version != Version.VERSION1)

    entropy = BitEnumerator(digest)
    if version == Version.DETAILED:
        # Discard a bit so the colours and patterns differ from VERSION1.
        entropy.next()
    elif version == Version.VERSION2:
        # Discard two bits so the result differs from VERSION1 and DETAILED.
        entropy.next_uint2()

    gradient = select_gradient(entropy, version)
    pattern = select_pattern(entropy, version)
    color_grid = ColorGrid(frac_grid, gradient, pattern)
    return _make_image(color_grid.width, color_grid.height, color_grid.colors(), module_size, has_alpha)


def make_from_data(
    data: bytes,
    version: Version = Version.VERSION2,
    module_size: int = 1,
    has_alpha: bool = False,
) -> Image:
    """Make a LifeHash from data of any size."""
    return make_from_digest(sha256(data), version, module_size, has_alpha)


def make_from_utf8(
    s: str,
    version: Version = Version.VERSION2,
    module_size: int = 1,
    has_alpha: bool = False,
) -> Image:
    """Make a LifeHash from a string, hashed as UTF-8.

    The caller is responsible for any Unicode normalisation needed for consistent results.
    """
    return make_from_data(to_data(s), version, module_size, has_alpha)
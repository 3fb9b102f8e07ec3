# lifehash

LifeHash turns any piece of data into a small, symmetric, colourful image.
The data is hashed with SHA-256, the digest seeds a run of Conway's Game of
Life, the generations are layered into a grayscale picture, and bits of the
digest choose a colour gradient and a symmetry. The same input always gives
the same image, and similar inputs give images that look nothing alike.

## Installing

```
pip install lifehash
```

The package has no dependencies outside the standard library.

## Making an image

```python
from lifehash.image import make_from_utf8, make_from_data, make_from_digest
from lifehash.version import Version

image = make_from_utf8("Hello", Version.VERSION2, 1, False)
print(image.width, image.height)   # 32 32
print(list(image.colors[:3]))      # [146, 126, 130]
```

`Image` is a frozen dataclass holding `width`, `height` and `colors`: the
pixels as `bytes`, row by row from the top left, three bytes per pixel (red,
green, blue), or four when `has_alpha` is true, with the alpha byte always 255.

- `make_from_utf8(s, version, module_size, has_alpha)` hashes the UTF-8 bytes
  of a string. Normalise Unicode yourself if that matters for your input.
- `make_from_data(data, version, module_size, has_alpha)` hashes bytes of any
  length.
- `make_from_digest(digest, version, module_size, has_alpha)` starts from a
  32-byte SHA-256 digest you already have; any other length raises
  `ValueError`, as does a `version` that is not a `Version`.

The last three arguments default to `Version.VERSION2`, `1` and `False`.
`module_size` scales each cell into a square of that many pixels; a value
below 1 raises `ValueError`.

## Versions

| Version | Size | Notes |
|---|---|---|
| `Version.VERSION1` | 32×32 | Deprecated. HSB colours, not CMYK-friendly. |
| `Version.VERSION2` | 32×32 | CMYK-friendly colours. Recommended. |
| `Version.DETAILED` | 64×64 | Double resolution. |
| `Version.FIDUCIAL` | 32×32 | High contrast, for machine vision. |
| `Version.GRAYSCALE_FIDUCIAL` | 32×32 | High contrast, grayscale. |

Sizes are for `module_size` 1.

## Helpers

```python
from lifehash.digest import sha256
from lifehash.hexutil import data_to_hex, hex_to_data, to_binary

data_to_hex(sha256(b"Hello"))
# '185f8db32271fe25f561a6fc938b2e264306ec304eda518007d1764826381969'
hex_to_data("00010203ff")  # b'\x00\x01\x02\x03\xff'
to_binary(b"\x81")         # '10000001'
```

`hex_to_data` raises `ValueError` for an odd number of characters or a
character that is not a hex digit.

The building blocks are importable too: `lifehash.color` (`Color`,
`HSBColor`), `lifehash.color_func` (`blend`, `reverse`), `lifehash.bits`
(`BitAggregator`, `BitEnumerator`), `lifehash.grid` (`CellGrid`, `ChangeGrid`,
`FracGrid`), `lifehash.color_grid` (`ColorGrid`), `lifehash.gradients`
(`select_gradient`) and `lifehash.version` (`Version`, `Pattern`,
`select_pattern`).

## What it does not do

There is no command-line tool, and the package does not encode or save image
files: it returns raw pixels only. Writing them out is left to you, for
example as a binary PPM with nothing but the standard library:

```python
with open("hello.ppm", "wb") as f:
    f.write(b"P6 %d %d 255\n" % (image.width, image.height))
    f.write(image.colors)  # an image made with has_alpha=False
```
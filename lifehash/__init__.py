"""Visual hashes of data: SHA-256 digests drawn as coloured Game of Life images."""

__version__ = "1.0.0"
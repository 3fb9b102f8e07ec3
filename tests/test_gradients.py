import hashlib

import pytest

from lifehash.bits import BitEnumerator
from lifehash.color import Color
from lifehash.gradients import select_gradient
from lifehash.version import Version

SAMPLES = [i / 10 for i in range(11)]


def _entropy(bits: str) -> BitEnumerator:
    padded = bits + "0" * (-len(bits) % 8)
    return BitEnumerator(int(padded, 2).to_bytes(len(padded) // 8, "big"))


def _flip(bits: str, index: int) -> str:
    return bits[:index] + ("1" if bits[index] == "0" else "0") + bits[index + 1:]


def _digest(n: int) -> bytes:
    return hashlib.sha256(str(n).encode()).digest()


def _base_bits(prefix: str) -> str:
    tail = "".join(format(b, "08b") for b in _digest(7))
    return (prefix + tail)[:128]


def test_grayscale_fiducial_forward():
    gradient = select_gradient(_entropy("1"), Version.GRAYSCALE_FIDUCIAL)
    assert gradient(0.0) == Color.black
    assert gradient(1.0) == Color.white


def test_grayscale_fiducial_reversed():
    gradient = select_gradient(_entropy("0"), Version.GRAYSCALE_FIDUCIAL)
    assert gradient(0.0) == Color.white
    assert gradient(1.0) == Color.black


def test_grayscale_fiducial_consumes_one_bit():
    entropy = _entropy("10000000")
    select_gradient(entropy, Version.GRAYSCALE_FIDUCIAL)
    assert len(list(entropy)) == 7


@pytest.mark.parametrize("version", list(Version))
def test_deterministic(version):
    data = _digest(42)
    g1 = select_gradient(BitEnumerator(data), version)
    g2 = select_gradient(BitEnumerator(data), version)
    assert [g1(t) for t in SAMPLES] == [g2(t) for t in SAMPLES]


@pytest.mark.parametrize("tint, expected", [("1", Color.white), ("0", Color.black)])
def test_monochromatic_fiducial_midpoint_is_contrast(tint, expected):
    bits = _base_bits("00")
    bits = bits[:19] + tint + bits[20:]
    gradient = select_gradient(_entropy(bits), Version.FIDUCIAL)
    assert gradient(0.5) == expected
    assert gradient(0.0) == gradient(1.0)


def test_versions_differ_for_same_entropy():
    data = _digest(3)
    g1 = select_gradient(BitEnumerator(data), Version.VERSION1)
    g2 = select_gradient(BitEnumerator(data), Version.VERSION2)
    assert [g1(t) for t in SAMPLES] != [g2(t) for t in SAMPLES]


@pytest.mark.parametrize("version", [Version.VERSION2, Version.FIDUCIAL, Version.GRAYSCALE_FIDUCIAL])
def test_empty_entropy_raises(version):
    with pytest.raises(ValueError):
        select_gradient(BitEnumerator(b""), version)


def test_short_entropy_raises():
    with pytest.raises(ValueError):
        select_gradient(BitEnumerator(b"\x00"), Version.VERSION2)
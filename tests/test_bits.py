import pytest

from lifehash.bits import BitAggregator, BitEnumerator


def test_aggregator_high_bit_first():
    a = BitAggregator()
    for bit in [True] + [False] * 7:
        a.append(bit)
    assert a.data() == b"\x80"


def test_aggregator_pads_partial_byte_with_zeros():
    a = BitAggregator()
    for bit in (True, True, True):
        a.append(bit)
    assert a.data() == b"\xe0"


def test_aggregator_empty():
    assert BitAggregator().data() == b""


@pytest.mark.parametrize("data", [b"\x00", b"\xff", b"\xab\xcd\xef", bytes(range(40))])
def test_round_trip(data):
    a = BitAggregator()
    for bit in BitEnumerator(data):
        a.append(bit)
    assert a.data() == data


def test_iteration_length():
    data = b"\x12\x34\x56"
    assert len(list(BitEnumerator(data))) == 8 * len(data)


def test_next_uint8_and_uint16():
    assert BitEnumerator(b"\xab").next_uint8() == 0xAB
    assert BitEnumerator(b"\x12\x34").next_uint16() == 0x1234


def test_next_uint2_reads_top_bits():
    e = BitEnumerator(b"\x80")
    assert e.next_uint2() == 2
    assert e.next_uint2() == 0


def test_next_frac_bounds():
    assert BitEnumerator(b"\xff\xff").next_frac() == 1.0
    assert BitEnumerator(b"\x00\x00").next_frac() == 0.0


def test_underflow_raises():
    e = BitEnumerator(b"\x01")
    assert e.next_uint8() == 1
    assert e.has_next() is False
    with pytest.raises(ValueError):
        e.next()


def test_empty_data_has_no_bits():
    e = BitEnumerator(b"")
    assert e.has_next() is False
    assert list(e) == []
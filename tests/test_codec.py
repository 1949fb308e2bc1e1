import random

import pytest

import codec
from codec import FormatError, TruncatedPayloadError, decode, encode
from header import header_size


def test_aaaab_scenario():
    blob = encode(b"aaaab")
    header = (
        b"\x00\x00\x00\x05"
        b"\x00\x00\x00\x02"
        b"a\x00\x00\x00\x04"
        b"b\x00\x00\x00\x01"
    )
    assert blob[:header_size(2)] == header
    # five one-bit codes fit in a single padded byte
    assert len(blob) == header_size(2) + 1
    payload = blob[-1]
    assert payload & 0b111 == 0
    assert decode(blob) == b"aaaab"


def test_empty_input():
    blob = encode(b"")
    assert blob == b"\x00" * 8
    assert decode(blob) == b""


@pytest.mark.parametrize("length", [1, 2, 7, 8, 1000])
def test_single_symbol(length):
    data = b"\x7f" * length
    blob = encode(data)
    # header only, no payload bits
    assert len(blob) == header_size(1)
    assert decode(blob) == data


@pytest.mark.parametrize("seed", range(5))
def test_random_1000_bytes(seed):
    rng = random.Random(seed)
    data = bytes(rng.randrange(256) for _ in range(1000))
    out = decode(encode(data))
    assert len(out) == 1000
    assert out == data


@pytest.mark.parametrize("data", [
    b"a",
    b"ab",
    b"\x00",
    b"\x00\x01\x00\x01",
    bytes(range(256)),
    bytes(range(256)) * 4 + b"\x00" * 1000,
    b"the quick brown fox jumps over the lazy dog\n" * 20,
])
def test_round_trip(data):
    assert decode(encode(data)) == data


def test_skewed_distribution_round_trip():
    data = b"".join(bytes((s,)) * (s + 1) for s in range(256))
    assert decode(encode(data)) == data


def test_deterministic():
    data = b"mississippi river"
    assert encode(data) == encode(data)


def test_compresses_repetitive_data():
    data = b"a" * 900 + b"b" * 90 + b"c" * 10
    assert len(encode(data)) < len(data) // 4


def test_truncated_payload():
    data = b"abcdefgh" * 50
    blob = encode(data)
    with pytest.raises(TruncatedPayloadError):
        decode(blob[:-3])


def test_missing_payload():
    blob = encode(b"aaaab")
    with pytest.raises(TruncatedPayloadError):
        decode(blob[:header_size(2)])


def test_truncated_header():
    blob = encode(b"aaaab")
    with pytest.raises(FormatError):
        decode(blob[:10])


def test_padding_bits_ignored():
    blob = bytearray(encode(b"aaaab"))
    blob[-1] |= 0b111
    assert decode(bytes(blob)) == b"aaaab"


def test_trailing_garbage_ignored():
    assert decode(encode(b"hello") + b"\xff\xff") == b"hello"


def test_errors_are_value_errors():
    assert issubclass(TruncatedPayloadError, ValueError)
    assert issubclass(FormatError, ValueError)


def test_compression_ratio():
    assert codec.compression_ratio(0, 8) == 0.0
    assert codec.compression_ratio(100, 25) == 0.25

import io
import struct

import pytest

from header import FormatError, Header, header_size, read_header, write_header
from huffman import freq_table


def test_layout():
    blob = write_header(freq_table(b"aaaab"), 5)
    assert blob == (
        b"\x00\x00\x00\x05"
        b"\x00\x00\x00\x02"
        b"a\x00\x00\x00\x04"
        b"b\x00\x00\x00\x01"
    )
    assert len(blob) == header_size(2)


def test_empty_header():
    blob = write_header([0] * 256, 0)
    assert blob == b"\x00" * 8
    header = read_header(blob)
    assert header.original_length == 0
    assert header.frequencies == [0] * 256
    assert header.table_size == 0


@pytest.mark.parametrize("data", [b"x", b"aaaab", bytes(range(256)), b"\x00\xff" * 300])
def test_read_back(data):
    ft = freq_table(data)
    assert read_header(write_header(ft, len(data))) == Header(len(data), ft)


def test_writes_to_stream_and_leaves_rest():
    stream = io.BytesIO()
    write_header(freq_table(b"ab"), 2, stream)
    stream.write(b"payload")
    stream.seek(0)
    assert read_header(stream).original_length == 2
    assert stream.read() == b"payload"


@pytest.mark.parametrize("cut", [0, 3, 4, 7, 8, 12, 13, 17])
def test_truncated(cut):
    blob = write_header(freq_table(b"aaaab"), 5)
    with pytest.raises(FormatError):
        read_header(blob[:cut])


def test_table_size_too_large():
    with pytest.raises(FormatError):
        read_header(struct.pack(">II", 0, 257))


def test_duplicate_symbol():
    blob = struct.pack(">II", 2, 2) + struct.pack(">BI", 97, 1) * 2
    with pytest.raises(FormatError, match="twice"):
        read_header(blob)


def test_zero_frequency_entry():
    blob = struct.pack(">II", 0, 1) + struct.pack(">BI", 97, 0)
    with pytest.raises(FormatError, match="zero frequency"):
        read_header(blob)


def test_length_disagrees_with_frequencies():
    blob = struct.pack(">II", 9, 1) + struct.pack(">BI", 97, 4)
    with pytest.raises(FormatError, match="sum"):
        read_header(blob)


def test_format_error_is_value_error():
    assert issubclass(FormatError, ValueError)


def test_write_rejects_out_of_range():
    with pytest.raises(ValueError):
        write_header([0] * 256, 1 << 32)
    with pytest.raises(ValueError):
        write_header([0] * 255, 0)
    table = [0] * 256
    table[1] = 1 << 32
    with pytest.raises(ValueError):
        write_header(table, 1 << 32)

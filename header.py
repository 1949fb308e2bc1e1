"""
Header (preamble) of a compressed buffer

Layout, big-endian:
  original_length  uint32
  table_size       uint32
  table_size x     symbol uint8, frequency uint32

Only symbols with a nonzero count are listed, in ascending symbol order.
The decoder rebuilds the exact Huffman tree from these counts, so the tree
shape itself never has to be stored.
"""

import io
import struct
from dataclasses import dataclass
from typing import List

from huffman import SYMBOLS

_U32 = struct.Struct(">I")
_ENTRY = struct.Struct(">BI")
_MAX_U32 = 0xFFFFFFFF


class FormatError(ValueError):
    """Compressed header is truncated or its fields disagree with each other."""


@dataclass
class Header:
    original_length: int
    frequencies: List[int]

    @property
    def table_size(self) -> int:
        return sum(1 for f in self.frequencies if f)


def header_size(table_size: int) -> int:
    return 2 * _U32.size + table_size * _ENTRY.size


def write_header(frequencies, original_length: int, stream=None) -> bytes:
    if not 0 <= original_length <= _MAX_U32:
        raise ValueError(f"original length {original_length} does not fit in 32 bits")
    if len(frequencies) != SYMBOLS:
        raise ValueError(f"frequency table must have {SYMBOLS} entries, got {len(frequencies)}")

    entries = [(symbol, f) for symbol, f in enumerate(frequencies) if f]
    for symbol, f in entries:
        if not 0 < f <= _MAX_U32:
            raise ValueError(f"frequency {f} of symbol {symbol} does not fit in 32 bits")

    out = bytearray()
    out += _U32.pack(original_length)
    out += _U32.pack(len(entries))
    for symbol, f in entries:
        out += _ENTRY.pack(symbol, f)

    if stream is not None:
        stream.write(out)
    return bytes(out)


def _read_exact(stream, n: int, what: str) -> bytes:
    chunk = stream.read(n)
    if len(chunk) != n:
        raise FormatError(f"stream ended while reading {what} ({len(chunk)} of {n} bytes)")
    return chunk


def read_header(stream) -> Header:
    if isinstance(stream, (bytes, bytearray, memoryview)):
        stream = io.BytesIO(bytes(stream))

    (original_length,) = _U32.unpack(_read_exact(stream, _U32.size, "original length"))
    (table_size,) = _U32.unpack(_read_exact(stream, _U32.size, "table size"))
    if table_size > SYMBOLS:
        raise FormatError(f"table size {table_size} exceeds {SYMBOLS} symbols")

    frequencies = [0] * SYMBOLS
    for i in range(table_size):
        symbol, f = _ENTRY.unpack(_read_exact(stream, _ENTRY.size, f"table entry {i}"))
        if frequencies[symbol]:
            raise FormatError(f"symbol {symbol} listed twice in frequency table")
        if f == 0:
            raise FormatError(f"symbol {symbol} listed with zero frequency")
        frequencies[symbol] = f

    total = sum(frequencies)
    if total != original_length:
        raise FormatError(f"frequencies sum to {total}, header declares {original_length} bytes")

    return Header(original_length, frequencies)

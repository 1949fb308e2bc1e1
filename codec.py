"""
Byte-oriented Huffman codec

encode(data) -> header + bit-packed payload
decode(blob) -> original bytes

Each call builds its own frequency table, tree and code table; nothing is shared
between calls, so independent inputs can be processed in parallel.
"""

import io

from bitio import BitReader, BitWriter, END_OF_DATA
from header import FormatError, read_header, write_header
from huffman import build_huffman_tree, freq_table, generate_huffman_codes

__all__ = ["encode", "decode", "compression_ratio", "FormatError", "TruncatedPayloadError"]


class TruncatedPayloadError(ValueError):
    """Payload ran out of bits before every declared symbol was decoded."""


def encode(data: bytes) -> bytes:
    ft = freq_table(data)
    root = build_huffman_tree(ft)
    code_map = generate_huffman_codes(root)

    out = io.BytesIO()
    write_header(ft, len(data), out)

    # A single-leaf tree has the empty code, so that case writes no payload at all
    with BitWriter(out) as writer:
        for b in data:
            writer.write_bits(code_map[b])

    return out.getvalue()


def decode(blob: bytes) -> bytes:
    with BitReader(blob) as reader:
        header = read_header(reader.stream)
        if header.original_length == 0:
            return b""

        root = build_huffman_tree(header.frequencies)

        # Lone symbol: nothing to walk, every position holds the same byte
        if root.is_leaf():
            return bytes((root.symbol,)) * header.original_length

        decoded = bytearray()
        for i in range(header.original_length):
            node = root
            while not node.is_leaf():
                bit = reader.read_bit()
                if bit == END_OF_DATA:
                    raise TruncatedPayloadError(
                        f"payload ended after {reader.bits_read} bits, "
                        f"decoded {i} of {header.original_length} symbols"
                    )
                node = node.right if bit == 1 else node.left
            decoded.append(node.symbol)

    return bytes(decoded)


def compression_ratio(original: int, compressed: int) -> float:
    # compressed bytes / original bytes, lower is better
    if original == 0:
        return 0.0
    return compressed / original

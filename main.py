"""
Command-line wrapper around codec.encode / codec.decode

How to run:
  python main.py e input_file_name output_file_name     # compress
  python main.py d output_file_name input_file_name     # decompress
  python main.py t compressed_file_name                 # show header and tree
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import codec
from header import FormatError, header_size, read_header
from huffman import build_huffman_tree, format_tree

USAGE = (
    "usage:\n"
    "encode: e input_file_name output_file_name\n"
    "decode: d output_file_name input_file_name\n"
    "tree:   t compressed_file_name"
)

# mode -> number of paths it needs
MODES = {"e": 2, "d": 2, "t": 1}


def usage() -> int:
    print(USAGE)
    return 2


def run_encode(src: Path, dst: Path) -> None:
    data = src.read_bytes()
    out = codec.encode(data)
    dst.write_bytes(out)
    ratio = codec.compression_ratio(len(data), len(out))
    print(f"{src} -> {dst}: {len(data)} -> {len(out)} bytes (ratio {ratio:.3f})")


def run_decode(dst: Path, src: Path) -> None:
    data = codec.decode(src.read_bytes())
    dst.write_bytes(data)
    print(f"{src} -> {dst}: {len(data)} bytes restored")


def run_tree(src: Path) -> None:
    blob = src.read_bytes()
    header = read_header(blob)
    print(f"original length: {header.original_length}")
    print(f"table size:      {header.table_size}")
    print(f"header bytes:    {header_size(header.table_size)}")
    print(f"payload bytes:   {len(blob) - header_size(header.table_size)}")
    print(format_tree(build_huffman_tree(header.frequencies)))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="main.py", usage=USAGE, add_help=False)
    ap.add_argument("mode", nargs="?")
    ap.add_argument("paths", nargs="*")
    args, extra = ap.parse_known_args(argv)

    if extra or args.mode not in MODES or len(args.paths) != MODES[args.mode]:
        return usage()

    paths = [Path(p) for p in args.paths]
    try:
        if args.mode == "e":
            run_encode(paths[0], paths[1])
        elif args.mode == "d":
            # Same argument order as the original tool: decoded target first
            run_decode(paths[0], paths[1])
        else:
            run_tree(paths[0])
    except (FormatError, codec.TruncatedPayloadError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

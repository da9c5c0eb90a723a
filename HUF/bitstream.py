import struct
from typing import Dict

from errors import MalformedHeader
from freq import EOF

MAGIC = b"HUF1"   # 4 bytes
VERSION = 1       # 1 byte

# Header (little-endian):
# magic(4) version(u8) table_len(u16)
HDR_FMT = "<4sBH"
HDR_SIZE = struct.calcsize(HDR_FMT)

# Frequency table entry:
# symbol(u16) count(u64)
TBL_FMT = "<HQ"
TBL_SIZE = struct.calcsize(TBL_FMT)


def write_header(f, freqs: Dict[int, int]):
    if EOF not in freqs:
        raise ValueError("frequency table has no EOF entry")
    f.write(struct.pack(HDR_FMT, MAGIC, VERSION, len(freqs)))
    for sym in sorted(freqs):
        n = freqs[sym]
        if not (0 <= sym <= EOF):
            raise ValueError(f"symbol out of range: {sym}")
        if not (1 <= n < 2 ** 64):
            raise ValueError(f"count out of range for symbol {sym}: {n}")
        f.write(struct.pack(TBL_FMT, sym, n))


def read_header(f) -> Dict[int, int]:
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise MalformedHeader("Malformed stream: header too short")
    magic, ver, table_len = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise MalformedHeader("Bad magic number (not HUF)")
    if ver != VERSION:
        raise MalformedHeader(f"Unsupported version: {ver}")
    if table_len == 0:
        raise MalformedHeader("Malformed stream: empty frequency table")

    freqs: Dict[int, int] = {}
    for _ in range(table_len):
        data = f.read(TBL_SIZE)
        if len(data) != TBL_SIZE:
            raise MalformedHeader("Malformed stream: table truncated")
        sym, n = struct.unpack(TBL_FMT, data)
        if sym > EOF:
            raise MalformedHeader(f"Malformed stream: symbol out of range: {sym}")
        if n == 0:
            raise MalformedHeader(f"Malformed stream: zero count for symbol {sym}")
        if sym in freqs:
            raise MalformedHeader(f"Malformed stream: duplicate symbol {sym}")
        freqs[sym] = n
    if EOF not in freqs:
        raise MalformedHeader("Malformed stream: frequency table has no EOF entry")
    return freqs


def header_size(freqs: Dict[int, int]) -> int:
    return HDR_SIZE + TBL_SIZE * len(freqs)

from typing import Dict, Optional, Union

import numpy as np

from errors import InputUnavailable

# Reserved end-of-stream symbol, outside the byte range 0..255
EOF = 256

Source = Union[bytes, bytearray, str]


def _to_bytes(data: Source) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _add_counts(table: Dict[int, int], hist: np.ndarray):
    for sym in np.flatnonzero(hist):
        s = int(sym)
        table[s] = table.get(s, 0) + int(hist[sym])


def _add_eof(table: Dict[int, int]):
    table[EOF] = table.get(EOF, 0) + 1


def count_frequencies(data: Source) -> Dict[int, int]:
    """
    Byte histogram of `data` plus the EOF sentinel (count 1).
    str input is counted over its UTF-8 encoding.
    """
    raw = _to_bytes(data)
    hist = np.bincount(np.frombuffer(raw, dtype=np.uint8), minlength=256)
    table: Dict[int, int] = {}
    _add_counts(table, hist)
    _add_eof(table)
    return table


def count_file_frequencies(path, chunk_size: int = 1 << 16) -> Dict[int, int]:
    hist = np.zeros(256, dtype=np.int64)
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                hist += np.bincount(np.frombuffer(chunk, dtype=np.uint8), minlength=256)
    except OSError as e:
        raise InputUnavailable(f"cannot read {path}: {e}") from e

    table: Dict[int, int] = {}
    _add_counts(table, hist)
    _add_eof(table)
    return table


def build_frequency_map(source, is_file: bool, table: Optional[Dict[int, int]] = None) -> Dict[int, int]:
    """
    Count `source` as a file path (is_file=True) or as in-memory data.
    If `table` is given, the new counts are merged into a copy of it.
    """
    counted = count_file_frequencies(source) if is_file else count_frequencies(source)
    if table is None:
        return counted
    out = dict(table)
    for sym, n in counted.items():
        out[sym] = out.get(sym, 0) + n
    return out

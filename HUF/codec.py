import io
import os
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple, Union

from bitpack import BitWriter, BitReader
from bitstream import write_header, read_header, header_size
from errors import InputUnavailable, TraversalError
from freq import EOF, count_frequencies, count_file_frequencies
from huffman import Node, build_tree, build_codebook

SUFFIX = ".huf"


def compressed_name(path) -> str:
    """name.ext -> name.ext.huf"""
    return str(path) + SUFFIX


def decompressed_name(path) -> str:
    """name.ext.huf -> name_unc.ext"""
    p = str(path)
    if p.endswith(SUFFIX):
        p = p[:-len(SUFFIX)]
    stem, ext = os.path.splitext(p)
    return f"{stem}_unc{ext}"


def encode(data: Union[bytes, bytearray, str], codes: Dict[int, str], writer: BitWriter = None) -> Tuple[str, int]:
    """
    Concatenate the code of every input byte, then the EOF code.
    Returns (bit string, length in bits); bits also go to `writer` if given.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    parts = []
    for sym in data:
        try:
            parts.append(codes[sym])
        except KeyError as e:
            raise LookupError(f"no code for symbol {sym}") from e
    try:
        parts.append(codes[EOF])
    except KeyError as e:
        raise LookupError("no code for EOF") from e

    bits = "".join(parts)
    if writer is not None:
        writer.write_bits(bits)
    return bits, len(bits)


def iter_decode(reader: BitReader, root: Node) -> Iterator[int]:
    """
    Walk the tree one bit at a time, yielding a symbol per leaf reached.
    Stops at the EOF leaf; running out of input before it just ends the walk.
    """
    node = root
    while not reader.at_end():
        bit = reader.read_bit()
        if not root.is_leaf:
            node = node.right if bit else node.left
            if node is None:
                raise TraversalError("Corrupt stream: walked into a missing child")
        if node.is_leaf:
            if node.sym == EOF:
                return
            yield node.sym
            node = root


def decode(reader: BitReader, root: Node, output=None) -> bytes:
    out = bytearray()
    try:
        for sym in iter_decode(reader, root):
            out.append(sym)
    finally:
        # partial output stays on failure
        if output is not None:
            output.write(out)
    return bytes(out)


def compress_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    freqs = count_frequencies(data)
    root = build_tree(freqs)
    codes = build_codebook(root)

    f = io.BytesIO()
    write_header(f, freqs)
    bw = BitWriter()
    encode(data, codes, bw)
    f.write(bw.finish())
    return f.getvalue()


def decompress_bytes(blob: bytes) -> bytes:
    f = io.BytesIO(blob)
    freqs = read_header(f)
    root = build_tree(freqs)
    return decode(BitReader(f.read()), root)


@dataclass
class CompressResult:
    input_path: str
    output_path: str
    original_size: int
    compressed_size: int
    payload_bits: int
    freqs: Dict[int, int]


@dataclass
class DecompressResult:
    input_path: str
    output_path: str
    compressed_size: int
    size: int


def _read_input(path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InputUnavailable(f"cannot read {path}: {e}") from e


def compress_file(path, output=None) -> CompressResult:
    freqs = count_file_frequencies(path)
    root = build_tree(freqs)
    codes = build_codebook(root)
    data = _read_input(path)

    out_path = output or compressed_name(path)
    bw = BitWriter()
    _, nbits = encode(data, codes, bw)
    with open(out_path, "wb") as f:
        write_header(f, freqs)
        f.write(bw.finish())

    return CompressResult(
        input_path=str(path), output_path=str(out_path),
        original_size=len(data),
        compressed_size=header_size(freqs) + (nbits + 7) // 8,
        payload_bits=nbits, freqs=freqs,
    )


def decompress_file(path, output=None) -> DecompressResult:
    blob = _read_input(path)
    f = io.BytesIO(blob)
    freqs = read_header(f)
    root = build_tree(freqs)

    out_path = output or decompressed_name(path)
    with open(out_path, "wb") as dst:
        data = decode(BitReader(f.read()), root, dst)

    return DecompressResult(
        input_path=str(path), output_path=str(out_path),
        compressed_size=len(blob), size=len(data),
    )

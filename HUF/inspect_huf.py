import argparse
import os
from bitstream import read_header, header_size
from freq import EOF
from huffman import build_tree, build_codebook
from metrics import entropy, average_code_length, weighted_length

def symbol_label(sym: int) -> str:
    if sym == EOF:
        return "EOF"
    if 0x20 <= sym < 0x7F:
        return repr(chr(sym))
    return f"0x{sym:02x}"

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .huf")
    ap.add_argument("--codes", action="store_true", help="print the full code table")
    args = ap.parse_args()

    with open(args.input, "rb") as f:
        freqs = read_header(f)
    codes = build_codebook(build_tree(freqs))

    total = os.path.getsize(args.input)
    hsize = header_size(freqs)
    nbits = weighted_length(freqs, codes)
    print(f"[inspect] {args.input}: {total}B (header={hsize}B, payload={total - hsize}B)")
    print(f"[inspect] symbols={len(freqs)}, input bytes={sum(freqs.values()) - freqs[EOF]}")
    print(f"[inspect] entropy={entropy(freqs):.4f} bits/sym, avg code={average_code_length(freqs, codes):.4f} bits/sym")
    print(f"[inspect] expected payload={nbits} bits ({(nbits + 7) // 8}B)")

    if args.codes:
        # most frequent first
        for sym in sorted(freqs, key=lambda s: (-freqs[s], s)):
            print(f"  {symbol_label(sym):>6}  count={freqs[sym]:<10} code={codes[sym]}")

if __name__ == "__main__":
    main()

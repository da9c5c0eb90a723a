import argparse
import os
from codec import compress_file
from metrics import compression_ratio

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to compress")
    ap.add_argument("--output", help="path to .huf (default: <input>.huf)")
    args = ap.parse_args()

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    r = compress_file(args.input, args.output)

    print(f"[encode] wrote {r.output_path}")
    print(f"[encode] symbols={len(r.freqs)}, payload={r.payload_bits} bits")
    print(f"[encode] {r.original_size}B -> {r.compressed_size}B, ratio={compression_ratio(r.original_size, r.compressed_size):.3f}")

if __name__ == "__main__":
    main()

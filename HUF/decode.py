import argparse
import os
from codec import decompress_file

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .huf")
    ap.add_argument("--output", help="path to output (default: name_unc.ext)")
    args = ap.parse_args()

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    r = decompress_file(args.input, args.output)
    print(f"[decode] wrote {r.output_path} ({r.compressed_size}B -> {r.size}B)")

if __name__ == "__main__":
    main()

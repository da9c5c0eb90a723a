import argparse
import os
import numpy as np
import matplotlib.pyplot as plt
from freq import EOF, count_file_frequencies
from huffman import build_tree, build_codebook, code_lengths

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to analyse")
    ap.add_argument("--output", default="results/fig_code_lengths.png")
    ap.add_argument("--show", action="store_true")
    args = ap.parse_args()

    freqs = count_file_frequencies(args.input)
    lengths = code_lengths(build_codebook(build_tree(freqs)))

    syms = sorted(freqs, key=lambda s: (-freqs[s], s))
    counts = np.array([freqs[s] for s in syms], dtype=np.float64)
    lens = np.array([lengths[s] for s in syms])
    labels = ["EOF" if s == EOF else str(s) for s in syms]
    x = np.arange(len(syms))

    fig, ax1 = plt.subplots(figsize=(10, 3))
    ax1.bar(x, counts, color="tab:blue")
    ax1.set_yscale("log")
    ax1.set_ylabel("count")
    ax2 = ax1.twinx()
    ax2.step(x, lens, where="mid", color="tab:red")
    ax2.set_ylabel("code length (bits)")
    if len(syms) <= 40:
        ax1.set_xticks(x)
        ax1.set_xticklabels(labels, fontsize=7, rotation=90)
    ax1.set_title(os.path.basename(args.input), fontsize=9)

    plt.tight_layout()
    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    plt.savefig(args.output, dpi=300)
    print(f"[plot] wrote {args.output}")
    if args.show:
        plt.show()

if __name__ == "__main__":
    main()

import math

from metrics import entropy, weighted_length, average_code_length, compression_ratio


def test_entropy_uniform():
    assert entropy({1: 5, 2: 5, 3: 5, 4: 5}) == 2.0


def test_entropy_single_symbol():
    assert entropy({7: 10}) == 0.0


def test_weighted_and_average_length():
    freqs = {1: 3, 2: 1}
    codes = {1: "0", 2: "10"}
    assert weighted_length(freqs, codes) == 5
    assert average_code_length(freqs, codes) == 1.25


def test_huffman_within_one_bit_of_entropy():
    from freq import count_frequencies
    from huffman import build_tree, build_codebook
    freqs = count_frequencies(b"mississippi river banks")
    codes = build_codebook(build_tree(freqs))
    h = entropy(freqs)
    assert h <= average_code_length(freqs, codes) < h + 1


def test_compression_ratio():
    assert compression_ratio(100, 25) == 4.0
    assert math.isinf(compression_ratio(10, 0))

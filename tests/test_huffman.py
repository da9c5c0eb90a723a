import random

import pytest

from errors import TraversalError
from freq import EOF, count_frequencies
from huffman import Node, build_tree, build_codebook, code_lengths, is_prefix_free
from metrics import weighted_length


def _leaves(node):
    if node.is_leaf:
        return [node.sym]
    return _leaves(node.left) + _leaves(node.right)


def test_sample_codes_follow_fifo_tie_break():
    codes = build_codebook(build_tree(count_frequencies(b"aaabbc")))
    assert codes == {ord("a"): "0", ord("b"): "10", ord("c"): "110", EOF: "111"}


def test_root_count_is_total():
    freqs = {1: 4, 2: 6, 3: 1}
    root = build_tree(freqs)
    assert root.freq == 11
    assert root.sym is None
    assert sorted(_leaves(root)) == [1, 2, 3]


def test_textbook_weighted_length():
    freqs = {ord(c): n for c, n in zip("abcdef", (5, 9, 12, 13, 16, 45))}
    codes = build_codebook(build_tree(freqs))
    assert weighted_length(freqs, codes) == 224
    assert code_lengths(codes)[ord("f")] == 1


def test_single_leaf_gets_zero_code():
    root = build_tree({EOF: 1})
    assert root.is_leaf
    assert build_codebook(root) == {EOF: "0"}


def test_two_symbols_one_bit_each():
    codes = build_codebook(build_tree({ord("a"): 1000, EOF: 1}))
    assert sorted(codes.values()) == ["0", "1"]


def test_codes_prefix_free_random():
    rng = random.Random(1234)
    data = bytes(rng.choice(b"abcdefghij\n ") for _ in range(5000))
    codes = build_codebook(build_tree(count_frequencies(data)))
    assert is_prefix_free(codes)
    for a in codes.values():
        for b in codes.values():
            if a != b:
                assert not b.startswith(a)


def test_deterministic_rebuild():
    freqs = count_frequencies(b"abracadabra alakazam")
    # different dict insertion order, same table
    shuffled = dict(sorted(freqs.items(), reverse=True))
    assert build_codebook(build_tree(freqs)) == build_codebook(build_tree(shuffled))


def test_is_prefix_free_detects_prefix():
    assert not is_prefix_free({1: "0", 2: "01"})
    assert is_prefix_free({1: "0", 2: "10", 3: "11"})


def test_empty_table_rejected():
    with pytest.raises(ValueError):
        build_tree({})


def test_non_positive_count_rejected():
    with pytest.raises(ValueError):
        build_tree({1: 3, EOF: 0})


def test_codebook_on_broken_tree():
    broken = Node(freq=2, left=Node(freq=1, sym=97), right=None)
    with pytest.raises(TraversalError):
        build_codebook(broken)

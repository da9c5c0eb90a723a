from __future__ import annotations
import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, Optional

from errors import TraversalError


@dataclass
class Node:
    freq: int
    sym: Optional[int] = None
    left: Optional["Node"] = None   # zero child
    right: Optional["Node"] = None  # one child

    @property
    def is_leaf(self) -> bool:
        return self.sym is not None


def build_tree(freqs: Dict[int, int]) -> Node:
    """
    Greedy two-lowest merge. Heap entries are (freq, seq, node); seq is an
    insertion counter so equal counts pop in FIFO order. Leaves go in by
    ascending symbol, merged nodes take the next seq value.
    """
    if not freqs:
        raise ValueError("cannot build a Huffman tree from an empty frequency table")

    seq = itertools.count()
    pq = []
    for s in sorted(freqs):
        f = freqs[s]
        if f <= 0:
            raise ValueError(f"non-positive count {f} for symbol {s}")
        pq.append((f, next(seq), Node(freq=f, sym=s)))
    heapq.heapify(pq)

    while len(pq) > 1:
        fa, _, a = heapq.heappop(pq)
        fb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (fa + fb, next(seq), Node(freq=fa + fb, left=a, right=b)))
    return pq[0][2]


def build_codebook(node: Node, prefix: str = "", code: Optional[Dict[int, str]] = None) -> Dict[int, str]:
    if code is None:
        code = {}
        if node.is_leaf:
            # Lone symbol gets a one-bit code
            code[node.sym] = "0"
            return code
    if node.is_leaf:
        code[node.sym] = prefix
        return code
    if node.left is None or node.right is None:
        raise TraversalError(f"internal node at path '{prefix}' is missing a child")
    build_codebook(node.left, prefix + "0", code)
    build_codebook(node.right, prefix + "1", code)
    return code


def code_lengths(codes: Dict[int, str]) -> Dict[int, int]:
    return {s: len(c) for s, c in codes.items()}


def is_prefix_free(codes: Dict[int, str]) -> bool:
    # After sorting, a prefix always sorts directly before some word it prefixes
    words = sorted(codes.values())
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return True

from typing import Dict

import numpy as np


def entropy(freqs: Dict[int, int]) -> float:
    """Shannon entropy of the distribution, bits per symbol."""
    counts = np.array(list(freqs.values()), dtype=np.float64)
    total = counts.sum()
    if total <= 0:
        return 0.0
    p = counts / total
    p = p[p > 0]
    return float(-np.sum(p * np.log2(p)))


def weighted_length(freqs: Dict[int, int], codes: Dict[int, str]) -> int:
    return int(sum(len(codes[s]) * n for s, n in freqs.items()))


def average_code_length(freqs: Dict[int, int], codes: Dict[int, str]) -> float:
    total = sum(freqs.values())
    if total == 0:
        return 0.0
    return weighted_length(freqs, codes) / total


def compression_ratio(original_size: int, compressed_size: int) -> float:
    if compressed_size == 0:
        return float("inf")
    return original_size / compressed_size

from typing import Dict

import numpy as np


def compression_ratio(original_bytes: int, compressed_bytes: int) -> float:
    if compressed_bytes == 0:
        return float("inf")
    return float(original_bytes) / float(compressed_bytes)


def bits_per_byte(original_bytes: int, compressed_bytes: int) -> float:
    if original_bytes == 0:
        return 0.0
    return 8.0 * compressed_bytes / original_bytes


def entropy_bits(counts) -> float:
    """Shannon entropy (bits/symbol) of a frequency table."""
    c = np.asarray(counts, dtype=np.float64)
    c = c[c > 0]
    if c.size == 0:
        return 0.0
    p = c / c.sum()
    return float(-(p * np.log2(p)).sum())


def mean_code_length(counts, codes: Dict[int, str]) -> float:
    """Average code length (bits/symbol) weighted by counts."""
    c = np.asarray(counts, dtype=np.float64)
    total = float(c.sum())
    if total == 0:
        return 0.0
    bits = sum(float(c[s]) * len(code) for s, code in codes.items())
    return bits / total

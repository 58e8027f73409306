import math

import pytest

from huff_bitpack import BitReader
from huff_tree import count_frequencies, build_tree, build_codebook
from huff_metrics import compression_ratio, bits_per_byte, entropy_bits, mean_code_length


def test_compression_ratio():
    assert compression_ratio(100, 50) == 2.0
    assert math.isinf(compression_ratio(10, 0))


def test_bits_per_byte():
    assert bits_per_byte(100, 50) == 4.0
    assert bits_per_byte(0, 6) == 0.0


def test_entropy():
    assert entropy_bits([1, 1]) == pytest.approx(1.0)
    assert entropy_bits([4, 0]) == 0.0
    assert entropy_bits([]) == 0.0


def test_code_length_within_one_bit_of_entropy():
    counts = count_frequencies(BitReader(b"the rain in spain stays mainly in the plain" * 4))
    codes = build_codebook(build_tree(counts))
    h = entropy_bits(counts)
    avg = mean_code_length(counts, codes)
    assert h <= avg < h + 1

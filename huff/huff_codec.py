from typing import Dict

from huff_bitpack import BitReader, BitWriter
from huff_metrics import entropy_bits, mean_code_length
from huff_header import (write_magic, read_magic, write_tree, read_tree,
                         FormatError, MissingTerminatorError)
from huff_tree import (count_frequencies, build_tree, build_codebook, is_leaf, leaves,
                       BITS_PER_WORD, PSEUDO_EOF)

DEBUG_LOW = 1
DEBUG_HIGH = 4


def _show_codes(codes: Dict[int, str]):
    for sym in sorted(codes):
        name = "EOF" if sym == PSEUDO_EOF else str(sym)
        print(f"[compress]   {name:>4} {codes[sym]}")


def write_compressed_bits(codes: Dict[int, str], br, bw):
    while True:
        try:
            val = br.read_bits(BITS_PER_WORD)
        except EOFError:
            break
        bw.write_code(codes[val])
    bw.write_code(codes[PSEUDO_EOF])


def compress(br, bw, debug: int = 0) -> dict:
    """
    Two passes over br: count, then encode. br must support reset().
    Writes magic, tree header and payload to bw, then closes bw.
    Returns run stats: bits_read, bits_written, leaves, entropy and
    mean_code_len (bits per symbol, PSEUDO_EOF included).
    """
    counts = count_frequencies(br)
    root = build_tree(counts)
    codes = build_codebook(root)
    if debug >= DEBUG_HIGH:
        _show_codes(codes)

    write_magic(bw)
    write_tree(root, bw)
    header_bits = bw.bits_written

    br.reset()
    write_compressed_bits(codes, br, bw)
    bw.close()

    stats = dict(bits_read=br.bits_read, bits_written=bw.bits_written, leaves=len(codes),
                 entropy=entropy_bits(counts), mean_code_len=mean_code_length(counts, codes))
    if debug >= DEBUG_LOW:
        print(f"[compress] leaves={len(codes)}, header={header_bits} bits")
        print(f"[compress] read {br.bits_read} bits, wrote {bw.bits_written} bits")
    return stats


def decompress(br, bw, debug: int = 0) -> dict:
    """
    Validate magic, parse the tree header, then walk the tree bit by bit
    until the PSEUDO_EOF leaf. Closes bw on success.
    """
    read_magic(br)
    root = read_tree(br)
    syms = [n.sym for n in leaves(root)]
    if PSEUDO_EOF not in syms:
        raise FormatError("tree header has no PSEUDO_EOF leaf")
    if debug >= DEBUG_LOW:
        print(f"[decompress] leaves={len(syms)}, header ends at bit {br.bits_read}")

    # single-leaf tree: root is PSEUDO_EOF, payload is empty
    current = root
    while not is_leaf(current):
        try:
            bit = br.read_bits(1)
        except EOFError:
            raise MissingTerminatorError() from None
        current = current.left if bit == 0 else current.right
        if is_leaf(current):
            if current.sym == PSEUDO_EOF:
                break
            bw.write_bits(BITS_PER_WORD, current.sym)
            current = root
    bw.close()

    stats = dict(bits_read=br.bits_read, bits_written=bw.bits_written, leaves=len(syms))
    if debug >= DEBUG_LOW:
        print(f"[decompress] read {br.bits_read} bits, wrote {bw.bits_written} bits")
    return stats


def compress_bytes(data: bytes, debug: int = 0) -> bytes:
    bw = BitWriter()
    compress(BitReader(data), bw, debug=debug)
    return bw.getvalue()


def decompress_bytes(data: bytes, debug: int = 0) -> bytes:
    bw = BitWriter()
    decompress(BitReader(data), bw, debug=debug)
    return bw.getvalue()

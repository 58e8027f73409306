import heapq
from typing import Dict, List, Optional

import numpy as np

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE  # end-of-stream marker, never a real byte


class Node:
    def __init__(self, sym=0, freq=0, left=None, right=None, seq=0):
        self.sym = sym
        self.freq = freq
        self.left = left
        self.right = right
        self.seq = seq  # tie-break among equal weights

    def __lt__(self, other):
        return (self.freq, self.seq) < (other.freq, other.seq)

    def __repr__(self):
        if is_leaf(self):
            return f"Node(sym={self.sym}, freq={self.freq})"
        return f"Node(freq={self.freq})"


def is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def count_frequencies(reader) -> np.ndarray:
    """
    Count every 8-bit unit until the reader is exhausted.
    Returns int64 array of ALPH_SIZE + 1 entries; counts[PSEUDO_EOF] is always 1.
    The reader is left at end-of-input; call reader.reset() before reuse.
    """
    buf = bytearray()
    while True:
        try:
            buf.append(reader.read_bits(BITS_PER_WORD))
        except EOFError:
            break
    counts = np.bincount(np.frombuffer(bytes(buf), dtype=np.uint8),
                         minlength=ALPH_SIZE + 1).astype(np.int64)
    counts[PSEUDO_EOF] = 1
    return counts


def build_tree(counts) -> Node:
    """
    Huffman tree over every symbol with nonzero count.
    Equal weights are popped in insertion order: leaves in ascending symbol
    order first, then merged nodes in the order they were created.
    """
    pq = [Node(sym=s, freq=int(f), seq=s) for s, f in enumerate(counts) if f > 0]
    if not pq:
        raise ValueError("frequency table has no nonzero entry")
    heapq.heapify(pq)
    seq = len(counts)
    while len(pq) > 1:
        a = heapq.heappop(pq)
        b = heapq.heappop(pq)
        heapq.heappush(pq, Node(freq=a.freq + b.freq, left=a, right=b, seq=seq))
        seq += 1
    return pq[0]


def build_codebook(node: Node, prefix="", code=None) -> Dict[int, str]:
    # a lone root leaf gets the empty code
    if code is None:
        code = {}
    if is_leaf(node):
        code[node.sym] = prefix
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code


def leaves(node: Node) -> List[Node]:
    out = []
    stack = [node]
    while stack:
        n = stack.pop()
        if is_leaf(n):
            out.append(n)
        else:
            stack.append(n.right)
            stack.append(n.left)
    return out


def same_shape(a: Optional[Node], b: Optional[Node]) -> bool:
    """Structural equality: same shape and same leaf symbols (weights ignored)."""
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is None or y is None:
            if x is not y:
                return False
            continue
        if is_leaf(x) != is_leaf(y):
            return False
        if is_leaf(x):
            if x.sym != y.sym:
                return False
        else:
            stack.append((x.left, y.left))
            stack.append((x.right, y.right))
    return True

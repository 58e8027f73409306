from huff_tree import Node, is_leaf, BITS_PER_WORD, PSEUDO_EOF

BITS_PER_INT = 32
LEAF_BITS = BITS_PER_WORD + 1  # 9 bits: symbol space is 0..256
MAX_LEAVES = PSEUDO_EOF + 1

HUFF_NUMBER = 0xFACE8200  # counts-header format (not produced here)
HUFF_TREE = HUFF_NUMBER | 1  # tree-header format

# Stream layout (MSB-first bits):
# magic(32) tree(pre-order: 0 = internal, 1 + sym(9) = leaf)
# codes for every input byte, code for PSEUDO_EOF, zero padding to a byte


class HuffError(ValueError):
    pass


class FormatError(HuffError):
    pass


class TruncationError(HuffError):
    def __init__(self, phase: str, msg: str = ""):
        self.phase = phase
        super().__init__(msg or f"Malformed stream: out of bits reading {phase}")


class MissingTerminatorError(TruncationError):
    def __init__(self):
        super().__init__("body", "bad input, no PSEUDO_EOF")


def write_magic(bw, magic: int = HUFF_TREE):
    bw.write_bits(BITS_PER_INT, magic)


def read_magic(br) -> int:
    try:
        magic = br.read_bits(BITS_PER_INT)
    except EOFError:
        raise TruncationError("magic") from None
    if magic == HUFF_NUMBER:
        raise FormatError(f"invalid magic number 0x{magic:08X} (counts-header format not supported)")
    if magic != HUFF_TREE:
        raise FormatError(f"invalid magic number 0x{magic:08X}")
    return magic


def write_tree(node: Node, bw):
    if is_leaf(node):
        bw.write_bits(1, 1)
        bw.write_bits(LEAF_BITS, node.sym)
    else:
        bw.write_bits(1, 0)
        write_tree(node.left, bw)
        write_tree(node.right, bw)


def read_tree(br) -> Node:
    """
    Parse a pre-order tree header. Iterative: 'pending' holds internal nodes
    still waiting for a child.
    """
    root = None
    pending = []
    nleaves = 0
    ninternal = 0
    while True:
        try:
            bit = br.read_bits(1)
            if bit == 1:
                sym = br.read_bits(LEAF_BITS)
                if sym > PSEUDO_EOF:
                    raise FormatError(f"leaf value out of range: {sym}")
                nleaves += 1
                if nleaves > MAX_LEAVES:
                    raise FormatError("tree header has too many leaves")
                node = Node(sym=sym)
            else:
                ninternal += 1
                if ninternal >= MAX_LEAVES:
                    raise FormatError("tree header has too many internal nodes")
                node = Node()
        except EOFError:
            raise TruncationError("header") from None

        if root is None:
            root = node
        else:
            parent = pending[-1]
            if parent.left is None:
                parent.left = node
            else:
                parent.right = node
                pending.pop()
        if bit == 0:
            pending.append(node)
        if not pending:
            return root

import heapq

SYMBOLS = 256 # one slot per possible byte value


class HuffmanNode: # Node for Huffman tree
    __slots__ = ("symbol", "frequency", "left", "right")

    def __init__(self, symbol, frequency, left=None, right=None):
        self.symbol = symbol    # byte value for leaves, None for internal nodes
        self.frequency = frequency
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def freq_table(data: bytes) -> list:
    table = [0] * SYMBOLS
    for b in data:
        table[b] += 1
    return table


def _items(frequency_table):
    # Accepts the 256-entry list or a {symbol: count} dict, yields nonzero entries in symbol order
    if isinstance(frequency_table, dict):
        pairs = sorted(frequency_table.items())
    else:
        pairs = enumerate(frequency_table)
    return [(symbol, frequency) for symbol, frequency in pairs if frequency]


def build_huffman_tree(frequency_table):
    """
    Greedy merge of the two lightest nodes until one is left.
    Heap entries are (frequency, order, node); order is the insertion counter, so equal
    frequencies are resolved the same way on every call and encoder/decoder agree.
    Returns None when no symbol has a nonzero count.
    """
    priority_queue = []
    order = 0
    for symbol, frequency in _items(frequency_table):
        priority_queue.append((frequency, order, HuffmanNode(symbol, frequency)))
        order += 1

    if not priority_queue:
        return None
    heapq.heapify(priority_queue)

    while len(priority_queue) > 1:
        _, _, left = heapq.heappop(priority_queue)
        _, _, right = heapq.heappop(priority_queue)
        merged_node = HuffmanNode(None, left.frequency + right.frequency, left, right)
        heapq.heappush(priority_queue, (merged_node.frequency, order, merged_node))
        order += 1

    return priority_queue[0][2] # root of the tree


def generate_huffman_codes(root) -> list:
    codes = [None] * SYMBOLS
    if root is None:
        return codes

    # Explicit stack instead of recursion, a skewed tree can be 255 levels deep
    stack = [(root, '')]
    while stack:
        node, current_code = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = current_code # '' when the root itself is the only leaf
            continue
        stack.append((node.right, current_code + '1'))
        stack.append((node.left, current_code + '0'))

    return codes


def is_prefix_free(codes) -> bool:
    present = sorted(code for code in codes if code is not None)
    # After sorting, a prefix always sits right before some code that extends it
    for a, b in zip(present, present[1:]):
        if b.startswith(a):
            return False
    return True


def format_tree(root) -> str:
    if root is None:
        return "(empty)"

    lines = []
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        margin = "\t" * depth
        if node.is_leaf():
            lines.append(f"{margin}freq: {node.frequency} val: {node.symbol} {_printable(node.symbol)}")
        else:
            lines.append(f"{margin}freq: {node.frequency}")
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
    return "\n".join(lines)


def _printable(symbol: int) -> str:
    ch = chr(symbol)
    return repr(ch) if ch.isprintable() else f"0x{symbol:02x}"

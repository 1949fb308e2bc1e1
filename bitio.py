import io

END_OF_DATA = -1 # returned by BitReader.read_bit once the source is exhausted


def _as_stream(source):
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    return source


class BitReader: # Reads single bits, MSB first, from a byte source
    def __init__(self, source):
        self.stream = _as_stream(source) # bytes-like or binary file object with read(n)
        self.value = 0
        self.bit = -1 # position of the next bit in self.value, -1 means load a new byte
        self.bits_read = 0

    def read_bit(self) -> int:
        if self.bit == -1:
            chunk = self.stream.read(1)
            if not chunk:
                return END_OF_DATA
            self.value = chunk[0]
            self.bit = 7

        bit = (self.value >> self.bit) & 1
        self.bit -= 1
        self.bits_read += 1
        return bit

    def close(self) -> None:
        self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class BitWriter: # Packs single bits, MSB first, into a byte sink
    def __init__(self, sink=None, close_sink=False):
        self.sink = sink if sink is not None else io.BytesIO()
        self.close_sink = close_sink # also close the sink on close(), e.g. a file handed over to us
        self.value = 0
        self.bit = 7 # next slot to fill in self.value
        self.pad_bits = 0
        self.closed = False

    def write_bit(self, bit) -> None:
        if bit:
            self.value |= 1 << self.bit
        self.bit -= 1

        # Full byte -> hand it to the sink and start over
        if self.bit == -1:
            self.sink.write(bytes((self.value,)))
            self.value = 0
            self.bit = 7

    def write_bits(self, code: str) -> None:
        for ch in code:
            self.write_bit(ch == '1')

    def flush(self) -> None:
        # Partial byte goes out as is, unwritten trailing bits stay 0
        if self.bit != 7:
            self.pad_bits = self.bit + 1
            self.sink.write(bytes((self.value,)))
            self.value = 0
            self.bit = 7

    def close(self) -> None:
        if self.closed:
            return
        self.flush()
        self.closed = True
        if self.close_sink:
            self.sink.close()

    def getvalue(self) -> bytes:
        return self.sink.getvalue()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

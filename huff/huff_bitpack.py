class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.bits_written = 0
        self.closed = False

    def _put(self, bit: int):
        self._cur = (self._cur << 1) | bit
        self._nbits += 1
        self.bits_written += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0

    def write_bits(self, n: int, value: int):
        """Write the low 'n' bits of value (MSB-first)."""
        if self.closed:
            raise ValueError("write to closed BitWriter")
        for i in range(n - 1, -1, -1):
            self._put((value >> i) & 1)

    def write_code(self, code: str):
        """Write a code given as a '0'/'1' string, first character first."""
        if self.closed:
            raise ValueError("write to closed BitWriter")
        for ch in code:
            self._put(1 if ch == "1" else 0)

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

    def close(self):
        self.finish()
        self.closed = True

    def getvalue(self) -> bytes:
        # only whole bytes until close() pads the tail
        return bytes(self._buf)


class BitReader:
    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first
        self.bits_read = 0

    def remaining(self) -> int:
        return (len(self.data) - self.i) * 8 - self.bit

    def read_bit(self) -> int:
        if self.i >= len(self.data):
            raise EOFError("Unexpected end of bitstream")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        self.bits_read += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b

    def read_bits(self, n: int) -> int:
        """Read 'n' bits as an unsigned int (MSB-first).

        Raises EOFError without consuming anything if fewer than n bits remain.
        """
        if n > self.remaining():
            raise EOFError("Unexpected end of bitstream")
        value = 0
        for _ in range(n):
            value = (value << 1) | self.read_bit()
        return value

    def reset(self):
        self.i = 0
        self.bit = 0

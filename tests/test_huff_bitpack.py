import pytest

from huff_bitpack import BitReader, BitWriter


def test_write_bits_msb_first():
    bw = BitWriter()
    bw.write_bits(3, 0b101)
    bw.write_bits(5, 0b00001)
    assert bw.finish() == b"\xa1"
    assert bw.bits_written == 8


def test_partial_byte_is_zero_padded():
    bw = BitWriter()
    bw.write_bits(3, 0b101)
    bw.close()
    assert bw.getvalue() == b"\xa0"


def test_write_code_from_string():
    bw = BitWriter()
    bw.write_code("1101")
    bw.write_code("")
    assert bw.finish() == b"\xd0"
    assert bw.bits_written == 4


def test_long_code_has_no_width_limit():
    code = "1" * 70 + "0"
    bw = BitWriter()
    bw.write_code(code)
    out = bw.finish()
    br = BitReader(out)
    assert "".join(str(br.read_bit()) for _ in range(71)) == code


def test_write_after_close():
    bw = BitWriter()
    bw.close()
    with pytest.raises(ValueError):
        bw.write_bits(1, 1)


def test_read_bits():
    br = BitReader(b"\xa1")
    assert br.read_bits(3) == 0b101
    assert br.read_bits(5) == 1
    assert br.bits_read == 8
    with pytest.raises(EOFError):
        br.read_bit()


def test_short_read_consumes_nothing():
    br = BitReader(b"\xff")
    with pytest.raises(EOFError):
        br.read_bits(9)
    assert br.remaining() == 8
    assert br.read_bits(8) == 0xFF


def test_reset_rewinds():
    br = BitReader(b"\x12\x34")
    assert br.read_bits(16) == 0x1234
    br.reset()
    assert br.read_bits(8) == 0x12

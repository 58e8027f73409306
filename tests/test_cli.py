import huff_decode
import huff_encode


def test_encode_decode_files(tmp_path, capsys):
    src = tmp_path / "in.bin"
    packed = tmp_path / "out" / "in.hf"
    back = tmp_path / "in.out"
    src.write_bytes(b"mississippi river " * 20)

    assert huff_encode.main(["--input", str(src), "--output", str(packed)]) == 0
    assert huff_decode.main(["--input", str(packed), "--output", str(back)]) == 0

    assert back.read_bytes() == src.read_bytes()
    assert packed.stat().st_size < src.stat().st_size
    out = capsys.readouterr().out
    assert "[encode] wrote" in out
    assert "[encode] entropy=" in out
    assert "[decode] wrote" in out


def test_encode_empty_file(tmp_path):
    src = tmp_path / "empty"
    src.write_bytes(b"")
    packed = tmp_path / "empty.hf"
    back = tmp_path / "empty.out"
    huff_encode.main(["--input", str(src), "--output", str(packed)])
    huff_decode.main(["--input", str(packed), "--output", str(back)])
    assert back.read_bytes() == b""

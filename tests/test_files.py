from lexi.terminal import files


def test_read_lines_strips_terminators(tmp_path) -> None:
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\ntwo\r\n\r\nlast")

    assert files.read_lines(str(path)) == ["one", "two", "", "last"]


def test_read_lines_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")

    assert files.read_lines(str(path)) == []


def test_read_lines_keeps_high_bytes(tmp_path) -> None:
    path = tmp_path / "bin.txt"
    path.write_bytes(b"caf\xe9\n\x00\xff\n")

    lines = files.read_lines(str(path))

    assert lines == ["caf\xe9", "\x00\xff"]
    files.write_file(str(path), "".join(line + "\n" for line in lines))
    assert path.read_bytes() == b"caf\xe9\n\x00\xff\n"


def test_write_file_truncates_existing_content(tmp_path) -> None:
    path = tmp_path / "out.txt"
    path.write_bytes(b"a much longer previous body\n")

    written = files.write_file(str(path), "short\n")

    assert written == 6
    assert path.read_bytes() == b"short\n"


def test_write_file_creates_with_default_mode(tmp_path) -> None:
    path = tmp_path / "new.txt"

    files.write_file(str(path), "x\n")

    assert path.exists()
    assert path.stat().st_mode & 0o600 == 0o600

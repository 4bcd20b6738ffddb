import pytest

from modelhelper.exporter import (
    FileExporter,
    ScreenExporter,
    SnippetExporter,
    write_snippet,
    write_snippet_file,
)

CONTENT = b"a\n// %%ID%%\nb\n"
EXPECTED = b"a\n// %%ID%%\nx\nb\n"


def test_screen_exporter_prints(capsys):
    assert ScreenExporter().write(b"hello") == 5
    assert capsys.readouterr().out == "hello\n"


def test_file_exporter_without_name_writes_nothing(tmp_path):
    assert FileExporter().write(b"data") == 0
    assert list(tmp_path.iterdir()) == []


def test_file_exporter_creates_directories(tmp_path):
    target = tmp_path / "a" / "b" / "out.txt"
    assert FileExporter(str(target)).write(b"data") == 4
    assert target.read_bytes() == b"data"


def test_file_exporter_refuses_existing(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"old")
    with pytest.raises(FileExistsError):
        FileExporter(str(target)).write(b"new")
    assert target.read_bytes() == b"old"


def test_file_exporter_overwrites_when_asked(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"old")
    FileExporter(str(target), overwrite=True).write(b"new")
    assert target.read_bytes() == b"new"


def test_write_snippet_inserts_after_marker():
    assert write_snippet("ID", "x", CONTENT) == EXPECTED


def test_write_snippet_strips_percent_from_identifier():
    assert write_snippet("%ID%", "x", CONTENT) == write_snippet("ID", "x", CONTENT)


def test_write_snippet_every_marker():
    content = CONTENT + CONTENT
    result = write_snippet("ID", "x", content)
    assert result == EXPECTED + EXPECTED


def test_write_snippet_without_marker_is_unchanged():
    assert write_snippet("OTHER", "x", CONTENT) == CONTENT


def test_write_snippet_file(tmp_path):
    path = tmp_path / "f.cs"
    path.write_bytes(CONTENT)
    write_snippet_file("ID", "x", path)
    assert path.read_bytes() == EXPECTED


def test_snippet_exporter(tmp_path):
    path = tmp_path / "f.cs"
    path.write_bytes(CONTENT)
    assert SnippetExporter(str(path), "ID").write(b"x") == 1
    assert path.read_bytes() == EXPECTED


def test_snippet_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_snippet_file("ID", "x", tmp_path / "missing")
from __future__ import annotations

import errno
import io
from pathlib import Path

import pytest

from go_envdata.sink import write


def test_write_to_stream() -> None:
    buffer = io.BytesIO()
    write(b"package env\n", None, stream=buffer)
    assert buffer.getvalue() == b"package env\n"


def test_empty_path_means_stdout(capsysbinary) -> None:
    write(b"package env\n", "")
    assert capsysbinary.readouterr().out == b"package env\n"


def test_empty_path_object_means_stdout(capsysbinary, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    write(b"package env\n", Path(""))
    assert capsysbinary.readouterr().out == b"package env\n"
    assert list(tmp_path.iterdir()) == []


def test_write_to_file_truncates(tmp_path: Path) -> None:
    target = tmp_path / "envdata.go"
    target.write_bytes(b"stale contents that are longer than the new ones\n")
    write(b"package env\n", target)
    assert target.read_bytes() == b"package env\n"


def test_missing_parent_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        write(b"package env\n", tmp_path / "missing" / "envdata.go")


class _FullDisk:
    def __init__(self, handle):
        self._handle = handle

    def write(self, data: bytes) -> int:
        raise OSError(errno.ENOSPC, "No space left on device")

    def flush(self) -> None:
        self._handle.flush()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self._handle.close()


def test_failed_write_removes_partial_file(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "envdata.go"
    real_open = Path.open
    monkeypatch.setattr(Path, "open", lambda self, *args, **kwargs: _FullDisk(real_open(self, *args, **kwargs)))
    with pytest.raises(OSError, match="No space left"):
        write(b"package env\n", target)
    monkeypatch.undo()
    assert not target.exists()

"""Tests for the local filesystem adapter."""

import os
import threading
from pathlib import Path

import pytest

from pathkit.errors import IOFailure, NotFound
from pathkit.ports.filesystem import EntryKind, FileSystemPort
from pathkit.storage.local_fs import LocalFileSystem


@pytest.fixture
def fs() -> LocalFileSystem:
    """Create a local filesystem adapter."""
    return LocalFileSystem()


class TestLocalFileSystem:
    """Test LocalFileSystem."""

    def test_satisfies_port(self, fs: LocalFileSystem) -> None:
        """The adapter can stand in for the port."""
        port: FileSystemPort = fs
        assert callable(port.entry_kind)

    def test_getcwd_and_chdir(
        self, fs: LocalFileSystem, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The working directory can be read and changed."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "sub").mkdir()
        fs.chdir("sub")
        assert fs.getcwd() == os.getcwd()
        assert os.path.basename(fs.getcwd()) == "sub"

    def test_chdir_missing(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Changing into a missing directory raises NotFound."""
        with pytest.raises(NotFound):
            fs.chdir(str(tmp_path / "missing"))

    def test_chdir_into_file(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Changing into a file raises IOFailure."""
        path = tmp_path / "abc.txt"
        path.write_text("abc")
        with pytest.raises(IOFailure):
            fs.chdir(str(path))

    def test_listdir(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Listing omits the self and parent entries."""
        (tmp_path / "abc").mkdir()
        (tmp_path / "xyz").write_text("")
        assert sorted(fs.listdir(str(tmp_path))) == ["abc", "xyz"]

    def test_listdir_missing(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Listing a missing directory raises IOFailure with the OS text."""
        with pytest.raises(IOFailure) as exc_info:
            fs.listdir(str(tmp_path / "missing"))
        assert exc_info.value.reason == "No such file or directory"

    @pytest.mark.parametrize("trailing", ["", "/"])
    def test_makedirs_recursive(self, fs: LocalFileSystem, tmp_path: Path, trailing: str) -> None:
        """Every missing ancestor is created."""
        target = tmp_path / "abc" / "def" / "xyz"
        fs.makedirs(str(target) + trailing, 0o777, exist_ok=False)
        assert target.is_dir()

    def test_makedirs_existing(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """An existing directory is an error unless exist_ok is set."""
        with pytest.raises(IOFailure):
            fs.makedirs(str(tmp_path), 0o777, exist_ok=False)
        fs.makedirs(str(tmp_path), 0o777, exist_ok=True)

    def test_makedirs_concurrent_creation(
        self, fs: LocalFileSystem, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A directory created between the check and mkdir counts as success."""
        target = tmp_path / "raced"
        real_mkdir = os.mkdir

        def racing_mkdir(path: str, mode: int = 0o777) -> None:
            real_mkdir(path, mode)
            real_mkdir(path, mode)

        monkeypatch.setattr(os, "mkdir", racing_mkdir)
        fs.makedirs(str(target), 0o777, exist_ok=True)
        assert target.is_dir()

    def test_makedirs_concurrent_creation_without_exist_ok(
        self, fs: LocalFileSystem, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without exist_ok the race is reported as a failure."""
        target = tmp_path / "raced"
        real_mkdir = os.mkdir

        def racing_mkdir(path: str, mode: int = 0o777) -> None:
            real_mkdir(path, mode)
            real_mkdir(path, mode)

        monkeypatch.setattr(os, "mkdir", racing_mkdir)
        with pytest.raises(IOFailure):
            fs.makedirs(str(target), 0o777, exist_ok=False)

    def test_makedirs_threads(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Many threads creating one tree all succeed with exist_ok."""
        target = str(tmp_path / "a" / "b" / "c")
        errors: list[BaseException] = []

        def create() -> None:
            try:
                fs.makedirs(target, 0o777, exist_ok=True)
            except IOFailure as e:
                errors.append(e)

        threads = [threading.Thread(target=create) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert errors == []
        assert os.path.isdir(target)

    def test_entry_kind(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Entry kinds are reported for every entry type."""
        (tmp_path / "dir").mkdir()
        (tmp_path / "file").write_text("")
        os.symlink(tmp_path / "file", tmp_path / "link")
        assert fs.entry_kind(str(tmp_path / "missing")) is EntryKind.MISSING
        assert fs.entry_kind(str(tmp_path / "dir")) is EntryKind.DIRECTORY
        assert fs.entry_kind(str(tmp_path / "file")) is EntryKind.FILE
        assert fs.entry_kind(str(tmp_path / "link")) is EntryKind.FILE
        assert fs.entry_kind(str(tmp_path / "link"), follow_symlinks=False) is EntryKind.SYMLINK

    def test_entry_kind_other(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Special files are reported as OTHER."""
        fifo = tmp_path / "fifo"
        os.mkfifo(fifo)
        assert fs.entry_kind(str(fifo)) is EntryKind.OTHER

    def test_entry_kind_invalid_path(self, fs: LocalFileSystem) -> None:
        """Paths the OS cannot represent are missing."""
        assert fs.entry_kind("abc\0xyz") is EntryKind.MISSING

    def test_unlink_and_rmdir(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Files and empty directories are removed."""
        (tmp_path / "dir").mkdir()
        (tmp_path / "file").write_text("")
        fs.unlink(str(tmp_path / "file"))
        fs.rmdir(str(tmp_path / "dir"))
        assert os.listdir(tmp_path) == []
        with pytest.raises(IOFailure):
            fs.unlink(str(tmp_path / "file"))
        with pytest.raises(IOFailure):
            fs.rmdir(str(tmp_path / "dir"))

    def test_symlink(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """A link is created pointing at the target."""
        fs.symlink("target", str(tmp_path / "link"))
        assert os.readlink(tmp_path / "link") == "target"
        with pytest.raises(IOFailure) as exc_info:
            fs.symlink("target", str(tmp_path / "link"))
        assert exc_info.value.path == str(tmp_path / "link")

    def test_open(self, fs: LocalFileSystem, tmp_path: Path) -> None:
        """Files open in text or binary mode."""
        path = str(tmp_path / "abc.txt")
        with fs.open(path, "w", "utf-8") as f:
            f.write("héllo")
        with fs.open(path, "rb", "utf-8") as f:
            assert f.read() == "héllo".encode()
        with pytest.raises(IOFailure):
            fs.open(str(tmp_path / "missing"), "r")

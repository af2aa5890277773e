"""Tests for file utilities."""

import errno
import io
from pathlib import Path

import pytest

from csvgate.core.exceptions import InputError, WriteError
from csvgate.utils import file_utils
from csvgate.utils.file_utils import (
    atomic_replace,
    default_cleaned_path,
    is_same_file,
    open_output,
    validate_input_path,
)


class TestValidateInputPath:
    def test_existing_file(self, make_file):
        path = make_file("x\n")
        assert validate_input_path(str(path)) == path

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError, match="File not found"):
            validate_input_path(tmp_path / "nope.csv")

    def test_directory(self, tmp_path):
        with pytest.raises(InputError, match="not a regular file"):
            validate_input_path(tmp_path)


class TestDefaultCleanedPath:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("data.csv", "data.cleaned.csv"),
            ("data.txt", "data.txt.cleaned.csv"),
            ("data", "data.cleaned.csv"),
            ("data.CSV", "data.CSV.cleaned.csv"),
            ("archive.csv.gz", "archive.csv.gz.cleaned.csv"),
            (".csv", ".csv.cleaned.csv"),
        ],
    )
    def test_naming(self, name, expected):
        assert default_cleaned_path(Path("in") / name) == Path("in") / expected


class TestIsSameFile:
    def test_same_and_different(self, make_file, tmp_path):
        path = make_file("x\n")
        assert is_same_file(path, tmp_path / "." / path.name)
        assert not is_same_file(path, tmp_path / "other.csv")


class TestOpenOutput:
    def test_creates_and_truncates(self, tmp_path):
        target = tmp_path / "out.csv"
        target.write_bytes(b"old content\n")
        with open_output(target) as handle:
            handle.write(b"new\n")
        assert target.read_bytes() == b"new\n"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(WriteError) as exc_info:
            with open_output(tmp_path / "no" / "out.csv"):
                pass
        assert exc_info.value.operation == "create"

    def test_close_failure_becomes_write_error(self, tmp_path, monkeypatch):
        class FullDisk(io.BytesIO):
            def close(self):
                if not self.closed:
                    super().close()
                    raise OSError(errno.ENOSPC, "No space left on device")

        monkeypatch.setattr(file_utils, "open", lambda path, mode: FullDisk(), raising=False)
        with pytest.raises(WriteError) as exc_info:
            with open_output(tmp_path / "out.csv") as handle:
                handle.write(b"1,a\n")
        assert exc_info.value.operation == "write"
        assert exc_info.value.details == "No space left on device"

    def test_broken_pipe_passes_through(self, tmp_path):
        with pytest.raises(BrokenPipeError):
            with open_output(tmp_path / "out.csv"):
                raise BrokenPipeError


class TestAtomicReplace:
    def test_replaces_content(self, make_file):
        path = make_file("old\n")
        with atomic_replace(path) as handle:
            handle.write(b"new\n")
        assert path.read_bytes() == b"new\n"

    def test_original_visible_until_complete(self, make_file):
        path = make_file("old\n")
        with atomic_replace(path) as handle:
            handle.write(b"new\n")
            assert path.read_bytes() == b"old\n"

    def test_failure_discards_temporary_file(self, make_file, tmp_path):
        path = make_file("old\n")
        with pytest.raises(ValueError):
            with atomic_replace(path) as handle:
                handle.write(b"partial")
                raise ValueError("boom")
        assert path.read_bytes() == b"old\n"
        assert [p.name for p in tmp_path.iterdir()] == ["data.csv"]

    def test_os_error_becomes_write_error(self, make_file, tmp_path):
        path = make_file("old\n")
        with pytest.raises(WriteError):
            with atomic_replace(path):
                raise OSError(28, "No space left on device")
        assert path.read_bytes() == b"old\n"
        assert [p.name for p in tmp_path.iterdir()] == ["data.csv"]

    def test_broken_pipe_passes_through(self, make_file, tmp_path):
        path = make_file("old\n")
        with pytest.raises(BrokenPipeError):
            with atomic_replace(path) as handle:
                handle.write(b"new\n")
                raise BrokenPipeError
        assert path.read_bytes() == b"old\n"
        assert [p.name for p in tmp_path.iterdir()] == ["data.csv"]

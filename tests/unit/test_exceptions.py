"""Tests for clipgroup exceptions."""

import errno
import pytest
from pathlib import Path

from clipgroup.exceptions import (
    InvalidInputError,
    InvalidRootError,
    MapperError,
    MediaIOError,
    NoVideosError,
    OperationValidationError,
    OutputDirectoryNotEmptyError,
    OutputDirectoryNotFoundError,
    UnknownOperationKindError,
)


class TestExitCodes:
    """Tests for per-error exit codes."""

    def test_exit_codes_are_distinct(self):
        """Each error kind has its own non-zero exit code."""
        classes = [
            InvalidRootError,
            OutputDirectoryNotFoundError,
            OutputDirectoryNotEmptyError,
            NoVideosError,
            OperationValidationError,
            InvalidInputError,
            MediaIOError,
        ]
        codes = [cls.exit_code for cls in classes]

        assert len(set(codes)) == len(codes)
        assert all(code > 0 for code in codes)

    def test_all_derive_from_mapper_error(self):
        """Every error is a MapperError."""
        assert issubclass(UnknownOperationKindError, InvalidInputError)
        assert issubclass(MediaIOError, MapperError)


class TestMessages:
    """Tests for error messages."""

    def test_invalid_root(self):
        """InvalidRootError names the root and the missing path."""
        error = InvalidRootError(Path("/card"), Path("/card/DCIM/100CANON"))
        assert "/card" in str(error)
        assert "does not exist" in str(error)

    def test_output_not_empty(self):
        """OutputDirectoryNotEmptyError message."""
        assert str(OutputDirectoryNotEmptyError(Path("/o"), "x")) == "The output directory is not empty!"

    def test_no_videos(self):
        """NoVideosError message."""
        assert "no compatible video files" in str(NoVideosError(Path("/m")))


class TestMediaIOError:
    """Tests for MediaIOError.from_os_error."""

    def test_keeps_category(self):
        """Keeps the OSError subclass name and errno symbol."""
        error = MediaIOError.from_os_error(PermissionError(errno.EACCES, "denied", "/x"))

        assert error.kind == "PermissionError"
        assert error.errno_name == "EACCES"
        assert error.path == Path("/x")

    def test_explicit_path_wins(self):
        """An explicit path overrides the OSError filename."""
        error = MediaIOError.from_os_error(FileNotFoundError(errno.ENOENT, "nope", "/a"), Path("/b"))
        assert error.path == Path("/b")

    def test_without_errno(self):
        """An OSError without errno has no errno name."""
        error = MediaIOError.from_os_error(OSError("boom"))
        assert error.kind == "OSError"
        assert error.errno_name is None
        assert str(error) == "Unhandled IO error: OSError"

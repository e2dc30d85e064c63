"""Custom exceptions for the clipgroup package.

Every error is terminal for a run: the core raises, the entry point reports
the message and exits with the error's ``exit_code``.
"""

import errno
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from clipgroup.mapping.validator import ValidationResult


class MapperError(Exception):
    """Base class for all clipgroup errors."""

    exit_code: int = 1


class InvalidRootError(MapperError):
    """The card root does not contain the expected clip directory."""

    exit_code = 2

    def __init__(self, root: Path, media_path: Path) -> None:
        self.root = root
        self.media_path = media_path
        super().__init__(
            f"'{root}' is not a valid root ('{media_path}' does not exist)."
        )


class OutputDirectoryNotFoundError(MapperError):
    """The output directory is missing and was not created."""

    exit_code = 3

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("The output directory does not exist!")


class OutputDirectoryNotEmptyError(MapperError):
    """The output directory holds something other than OS marker files."""

    exit_code = 4

    def __init__(self, path: Path, entry: str) -> None:
        self.path = path
        self.entry = entry
        super().__init__("The output directory is not empty!")


class NoVideosError(MapperError):
    """The clip directory holds no file named like MVI_####.MOV."""

    exit_code = 5

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__("There are no compatible video files in the root folder!")


class OperationValidationError(MapperError):
    """The operation set is empty or contains two overlapping ranges."""

    exit_code = 6

    def __init__(self, result: "ValidationResult") -> None:
        self.result = result
        super().__init__(result.message)


class InvalidInputError(MapperError):
    """A prompt reply could not be interpreted."""

    exit_code = 7

    def __init__(self, reply: str, expected: str) -> None:
        self.reply = reply
        self.expected = expected
        super().__init__(f"Invalid input {reply!r}: expected {expected}.")


class UnknownOperationKindError(InvalidInputError):
    """A kind name that matches no known operation kind."""

    def __init__(self, name: str, known: str) -> None:
        super().__init__(name, f"a map operation ({known})")


class MediaIOError(MapperError):
    """
    A filesystem call failed.

    Attributes:
        kind: Generic category of the failure (the OSError subclass name).
        errno_name: Symbolic errno (e.g. 'EACCES') when the OS reported one.
        path: Path involved in the failing call, if known.
    """

    exit_code = 8

    def __init__(self, kind: str, path: Optional[Path] = None, errno_name: Optional[str] = None) -> None:
        self.kind = kind
        self.path = path
        self.errno_name = errno_name
        detail = f" ({errno_name})" if errno_name else ""
        location = f" on '{path}'" if path else ""
        super().__init__(f"Unhandled IO error: {kind}{detail}{location}")

    @classmethod
    def from_os_error(cls, error: OSError, path: Optional[Path] = None) -> "MediaIOError":
        """Build from an OSError, keeping only its category."""
        errno_name = errno.errorcode.get(error.errno) if error.errno else None
        if path is None and error.filename:
            path = Path(error.filename)
        return cls(type(error).__name__, path, errno_name)

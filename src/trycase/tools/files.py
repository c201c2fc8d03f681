"""Safe file I/O: read and write text or bytes.

Every failure (missing file, directory in place of a file, permissions, bad
encoding, invalid path) becomes a FileError carrying the attempted path.
Writes succeed with ``Ok(None)``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from trycase.foundation.errors import FileError, MissingArgumentError, Result, attempt, rejected

PathLike = Union[str, "os.PathLike[str]"]


def _describe(e: Exception, path: str, verb: str) -> str:
    if isinstance(e, FileNotFoundError):
        return f"File not found: {path}"
    if isinstance(e, IsADirectoryError):
        return f"Path is a directory, not a file: {path}"
    if isinstance(e, NotADirectoryError):
        return f"Directory not found for file: {path}"
    if isinstance(e, PermissionError):
        return f"Access denied to file: {path}"
    if isinstance(e, (LookupError, UnicodeError)):
        return f"Encoding error {verb} file: {path}"
    if isinstance(e, OSError):
        return f"I/O error {verb} file: {path}"
    return f"Unexpected error {verb} file: {path}"


def _classifier(path: str, verb: str):
    return lambda e: FileError(file_path=path, message=_describe(e, path, verb), original_exception=e)


def _check_path(path: PathLike | None) -> FileError | None:
    """Reject None/blank paths before touching the filesystem."""
    if path is None:
        return FileError(message="File path cannot be None or empty", original_exception=MissingArgumentError("path"))
    raw = os.fspath(path) if isinstance(path, os.PathLike) else path
    if not isinstance(raw, str) or not raw.strip():
        return FileError(
            file_path=raw if isinstance(raw, str) else None,
            message="File path cannot be None or empty",
            original_exception=MissingArgumentError("path", "File path cannot be None or empty"),
        )
    return None


def try_read_text(path: PathLike | None, encoding: str | None = "utf-8") -> Result[str, FileError]:
    """Read an entire text file."""
    if (error := _check_path(path)) is not None:
        return rejected(error)
    name = os.fspath(path)
    if encoding is None:
        return rejected(FileError(
            file_path=name, message="Encoding cannot be None", original_exception=MissingArgumentError("encoding"),
        ))
    return attempt(lambda: Path(name).read_text(encoding=encoding), _classifier(name, "reading"))


def try_read_bytes(path: PathLike | None) -> Result[bytes, FileError]:
    """Read an entire file as bytes."""
    if (error := _check_path(path)) is not None:
        return rejected(error)
    name = os.fspath(path)
    return attempt(lambda: Path(name).read_bytes(), _classifier(name, "reading"))


def try_write_text(path: PathLike | None, contents: str | None, encoding: str | None = "utf-8") -> Result[None, FileError]:
    """Create or overwrite a text file."""
    if (error := _check_path(path)) is not None:
        return rejected(error)
    name = os.fspath(path)
    if contents is None:
        return rejected(FileError(
            file_path=name, message="Contents cannot be None", original_exception=MissingArgumentError("contents"),
        ))
    if encoding is None:
        return rejected(FileError(
            file_path=name, message="Encoding cannot be None", original_exception=MissingArgumentError("encoding"),
        ))

    def write() -> None:
        Path(name).write_text(contents, encoding=encoding)

    return attempt(write, _classifier(name, "writing"))


def try_write_bytes(path: PathLike | None, data: bytes | None) -> Result[None, FileError]:
    """Create or overwrite a binary file."""
    if (error := _check_path(path)) is not None:
        return rejected(error)
    name = os.fspath(path)
    if data is None:
        return rejected(FileError(
            file_path=name, message="Bytes cannot be None", original_exception=MissingArgumentError("data"),
        ))

    def write() -> None:
        Path(name).write_bytes(data)

    return attempt(write, _classifier(name, "writing"))

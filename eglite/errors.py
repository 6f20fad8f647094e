"""Error values shared across the library: a domain-tagged exception and file error codes."""

from __future__ import annotations

import errno
import enum
from typing import Any

FILE_ERROR_DOMAIN = "FileError"


class FileError(enum.IntEnum):
    """Portable file error codes."""

    EXIST = 0
    ISDIR = enum.auto()
    ACCES = enum.auto()
    NAMETOOLONG = enum.auto()
    NOENT = enum.auto()
    NOTDIR = enum.auto()
    NXIO = enum.auto()
    NODEV = enum.auto()
    ROFS = enum.auto()
    TXTBSY = enum.auto()
    FAULT = enum.auto()
    LOOP = enum.auto()
    NOSPC = enum.auto()
    NOMEM = enum.auto()
    MFILE = enum.auto()
    NFILE = enum.auto()
    BADF = enum.auto()
    INVAL = enum.auto()
    PIPE = enum.auto()
    AGAIN = enum.auto()
    INTR = enum.auto()
    IO = enum.auto()
    PERM = enum.auto()
    NOSYS = enum.auto()
    FAILED = enum.auto()


class EgError(Exception):
    """An error carrying a domain, a numeric code and a message."""

    def __init__(self, domain: Any, code: int, message: str) -> None:
        super().__init__(message)
        self.domain = domain
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"EgError(domain={self.domain!r}, code={self.code!r}, message={self.message!r})"


def _build_errno_table() -> dict[int, FileError]:
    names = {
        "EEXIST": FileError.EXIST,
        "EISDIR": FileError.ISDIR,
        "EACCES": FileError.ACCES,
        "ENAMETOOLONG": FileError.NAMETOOLONG,
        "ENOENT": FileError.NOENT,
        "ENOTDIR": FileError.NOTDIR,
        "ENXIO": FileError.NXIO,
        "ENODEV": FileError.NODEV,
        "EROFS": FileError.ROFS,
        "ETXTBSY": FileError.TXTBSY,
        "EFAULT": FileError.FAULT,
        "ELOOP": FileError.LOOP,
        "ENOSPC": FileError.NOSPC,
        "ENOMEM": FileError.NOMEM,
        "EMFILE": FileError.MFILE,
        "ENFILE": FileError.NFILE,
        "EBADF": FileError.BADF,
        "EINVAL": FileError.INVAL,
        "EPIPE": FileError.PIPE,
        "EAGAIN": FileError.AGAIN,
        "EINTR": FileError.INTR,
        "EIO": FileError.IO,
        "EPERM": FileError.PERM,
        "ENOSYS": FileError.NOSYS,
    }
    table: dict[int, FileError] = {}
    for name, code in names.items():
        value = getattr(errno, name, None)
        # Some platforms lack a code, or alias two names to one number;
        # the first mapping wins.
        if value is not None and value not in table:
            table[value] = code
    return table


_ERRNO_TABLE = _build_errno_table()


def file_error_from_errno(err_no: int) -> FileError:
    """Map an OS errno value to a FileError code, FAILED when unknown."""
    return _ERRNO_TABLE.get(err_no, FileError.FAILED)
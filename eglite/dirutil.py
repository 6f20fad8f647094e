"""Directory listing and recursive directory creation."""

from __future__ import annotations

import errno
import os
from types import TracebackType
from typing import Iterator, Optional, Union

from eglite.errors import FILE_ERROR_DOMAIN, EgError, file_error_from_errno

_SEPARATORS = frozenset({"/", os.sep})


class Dir:
    """An open directory whose entry names can be read one by one.

    The entries "." and ".." are never returned.
    """

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        if path is None:
            raise TypeError("path must not be None")
        self.path = os.fspath(path)
        self._entries: Optional[Iterator[os.DirEntry]] = self._open()

    def _open(self) -> Iterator[os.DirEntry]:
        try:
            return os.scandir(self.path)
        except OSError as exc:
            err_no = exc.errno if exc.errno is not None else 0
            raise EgError(
                FILE_ERROR_DOMAIN, file_error_from_errno(err_no), os.strerror(err_no)
            ) from exc

    def _require_open(self) -> Iterator[os.DirEntry]:
        if self._entries is None:
            raise ValueError("directory is closed")
        return self._entries

    @property
    def closed(self) -> bool:
        """Whether the directory has been closed."""
        return self._entries is None

    def read_name(self) -> Optional[str]:
        """Return the next entry name, or None when there are no more."""
        entries = self._require_open()
        for entry in entries:
            if entry.name not in (".", ".."):
                return entry.name
        return None

    def rewind(self) -> None:
        """Start reading the entries again from the beginning."""
        entries = self._require_open()
        entries.close()
        self._entries = None
        self._entries = self._open()

    def close(self) -> None:
        """Release the directory; further reads raise ValueError."""
        entries = self._require_open()
        entries.close()
        self._entries = None

    def __iter__(self) -> Iterator[str]:
        while True:
            name = self.read_name()
            if name is None:
                return
            yield name

    def __enter__(self) -> "Dir":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if not self.closed:
            self.close()


def mkdir_with_parents(pathname: Union[str, os.PathLike], mode: int = 0o777) -> None:
    """Create pathname and every missing parent directory.

    Directories that already exist are accepted; any other failure raises OSError.
    """
    path = os.fspath(pathname) if pathname is not None else ""
    if not path:
        raise OSError(errno.EINVAL, os.strerror(errno.EINVAL), path)

    start = 1 if path[0] in _SEPARATORS else 0
    prefixes = [
        path[:i]
        for i in range(start, len(path))
        if path[i] in _SEPARATORS and path[i - 1] not in _SEPARATORS
    ]
    prefixes.append(path)

    for prefix in prefixes:
        try:
            os.mkdir(prefix, mode)
        except FileExistsError:
            continue
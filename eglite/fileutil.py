"""File helpers: existence and type tests, whole-file reads and writes, temporary files."""

from __future__ import annotations

import enum
import os
import secrets
import stat
import string
import tempfile
from typing import Optional, Union

from eglite.errors import FILE_ERROR_DOMAIN, EgError, file_error_from_errno

_TEMPLATE_ERROR_CODE = 24
_DEFAULT_TEMPLATE = ".XXXXXX"
_TEMPLATE_SUFFIX = "XXXXXX"
_TEMPLATE_CHARS = string.ascii_letters + string.digits
_TMP_ATTEMPTS = 1000


class FileTest(enum.IntFlag):
    """Conditions that file_test can check; any that holds makes the test succeed."""

    IS_REGULAR = 1 << 0
    IS_SYMLINK = 1 << 1
    IS_DIR = 1 << 2
    IS_EXECUTABLE = 1 << 3
    EXISTS = 1 << 4


def _error_from_os(exc: OSError, message: Optional[str] = None) -> EgError:
    err_no = exc.errno if exc.errno is not None else 0
    text = message if message is not None else os.strerror(err_no)
    return EgError(FILE_ERROR_DOMAIN, file_error_from_errno(err_no), text)


def file_test(filename: Optional[Union[str, os.PathLike]], test: int) -> bool:
    """Return True when any of the conditions in test holds for filename."""
    if filename is None or not test:
        return False
    test = FileTest(test)
    path = os.fspath(filename)

    if FileTest.EXISTS in test and os.access(path, os.F_OK):
        return True
    if FileTest.IS_EXECUTABLE in test and os.access(path, os.X_OK):
        return True

    st: Optional[os.stat_result] = None
    if FileTest.IS_SYMLINK in test:
        try:
            st = os.lstat(path)
        except OSError:
            st = None
        if st is not None and stat.S_ISLNK(st.st_mode):
            return True

    # As with the checks above, a status already taken with lstat is reused.
    if FileTest.IS_REGULAR in test:
        if st is None:
            st = _try_stat(path)
        if st is not None and stat.S_ISREG(st.st_mode):
            return True
    if FileTest.IS_DIR in test:
        if st is None:
            st = _try_stat(path)
        if st is not None and stat.S_ISDIR(st.st_mode):
            return True
    return False


def _try_stat(path: str) -> Optional[os.stat_result]:
    try:
        return os.stat(path)
    except OSError:
        return None


def get_contents(filename: Union[str, os.PathLike]) -> bytes:
    """Read a whole file and return its bytes; raise EgError when it cannot be read."""
    try:
        with open(filename, "rb") as fp:
            return fp.read()
    except OSError as exc:
        raise _error_from_os(exc, "Error opening file") from exc


def _temporary_path(filename: str) -> str:
    cut = filename.rfind(os.sep) + 1
    prefix, name = filename[:cut], filename[cut:]
    if os.name == "nt":
        return f"{prefix}{name}.tmp"
    return f"{prefix}.{name}~"


def set_contents(filename: Union[str, os.PathLike], contents: Union[str, bytes]) -> None:
    """Replace a file's contents atomically through a temporary file and a rename."""
    target = os.fspath(filename)
    data = contents.encode("utf-8") if isinstance(contents, str) else bytes(contents)
    path = _temporary_path(target)
    try:
        fp = open(path, "wb")
    except OSError as exc:
        raise _error_from_os(exc) from exc
    try:
        with fp:
            fp.write(data)
    except OSError as exc:
        _unlink_quietly(path)
        raise _error_from_os(exc) from exc
    try:
        os.replace(path, target)
    except OSError as exc:
        _unlink_quietly(path)
        raise _error_from_os(exc) from exc


def _unlink_quietly(path: str) -> None:
    try:
        os.unlink(path)
    except OSError:
        pass


def open_tmp(tmpl: Optional[str] = None) -> tuple[int, str]:
    """Create a unique file in the temporary directory from a template ending in XXXXXX.

    Return the open descriptor and the path used; the caller closes the descriptor.
    """
    if tmpl is None:
        tmpl = _DEFAULT_TEMPLATE
    if os.sep in tmpl:
        raise EgError(
            FILE_ERROR_DOMAIN, _TEMPLATE_ERROR_CODE, f"Template should not have any {os.sep}"
        )
    if len(tmpl) < 6 or not tmpl.endswith(_TEMPLATE_SUFFIX):
        raise EgError(
            FILE_ERROR_DOMAIN, _TEMPLATE_ERROR_CODE, "Template should end with XXXXXX"
        )

    base = tmpl[: -len(_TEMPLATE_SUFFIX)]
    directory = tempfile.gettempdir()
    flags = os.O_RDWR | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
    last_error: Optional[OSError] = None
    for _ in range(_TMP_ATTEMPTS):
        unique = "".join(secrets.choice(_TEMPLATE_CHARS) for _ in range(6))
        path = os.path.join(directory, base + unique)
        try:
            fd = os.open(path, flags, 0o600)
        except FileExistsError as exc:
            last_error = exc
            continue
        except OSError as exc:
            raise _error_from_os(exc, "Error in mkstemp()") from exc
        return fd, path
    assert last_error is not None
    raise _error_from_os(last_error, "Error in mkstemp()")


def get_current_dir() -> str:
    """Return the current working directory."""
    return os.getcwd()
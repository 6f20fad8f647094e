import errno

import pytest

from eglite.errors import FILE_ERROR_DOMAIN, EgError, FileError, file_error_from_errno


@pytest.mark.parametrize(
    "err_no, expected",
    [
        (errno.EEXIST, FileError.EXIST),
        (errno.EISDIR, FileError.ISDIR),
        (errno.EACCES, FileError.ACCES),
        (errno.ENAMETOOLONG, FileError.NAMETOOLONG),
        (errno.ENOENT, FileError.NOENT),
        (errno.ENOTDIR, FileError.NOTDIR),
        (errno.ENOSPC, FileError.NOSPC),
        (errno.EBADF, FileError.BADF),
        (errno.EINVAL, FileError.INVAL),
        (errno.EPIPE, FileError.PIPE),
        (errno.EINTR, FileError.INTR),
        (errno.EIO, FileError.IO),
        (errno.EPERM, FileError.PERM),
    ],
)
def test_file_error_from_errno_known(err_no, expected):
    assert file_error_from_errno(err_no) is expected


def test_file_error_from_errno_unknown_is_failed():
    assert file_error_from_errno(-12345) is FileError.FAILED


def test_failed_code_matches_template_error_code():
    # The temporary-file template errors use the literal code 24.
    assert file_error_from_errno(-1) == 24


def test_distinct_errnos_map_to_distinct_codes():
    err_nos = [
        errno.EEXIST,
        errno.EISDIR,
        errno.EACCES,
        errno.ENAMETOOLONG,
        errno.ENOENT,
        errno.ENOTDIR,
        errno.ENOSPC,
        errno.EBADF,
        errno.EINVAL,
        errno.EPIPE,
        errno.EINTR,
        errno.EIO,
        errno.EPERM,
    ]
    codes = [file_error_from_errno(e) for e in err_nos]
    assert len(codes) == len(set(codes))
    assert file_error_from_errno(errno.EEXIST) == 0


def test_eg_error_carries_fields():
    err = EgError(FILE_ERROR_DOMAIN, FileError.NOENT, "Error opening file")
    assert err.domain == FILE_ERROR_DOMAIN
    assert err.code == FileError.NOENT
    assert err.message == "Error opening file"
    assert str(err) == "Error opening file"


def test_eg_error_is_raisable():
    err = EgError("dom", 7, "boom")
    assert err.code == 7
    assert err.domain == "dom"
    with pytest.raises(EgError, match="boom") as info:
        raise err
    assert info.value is err


def test_file_error_domain_name():
    err = EgError(FILE_ERROR_DOMAIN, FileError.IO, "io")
    assert err.domain == "FileError"
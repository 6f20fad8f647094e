# eglite

A small utility library with no third-party dependencies. It is made of six
modules.

## Modules

### `eglite.array`

- `Array(zero_terminated=False, clear=False, reserved_size=None)`: a growable
  array of arbitrary values. It has `append`, `append_vals`, `insert_val`,
  `insert_vals`, `remove_index`, `remove_index_fast` (which moves the last
  element into the freed slot) and `set_size`. It also supports `len()`,
  indexing, slicing and iteration, and has a read-only `capacity`. When the
  array is zero-terminated, indexing one past the last element returns `0`.
  When `set_size` grows the array, the new slots are filled with `0` if
  `clear` is set and with `None` otherwise. An index out of range raises
  `IndexError`, and a negative size raises `ValueError`.
- `ByteArray()`: a growable byte buffer. It has `append(data)` and
  `to_bytes()`, and supports `len()` and indexing. A slice returns `bytes`.

### `eglite.hashtable`

- `HashTable(hash_func=None, key_equal_func=None, key_destroy_func=None,
  value_destroy_func=None)`: a separately chained hash table. When no hash or
  equality function is given, keys are hashed and compared by identity. Its
  methods:
  - `insert`, `replace` and `insert_replace(key, value, replace)` store values.
  - `lookup` returns the value, or `None` when the key is absent.
  - `lookup_extended` returns `(stored_key, value)`, or `None` when the key is
    absent.
  - `remove` and `steal` delete one entry. `remove` calls the destroy
    callbacks and `steal` does not.
  - `foreach`, `find`, `foreach_remove` and `foreach_steal` walk or filter the
    entries.
  - `remove_all` and `destroy` empty the table.
  - `keys`, `values` and `items` list the entries.
  - `stats` returns a `HashTableStats` with the size, the bucket count and the
    longest chain.
  - The table also supports `len()`, iteration over its keys and `in`.
- Helper functions: `direct_hash` and `direct_equal` work by identity,
  `int_hash` and `int_equal` by integer value, and `str_hash` and `str_equal`
  by string contents. `spaced_primes_closest(x)` returns the bucket count the
  table uses.

### `eglite.errors`

- `EgError(domain, code, message)`: the exception that the file and directory
  helpers raise.
- `FileError`: an `IntEnum` of portable file error codes.
- `file_error_from_errno(err_no)`: maps an OS errno value to a `FileError`.
  Unknown values map to `FileError.FAILED`.

### `eglite.fileutil`

- `file_test(filename, test)`: returns `True` if any of the `FileTest` flags
  in `test` holds. The flags are `EXISTS`, `IS_REGULAR`, `IS_DIR`,
  `IS_SYMLINK` and `IS_EXECUTABLE`.
- `get_contents(filename)`: returns the whole file as `bytes`.
- `set_contents(filename, contents)`: writes `str` (as UTF-8) or `bytes` to a
  temporary file next to the target, then renames it into place.
- `open_tmp(tmpl=None)`: creates a unique file in the system temporary
  directory from a template that ends in `XXXXXX`. The template must not
  contain a path separator. It returns `(fd, path)`, and the caller is
  responsible for closing `fd`.
- `get_current_dir()`: returns the current working directory.

These functions raise `EgError` on failure. Its `code` is a `FileError` when
the failure came from the OS, and `24` when the template is invalid.

### `eglite.dirutil`

- `Dir(path)`: an open directory. It has the following members:
  - `read_name()` returns the next entry name, or `None` when there are no
    more. The entries `.` and `..` are never returned.
  - `rewind()` starts the listing again from the beginning.
  - `close()` releases the directory.
  - `closed` tells whether the directory has been closed.
  - A `Dir` can be iterated over and used as a context manager.
  - If the directory cannot be opened, `EgError` is raised. Using a closed
    `Dir` raises `ValueError`.
- `mkdir_with_parents(pathname, mode=0o777)`: creates the directory and any
  missing parents, and accepts directories that already exist. Failures raise
  `OSError`, including `EINVAL` for an empty path.

### `eglite.timeutil`

- `get_current_time()`: returns a `TimeVal(tv_sec, tv_usec)`, which has a
  `to_seconds()` method.
- `usleep(microseconds)`: sleeps for the given time. A negative value raises
  `ValueError`.

## Example

```python
from eglite.array import Array
from eglite.hashtable import HashTable, str_hash, str_equal
from eglite.fileutil import FileTest, file_test
from eglite.dirutil import Dir

arr = Array(zero_terminated=True)
arr.append(27)
assert arr[0] == 27 and arr[1] == 0

table = HashTable(str_hash, str_equal)
table.insert("hello", 1)
assert table.lookup("hello") == 1

assert file_test(".", FileTest.IS_DIR)

with Dir(".") as d:
    for name in d:
        print(name)
```

## What it does not provide

This is a library only. It has no command-line tool. It also has no linked
lists, queues, string utilities, path building or Unicode and character-set
conversion.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```
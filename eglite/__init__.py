"""Small utility library: arrays, a hash table, error values, and file, directory and time helpers."""

__version__ = "0.3.0"
__all__ = ["array", "dirutil", "errors", "fileutil", "hashtable", "timeutil"]
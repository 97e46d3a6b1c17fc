"""General helpers."""

from __future__ import annotations

import os
import secrets
import string

_HEX_CHARS = "0123456789abcdef"
_UCHAR_MAX = 255
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def gen_hex_string(length: int = 16) -> str:
    """Return a random string of lower-case hex digits."""
    return "".join(secrets.choice(_HEX_CHARS) for _ in range(length))


def gen_bytes(length: int = 16) -> bytes:
    """Return random bytes, each below 255."""
    return bytes(secrets.randbelow(_UCHAR_MAX) for _ in range(length))


def open_file(path: str | os.PathLike[str]) -> bytes:
    """Read a whole file as bytes."""
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        raise OSError(f"Failed to open file at path {os.fspath(path)}") from exc


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of a string, leaving others alone."""
    return text.translate(_ASCII_UPPER)
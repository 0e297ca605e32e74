"""
File I/O utilities: safe write, optional read, and name sanitizing.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

_UNSAFE_NAME_RE = re.compile(r"[^a-z0-9_-]")


def safe_write(filepath: str | Path, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, mode, encoding=encoding) as f:
        f.write(content)


def read_if_exists(filepath: str | Path, encoding: str = "utf-8") -> str:
    """Read a text file, returning ``""`` when it does not exist.

    Any other ``OSError`` (permissions, is-a-directory, ...) propagates.
    """
    try:
        with open(filepath, encoding=encoding) as f:
            return f.read()
    except FileNotFoundError:
        return ""


def sanitize_name(name: str) -> str:
    """Normalize a user-typed name into a directory-safe slug.

    Lowercases, turns spaces into hyphens and drops anything that is not
    alphanumeric, a hyphen or an underscore. May return ``""``.
    """
    name = name.strip().lower().replace(" ", "-")
    return _UNSAFE_NAME_RE.sub("", name)

"""Filesystem helpers."""

from __future__ import annotations

import os
import sys


def mkdir_if_necessary(create_dir: str) -> None:
    """Create a directory and its parents; relative paths are taken from the cwd.

    Raises OSError when a directory cannot be created.
    """
    if not create_dir:
        return
    path = create_dir if os.path.isabs(create_dir) else os.path.join(os.getcwd(), create_dir)
    if os.path.exists(path):
        return
    os.makedirs(path, exist_ok=True)


def get_current_path() -> str:
    """Return the absolute directory of the running program."""
    program = sys.argv[0] if sys.argv else ""
    return os.path.abspath(os.path.dirname(program))
"""Filesystem primitives used by background operations.

Listing is one level deep and returns children sorted by name. Copying
creates missing destination parents and copies either one file or a whole
subtree. ``OSError`` is translated into the ``gut.errors`` taxonomy.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .errors import CopyError, EnumerationError
from .jobs import DirEntry

logger = logging.getLogger(__name__)


def _reason(exc: OSError) -> str:
    """Short human-readable cause for ``exc``."""
    if isinstance(exc, shutil.Error) and exc.args and isinstance(exc.args[0], list):
        failures = exc.args[0]
        if failures:
            _src, _dst, why = failures[0]
            more = f" (and {len(failures) - 1} more)" if len(failures) > 1 else ""
            return f"{why}{more}"
    if exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


def resolve_under(root: Path, relative_path: str) -> Path:
    """Join a slash-separated relative path onto ``root``."""
    if not relative_path:
        return root
    return root.joinpath(*relative_path.split("/"))


def list_directory(root: Path, relative_path: str) -> list[DirEntry]:
    """Return the direct children of ``root/relative_path``.

    Raises ``EnumerationError`` when the directory is missing, unreadable, or
    not a directory.
    """
    directory = resolve_under(root, relative_path)
    entries: list[DirEntry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(DirEntry(name=child.name, is_dir=is_dir))
    except OSError as exc:
        raise EnumerationError(relative_path, _reason(exc)) from exc
    entries.sort(key=lambda entry: entry.name)
    logger.debug("listed %s: %d entries", directory, len(entries))
    return entries


def copy_path(source: Path, destination: Path, relative_path: str = "") -> None:
    """Copy ``source`` to ``destination``, recursing into directories.

    Existing destination files are overwritten. Raises ``CopyError`` naming
    ``relative_path`` on any failure.
    """
    try:
        if source.is_dir():
            source_resolved = source.resolve()
            destination_resolved = destination.resolve()
            if destination_resolved == source_resolved or source_resolved in destination_resolved.parents:
                raise CopyError(relative_path, "destination is inside the source folder")
            shutil.copytree(source, destination, dirs_exist_ok=True)
        else:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, destination)
    except OSError as exc:
        raise CopyError(relative_path, _reason(exc)) from exc
    logger.debug("copied %s -> %s", source, destination)

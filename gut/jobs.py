"""Pending-decision jobs and the linked stack that orders them.

Each listed directory entry becomes one ``Job``. Jobs are chained through
``previous`` so the most recently discovered entry is decided first.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class DirEntry:
    """One child returned by a single-level directory listing."""

    name: str
    is_dir: bool


@dataclass(frozen=True)
class Job:
    """Undecided filesystem entry plus link to the job beneath it."""

    entry_name: str
    is_directory: bool
    parent_relative_path: str = ""
    previous: Job | None = None

    @property
    def relative_path(self) -> str:
        """Path of the entry relative to the source root."""
        if not self.parent_relative_path:
            return self.entry_name
        return posixpath.join(self.parent_relative_path, self.entry_name)


class JobStack:
    """LIFO chain of jobs exposed through ``push``, ``pop`` and ``peek``."""

    def __init__(self) -> None:
        self._top: Job | None = None
        self._size = 0

    def push(self, entry: DirEntry, parent_relative_path: str = "") -> Job:
        """Create a job for ``entry`` on top of the current chain."""
        job = Job(
            entry_name=entry.name,
            is_directory=entry.is_dir,
            parent_relative_path=parent_relative_path,
            previous=self._top,
        )
        self._top = job
        self._size += 1
        return job

    def push_job(self, job: Job) -> None:
        """Put an existing job back on top, relinking it to the current chain."""
        self._top = Job(
            entry_name=job.entry_name,
            is_directory=job.is_directory,
            parent_relative_path=job.parent_relative_path,
            previous=self._top,
        )
        self._size += 1

    def pop(self) -> Job | None:
        """Drop the top job only; the chain beneath it stays intact."""
        job = self._top
        if job is None:
            return None
        self._top = job.previous
        self._size -= 1
        return job

    def peek(self) -> Job | None:
        return self._top

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None

    def __iter__(self) -> Iterator[Job]:
        """Yield jobs from top to bottom."""
        job = self._top
        while job is not None:
            yield job
            job = job.previous

"""Background worker for directory listings and copies.

The decision loop never touches the filesystem itself: it submits one
request at a time here and later drains exactly one event per request.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from . import fs
from .jobs import DirEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListRequest:
    """List the direct children of one source-relative directory."""

    relative_path: str


@dataclass(frozen=True)
class CopyRequest:
    """Copy one source-relative file or subtree into the destination root."""

    relative_path: str


OperationRequest = ListRequest | CopyRequest


@dataclass(frozen=True)
class DirectoryListed:
    relative_path: str
    entries: tuple[DirEntry, ...]


@dataclass(frozen=True)
class EntryCopied:
    relative_path: str


@dataclass(frozen=True)
class OperationFailed:
    request: OperationRequest
    error: Exception


OperationEvent = DirectoryListed | EntryCopied | OperationFailed


class OperationGateway:
    """Run one filesystem operation at a time off the calling thread.

    ``submit`` raises ``RuntimeError`` while a previous request's event has
    not been drained yet, so completion order always equals issue order.
    """

    def __init__(
        self,
        source_root: Path,
        destination_root: Path,
        *,
        list_directory: Callable[[Path, str], list[DirEntry]] = fs.list_directory,
        copy_path: Callable[[Path, Path, str], None] = fs.copy_path,
    ) -> None:
        self.source_root = source_root
        self.destination_root = destination_root
        self._list_directory = list_directory
        self._copy_path = copy_path
        self._lock = threading.Lock()
        self._outstanding = False
        self._worker: threading.Thread | None = None
        self._events: Queue[OperationEvent] = Queue()

    @property
    def in_flight(self) -> bool:
        """Whether a submitted request has not been drained yet."""
        with self._lock:
            return self._outstanding

    def _run(self, request: OperationRequest) -> OperationEvent:
        if isinstance(request, ListRequest):
            entries = self._list_directory(self.source_root, request.relative_path)
            return DirectoryListed(relative_path=request.relative_path, entries=tuple(entries))
        source = fs.resolve_under(self.source_root, request.relative_path)
        destination = fs.resolve_under(self.destination_root, request.relative_path)
        self._copy_path(source, destination, request.relative_path)
        return EntryCopied(relative_path=request.relative_path)

    def _work(self, request: OperationRequest) -> None:
        try:
            event = self._run(request)
        except Exception as exc:
            logger.error("%s failed: %s", request, exc, exc_info=exc)
            event = OperationFailed(request=request, error=exc)
        else:
            logger.debug("%s finished", request)
        self._events.put(event)

    def submit(self, request: OperationRequest) -> None:
        """Start ``request`` on a background thread."""
        with self._lock:
            if self._outstanding:
                raise RuntimeError("an operation is already in flight")
            self._outstanding = True
        logger.debug("submitting %s", request)
        worker = threading.Thread(
            target=self._work,
            args=(request,),
            name="gut-operation",
            daemon=True,
        )
        self._worker = worker
        worker.start()

    def _take(self, event: OperationEvent) -> OperationEvent:
        with self._lock:
            self._outstanding = False
        return event

    def drain_events(self) -> list[OperationEvent]:
        """Return completed events without blocking."""
        out: list[OperationEvent] = []
        while True:
            try:
                out.append(self._take(self._events.get_nowait()))
            except Empty:
                break
        return out

    def close(self, timeout: float | None = None) -> None:
        """Wait for the in-flight operation, if any, to run to completion."""
        worker = self._worker
        if worker is not None and worker.is_alive():
            logger.debug("waiting for in-flight operation before exit")
            worker.join(timeout)


__all__ = [
    "CopyRequest",
    "DirectoryListed",
    "EntryCopied",
    "ListRequest",
    "OperationEvent",
    "OperationFailed",
    "OperationGateway",
    "OperationRequest",
]

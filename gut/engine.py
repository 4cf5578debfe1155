"""Decision engine driving the interactive copy session.

The engine is a reducer: key choices and operation events go in, stack
mutations happen, and at most one ``OperationRequest`` comes out for the
runtime to hand to the background gateway. It never touches the filesystem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .jobs import Job, JobStack
from .operations import (
    CopyRequest,
    DirectoryListed,
    EntryCopied,
    ListRequest,
    OperationEvent,
    OperationFailed,
    OperationRequest,
)

logger = logging.getLogger(__name__)


class SessionState(Enum):
    AWAITING_PROMPT = "awaiting-prompt"
    OPERATION_IN_FLIGHT = "operation-in-flight"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class Choice:
    """One selectable answer: a key letter and its list label."""

    id: str
    label: str


NO = Choice("n", "(N)o")
YES = Choice("y", "(Y)es")
COMPLETELY = Choice("c", "(C)ompletely")
ASK = Choice("a", "(A)sk")

FILE_CHOICES: tuple[Choice, ...] = (NO, YES)
DIRECTORY_CHOICES: tuple[Choice, ...] = (NO, COMPLETELY, ASK)
CHOICE_IDS = frozenset(choice.id for choice in DIRECTORY_CHOICES + FILE_CHOICES)


@dataclass(frozen=True)
class Prompt:
    title: str
    choices: tuple[Choice, ...]


EMPTY_PROMPT = Prompt(title="", choices=())


def derive_prompt(job: Job | None) -> Prompt:
    """Build the question for ``job``; no job means nothing left to ask."""
    if job is None:
        return EMPTY_PROMPT
    if job.is_directory:
        return Prompt(
            title=f"Do you want to copy folder {job.relative_path}?",
            choices=DIRECTORY_CHOICES,
        )
    return Prompt(
        title=f"Do you want to copy file {job.relative_path}?",
        choices=FILE_CHOICES,
    )


@dataclass
class Session:
    """Mutable session aggregate, owned by the decision thread only."""

    source_root: Path
    stack: JobStack
    error: Exception | None = None
    done: bool = False


class DecisionEngine:
    """Apply choices and operation results to one ``Session``.

    While an operation is in flight the displayed prompt is frozen and every
    choice is ignored; the prompt is re-derived once the result arrives.
    """

    def __init__(self, source_root: Path) -> None:
        self.session = Session(source_root=source_root, stack=JobStack())
        self._state = SessionState.AWAITING_PROMPT
        self._prompt = EMPTY_PROMPT
        self._pending: OperationRequest | None = None
        self._expanding: Job | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def prompt(self) -> Prompt:
        """Prompt currently displayed to the user."""
        return self._prompt

    @property
    def pending_request(self) -> OperationRequest | None:
        return self._pending

    @property
    def stack(self) -> JobStack:
        return self.session.stack

    @property
    def error(self) -> Exception | None:
        return self.session.error

    @property
    def done(self) -> bool:
        return self.session.done

    def start(self) -> OperationRequest:
        """Request the listing of the source root."""
        return self._issue(ListRequest(relative_path=""))

    def _issue(self, request: OperationRequest) -> OperationRequest:
        self._pending = request
        self._state = SessionState.OPERATION_IN_FLIGHT
        logger.debug("issuing %s", request)
        return request

    def _refresh(self) -> None:
        top = self.session.stack.peek()
        self._prompt = derive_prompt(top)
        if top is None:
            self.session.done = True
            self._state = SessionState.DONE
            logger.debug("stack empty, session done")
        else:
            self._state = SessionState.AWAITING_PROMPT

    def _fail(self, error: Exception) -> None:
        self.session.error = error
        self._prompt = EMPTY_PROMPT
        self._state = SessionState.FAILED
        logger.error("session failed: %s", error)

    def apply(self, choice_id: str) -> OperationRequest | None:
        """Apply one choice letter; returns the operation to run, if any.

        Letters that do not fit the top job's kind are ignored, as is any
        input while an operation is in flight or after DONE/FAILED.
        """
        if self._state is not SessionState.AWAITING_PROMPT:
            return None
        job = self.session.stack.peek()
        if job is None:
            return None

        if choice_id == NO.id:
            self.session.stack.pop()
            logger.debug("skipped %s", job.relative_path)
            self._refresh()
            return None
        if choice_id == YES.id and not job.is_directory:
            return self._issue(CopyRequest(relative_path=job.relative_path))
        if choice_id == COMPLETELY.id and job.is_directory:
            return self._issue(CopyRequest(relative_path=job.relative_path))
        if choice_id == ASK.id and job.is_directory:
            self.session.stack.pop()
            self._expanding = job
            return self._issue(ListRequest(relative_path=job.relative_path))
        return None

    def handle(self, event: OperationEvent) -> None:
        """Fold one completed operation back into the session."""
        if self._state is not SessionState.OPERATION_IN_FLIGHT:
            logger.warning("ignoring unexpected event %s in state %s", event, self._state.value)
            return
        self._pending = None
        expanding, self._expanding = self._expanding, None

        if isinstance(event, OperationFailed):
            if expanding is not None:
                # Put the folder back so the stack matches the pre-Ask state.
                self.session.stack.push_job(expanding)
            self._fail(event.error)
            return
        if isinstance(event, DirectoryListed):
            for entry in event.entries:
                self.session.stack.push(entry, parent_relative_path=event.relative_path)
            logger.debug("expanded %r into %d jobs", event.relative_path, len(event.entries))
        elif isinstance(event, EntryCopied):
            self.session.stack.pop()
            logger.debug("copied %s", event.relative_path)
        self._refresh()


__all__ = [
    "ASK",
    "CHOICE_IDS",
    "COMPLETELY",
    "Choice",
    "DIRECTORY_CHOICES",
    "DecisionEngine",
    "EMPTY_PROMPT",
    "FILE_CHOICES",
    "NO",
    "Prompt",
    "Session",
    "SessionState",
    "YES",
    "derive_prompt",
]

"""Runtime composition layer for gut.

Wires the decision engine, the background gateway, and the choice list to
the terminal loop. ``CopySession`` is the seam tests drive directly.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..choice_list import ChoiceList
from ..engine import DecisionEngine, Prompt, SessionState
from ..input import PromptKeyCallbacks, build_prompt_dispatcher, handle_prompt_key
from ..operations import CopyRequest, ListRequest, OperationGateway, OperationRequest
from ..render import RenderContext, render_frame
from ..ui_theme import UITheme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class CopySession:
    """One interactive traversal: engine state plus its presentation."""

    def __init__(
        self,
        engine: DecisionEngine,
        gateway: OperationGateway,
        choice_list: ChoiceList | None = None,
    ) -> None:
        self.engine = engine
        self.gateway = gateway
        self.choice_list = choice_list if choice_list is not None else ChoiceList()
        self._shown: Prompt | None = None

    def _submit(self, request: OperationRequest | None) -> None:
        if request is not None:
            self.gateway.submit(request)

    def _sync_prompt(self) -> None:
        prompt = self.engine.prompt
        if prompt != self._shown:
            self._shown = prompt
            self.choice_list.show_prompt(prompt)

    def start(self) -> None:
        """Request the root listing."""
        self._submit(self.engine.start())

    def choose(self, choice_id: str) -> None:
        """Apply a letter only when it is offered by the displayed prompt."""
        if not self.choice_list.has_choice(choice_id):
            return
        self._submit(self.engine.apply(choice_id))
        self._sync_prompt()

    def pump_events(self) -> bool:
        """Fold finished operations into the engine; returns whether any arrived."""
        events = self.gateway.drain_events()
        for event in events:
            self.engine.handle(event)
        if events:
            self._sync_prompt()
        return bool(events)

    def can_quit(self) -> bool:
        return self.engine.state in {SessionState.DONE, SessionState.FAILED}

    def status_message(self) -> str:
        request = self.engine.pending_request
        if isinstance(request, CopyRequest):
            return f"Copying {request.relative_path}..."
        if isinstance(request, ListRequest):
            return f"Reading {request.relative_path or self.engine.session.source_root}..."
        return ""

    def render_context(self, width: int, height: int, theme: UITheme) -> RenderContext:
        return RenderContext(
            state=self.engine.state,
            title=self.choice_list.title,
            items=tuple(self.choice_list.items),
            selected=self.choice_list.selected,
            width=width,
            height=height,
            theme=theme,
            status_message=self.status_message(),
            error=self.engine.error,
        )

    def close(self) -> None:
        self.gateway.close()


def run_session(source: Path, theme: UITheme) -> int:
    """Run the interactive session for ``source``; returns the exit status.

    Copies land under the working directory captured here, at startup.
    Exit status is 0 only when every entry was decided.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("gut needs an interactive terminal on stdin")

    destination = Path.cwd()
    logger.info("session started: %s -> %s", source, destination)
    engine = DecisionEngine(source)
    session = CopySession(engine, OperationGateway(source, destination))
    terminal = TerminalController(stdin_fd, stdout_fd)
    dispatcher = build_prompt_dispatcher(
        PromptKeyCallbacks(
            choose=session.choose,
            move_selection=session.choice_list.move,
            selected_choice=session.choice_list.selected_id,
            can_quit=session.can_quit,
        )
    )

    session.start()
    try:
        run_main_loop(
            terminal,
            stdin_fd,
            RuntimeLoopTiming(),
            RuntimeLoopCallbacks(
                drain_events=session.pump_events,
                render=lambda width, height: render_frame(session.render_context(width, height, theme)),
                handle_key=lambda key: handle_prompt_key(key, dispatcher),
            ),
        )
    finally:
        session.close()

    logger.info("session ended in state %s", engine.state.value)
    return 0 if engine.done else 1

"""Keyboard handling for the prompt screen."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..engine import CHOICE_IDS
from .key_registry import KeyBinding, KeyDispatcher


@dataclass(frozen=True)
class PromptKeyCallbacks:
    """External operations required for prompt key handling."""

    choose: Callable[[str], None]
    move_selection: Callable[[int], bool]
    selected_choice: Callable[[], str | None]
    can_quit: Callable[[], bool]


def build_prompt_dispatcher(callbacks: PromptKeyCallbacks) -> KeyDispatcher:
    """Bind navigation, confirmation, choice letters and quit keys.

    Actions return ``True`` to end the session.
    """

    def quit_if_finished() -> bool:
        return callbacks.can_quit()

    def confirm() -> bool:
        choice_id = callbacks.selected_choice()
        if choice_id is not None:
            callbacks.choose(choice_id)
        return False

    def choose(choice_id: str) -> Callable[[], bool]:
        def action() -> bool:
            callbacks.choose(choice_id)
            return False

        return action

    def move(delta: int) -> Callable[[], bool]:
        def action() -> bool:
            callbacks.move_selection(delta)
            return False

        return action

    dispatcher = KeyDispatcher(fold_case=True)
    dispatcher.bind(
        KeyBinding(("CTRL_C",), lambda: True),
        KeyBinding(("q", "ESC"), quit_if_finished),
        KeyBinding(("UP", "k", "CTRL_P"), move(-1)),
        KeyBinding(("DOWN", "j", "CTRL_N", "TAB"), move(1)),
        KeyBinding(("ENTER",), confirm),
    )
    for choice_id in sorted(CHOICE_IDS):
        dispatcher.bind(KeyBinding((choice_id,), choose(choice_id)))
    return dispatcher


def handle_prompt_key(key: str, dispatcher: KeyDispatcher) -> bool:
    """Dispatch one key token; returns whether the session should end."""
    return bool(dispatcher.dispatch(key))

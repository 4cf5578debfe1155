"""Key-to-action dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """One action reachable through one or more key tokens."""

    keys: tuple[str, ...]
    action: Callable[[], bool | None]


class KeyDispatcher:
    """Map key tokens to actions, optionally folding case first."""

    def __init__(self, *, fold_case: bool = False) -> None:
        self._fold_case = fold_case
        self._actions: dict[str, Callable[[], bool | None]] = {}

    def _token(self, key: str) -> str:
        if self._fold_case and len(key) == 1:
            return key.lower()
        return key

    def bind(self, *bindings: KeyBinding) -> KeyDispatcher:
        """Register bindings; later bindings win for shared keys."""
        for binding in bindings:
            for key in binding.keys:
                self._actions[self._token(key)] = binding.action
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when nothing is bound."""
        action = self._actions.get(self._token(key))
        if action is None:
            return None
        return action()

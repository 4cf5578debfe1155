"""Single-selection list backing the prompt screen."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .engine import Choice, Prompt


@dataclass
class ChoiceList:
    """Title, ordered choices, and the highlighted row index."""

    title: str = ""
    items: list[Choice] = field(default_factory=list)
    selected: int = 0

    def set_items(self, title: str, items: Sequence[Choice]) -> None:
        """Replace the list contents and move the highlight to the first row."""
        self.title = title
        self.items = list(items)
        self.selected = 0

    def show_prompt(self, prompt: Prompt) -> None:
        self.set_items(prompt.title, prompt.choices)

    def move(self, delta: int) -> bool:
        """Move the highlight by ``delta`` rows; returns whether it moved."""
        if not self.items:
            return False
        previous = self.selected
        self.selected = max(0, min(len(self.items) - 1, self.selected + delta))
        return self.selected != previous

    def selected_id(self) -> str | None:
        """Id of the highlighted choice, or ``None`` for an empty list."""
        if not (0 <= self.selected < len(self.items)):
            return None
        return self.items[self.selected].id

    def has_choice(self, choice_id: str) -> bool:
        return any(item.id == choice_id for item in self.items)

"""Tests for prompt key bindings and the dispatch table."""

from __future__ import annotations

import unittest

from gut.choice_list import ChoiceList
from gut.engine import DIRECTORY_CHOICES
from gut.input import (
    KeyBinding,
    KeyDispatcher,
    PromptKeyCallbacks,
    build_prompt_dispatcher,
    handle_prompt_key,
)


class KeyDispatcherTests(unittest.TestCase):
    def test_unbound_key_returns_none(self) -> None:
        self.assertIsNone(KeyDispatcher().dispatch("x"))

    def test_later_binding_overrides_earlier(self) -> None:
        dispatcher = KeyDispatcher().bind(
            KeyBinding(("x",), lambda: False),
            KeyBinding(("x", "y"), lambda: True),
        )
        self.assertTrue(dispatcher.dispatch("x"))
        self.assertTrue(dispatcher.dispatch("y"))

    def test_fold_case_applies_to_single_characters_only(self) -> None:
        dispatcher = KeyDispatcher(fold_case=True).bind(KeyBinding(("a", "UP"), lambda: True))
        self.assertTrue(dispatcher.dispatch("A"))
        self.assertTrue(dispatcher.dispatch("UP"))
        self.assertIsNone(dispatcher.dispatch("up"))


class PromptKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.choices: list[str] = []
        self.finished = False
        self.choice_list = ChoiceList()
        self.choice_list.set_items("Do you want to copy folder d?", DIRECTORY_CHOICES)
        self.dispatcher = build_prompt_dispatcher(
            PromptKeyCallbacks(
                choose=self.choices.append,
                move_selection=self.choice_list.move,
                selected_choice=self.choice_list.selected_id,
                can_quit=lambda: self.finished,
            )
        )

    def test_letters_choose_directly(self) -> None:
        for key in ("n", "C", "a", "y"):
            self.assertFalse(handle_prompt_key(key, self.dispatcher))
        self.assertEqual(self.choices, ["n", "c", "a", "y"])

    def test_enter_confirms_highlighted_row(self) -> None:
        handle_prompt_key("DOWN", self.dispatcher)
        handle_prompt_key("j", self.dispatcher)
        handle_prompt_key("j", self.dispatcher)
        handle_prompt_key("ENTER", self.dispatcher)
        handle_prompt_key("k", self.dispatcher)
        handle_prompt_key("ENTER", self.dispatcher)
        self.assertEqual(self.choices, ["a", "c"])

    def test_q_quits_only_when_finished(self) -> None:
        self.assertFalse(handle_prompt_key("q", self.dispatcher))
        self.finished = True
        self.assertTrue(handle_prompt_key("Q", self.dispatcher))

    def test_ctrl_c_always_quits(self) -> None:
        self.assertTrue(handle_prompt_key("CTRL_C", self.dispatcher))

    def test_unknown_keys_are_ignored(self) -> None:
        self.assertFalse(handle_prompt_key("z", self.dispatcher))
        self.assertEqual(self.choices, [])


if __name__ == "__main__":
    unittest.main()

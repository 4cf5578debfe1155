"""Tests for the key/event/render loop wiring."""

from __future__ import annotations

from contextlib import contextmanager
import unittest
from unittest import mock

from gut.runtime import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        yield


class MainLoopTests(unittest.TestCase):
    def _run(self, keys: list[str], *, events: list[bool] | None = None):
        handled: list[str] = []
        renders: list[tuple[int, int]] = []
        event_flags = list(events or [])

        def drain_events() -> bool:
            return event_flags.pop(0) if event_flags else False

        def handle_key(key: str) -> bool:
            handled.append(key)
            return key == "CTRL_C"

        terminal = _FakeTerminal()
        with mock.patch("gut.runtime.loop.read_key", side_effect=keys), mock.patch(
            "gut.runtime.loop.shutil.get_terminal_size", return_value=mock.Mock(columns=80, lines=24)
        ):
            run_main_loop(
                terminal,
                0,
                RuntimeLoopTiming(key_poll_ms=1),
                RuntimeLoopCallbacks(
                    drain_events=drain_events,
                    render=lambda width, height: renders.append((width, height)),
                    handle_key=handle_key,
                ),
            )
        return terminal, handled, renders

    def test_loop_stops_when_handler_requests_quit(self) -> None:
        terminal, handled, renders = self._run(["n", "CTRL_C"])
        self.assertEqual(terminal.entered, 1)
        self.assertEqual(handled, ["n", "CTRL_C"])
        self.assertEqual(renders, [(80, 24), (80, 24)])

    def test_timeouts_render_only_when_events_arrive(self) -> None:
        _terminal, handled, renders = self._run(["", "", "CTRL_C"], events=[False, True, False])
        self.assertEqual(handled, ["CTRL_C"])
        self.assertEqual(len(renders), 2)

    def test_crlf_is_one_enter(self) -> None:
        _terminal, handled, _renders = self._run(["ENTER_CR", "ENTER_LF", "ENTER_LF", "CTRL_C"])
        self.assertEqual(handled, ["ENTER", "ENTER", "CTRL_C"])

    def test_keyboard_interrupt_quits(self) -> None:
        _terminal, handled, _renders = self._run([KeyboardInterrupt()])
        self.assertEqual(handled, ["CTRL_C"])


if __name__ == "__main__":
    unittest.main()

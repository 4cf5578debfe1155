"""Tests for the linked job stack and derived relative paths."""

from __future__ import annotations

import unittest

from gut.jobs import DirEntry, Job, JobStack


class JobStackTests(unittest.TestCase):
    def test_empty_stack_peeks_and_pops_none(self) -> None:
        stack = JobStack()
        self.assertIsNone(stack.peek())
        self.assertIsNone(stack.pop())
        self.assertFalse(stack)
        self.assertEqual(len(stack), 0)

    def test_listing_order_is_reversed_on_pop(self) -> None:
        stack = JobStack()
        for name in ("a", "b", "c"):
            stack.push(DirEntry(name=name, is_dir=False))

        popped = [stack.pop().entry_name for _ in range(3)]

        self.assertEqual(popped, ["c", "b", "a"])
        self.assertFalse(stack)

    def test_pop_discards_only_the_top_job(self) -> None:
        stack = JobStack()
        stack.push(DirEntry(name="lower", is_dir=True))
        stack.push(DirEntry(name="upper", is_dir=False))

        stack.pop()

        self.assertEqual(stack.peek().entry_name, "lower")
        self.assertEqual(len(stack), 1)

    def test_push_links_previous_job(self) -> None:
        stack = JobStack()
        first = stack.push(DirEntry(name="first", is_dir=False))
        second = stack.push(DirEntry(name="second", is_dir=False), parent_relative_path="d")

        self.assertIs(second.previous, first)
        self.assertIsNone(first.previous)
        self.assertEqual([job.entry_name for job in stack], ["second", "first"])

    def test_push_job_restores_job_on_current_chain(self) -> None:
        stack = JobStack()
        stack.push(DirEntry(name="sibling", is_dir=False))
        folder = stack.push(DirEntry(name="folder", is_dir=True))
        stack.pop()

        stack.push_job(folder)

        self.assertEqual(stack.peek().relative_path, "folder")
        self.assertEqual(stack.peek().previous.entry_name, "sibling")
        self.assertEqual(len(stack), 2)


class JobRelativePathTests(unittest.TestCase):
    def test_root_level_job_uses_entry_name(self) -> None:
        self.assertEqual(Job(entry_name="a.txt", is_directory=False).relative_path, "a.txt")

    def test_nested_job_joins_parent_path(self) -> None:
        job = Job(entry_name="x.txt", is_directory=False, parent_relative_path="d/e")
        self.assertEqual(job.relative_path, "d/e/x.txt")


if __name__ == "__main__":
    unittest.main()

"""Exception types raised by filesystem operations.

Both kinds are fatal to an interactive session: the engine stores the error,
stops issuing operations, and shows ``str(error)`` to the user.
"""

from __future__ import annotations


class GutError(Exception):
    """Base class for failures tied to one source-relative path."""

    action = "process"

    def __init__(self, relative_path: str, reason: str) -> None:
        self.relative_path = relative_path
        self.reason = reason
        super().__init__(f"cannot {self.action} {relative_path or '.'}: {reason}")


class EnumerationError(GutError):
    """A directory could not be listed (missing, unreadable, not a directory)."""

    action = "read folder"


class CopyError(GutError):
    """A file or subtree could not be copied to the destination."""

    action = "copy"

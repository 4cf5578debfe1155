"""Input-layer public API for key decoding and prompt key handling."""

from .key_registry import KeyBinding, KeyDispatcher
from .keys import PromptKeyCallbacks, build_prompt_dispatcher, handle_prompt_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyDispatcher",
    "PromptKeyCallbacks",
    "build_prompt_dispatcher",
    "handle_prompt_key",
]

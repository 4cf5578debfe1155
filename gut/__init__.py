"""Public package surface for gut.

Exports ``main`` for programmatic CLI invocation.
The traversal engine lives in ``gut.engine``; terminal wiring in ``gut.runtime``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["__version__", "main"]

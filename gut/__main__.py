"""Module entrypoint for ``python -m gut``.

Argument parsing and session setup happen in ``gut.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())

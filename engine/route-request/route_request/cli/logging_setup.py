"""
CLI logging setup for route-request.

Guarantees:
- ALL logging goes to stderr
- stdout is reserved exclusively for the translated request (JSON or pretty)
"""

from __future__ import annotations

import logging
import sys


def setup_cli_logging(*, trace: bool = False, quiet: bool = False) -> None:
    # Remove any handlers already attached (tests call main() repeatedly)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    if trace:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))

    root.setLevel(level)
    root.addHandler(handler)

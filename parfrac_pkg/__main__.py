"""Main entry point for running parfrac_pkg as a module.

This allows running parfrac with:
    python -m parfrac_pkg
    python -m parfrac_pkg --health-check
    python -m parfrac_pkg -e "\\frac{5x + 3}{(x + 2)(x - 2)}"

This is equivalent to running:
    python -m parfrac_pkg.cli
    python parfrac.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())

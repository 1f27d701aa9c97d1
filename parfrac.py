#!/usr/bin/env python3
"""
parfrac - Partial Fraction Decomposition

Main entry point for the parfrac command line. This file serves as a thin
wrapper that delegates all functionality to the parfrac_pkg package.

Usage:
    python parfrac.py                                        # Interactive loop
    python parfrac.py -e "\\frac{5x + 3}{(x + 2)(x - 2)}"    # Solve one expression
    python parfrac.py --help                                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for parfrac.

    Delegates to the parfrac_pkg.cli module, which handles argument parsing,
    decomposition and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from parfrac_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import parfrac_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())

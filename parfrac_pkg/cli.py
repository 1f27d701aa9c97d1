"""Command-line interface for parfrac."""

from __future__ import annotations

import argparse
import sys

from . import config
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .partial_fraction import PartialFraction
from .types import PartialFractionError

logger = get_logger("cli")

EXIT_COMMANDS = {"quit", "exit"}


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running parfrac health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        pf = PartialFraction(r"\frac{5x + 3}{(x + 2)(x - 2)}")
        constants = pf.constants()
        if constants == {"A": 1.75, "B": 3.25}:
            print("[OK] Linear decomposition works")
            checks_passed += 1
        else:
            print(f"[FAIL] Linear decomposition: expected A=1.75, B=3.25, got {constants}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Linear decomposition check failed: {e}")
        checks_failed += 1

    try:
        from .verify import verify_constants

        pf = PartialFraction(r"\frac{2x + 1}{(x^2 + 1)(x^2 + 4)}")
        if verify_constants(pf):
            print("[OK] Quadratic decomposition verified against SymPy")
            checks_passed += 1
        else:
            print("[FAIL] Quadratic decomposition does not match SymPy")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Quadratic verification check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Health check: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def process_expression(expression: str, expand_only: bool = False, verify: bool = False) -> int:
    """Print the LaTeX for one expression. Returns an exit code."""
    try:
        pf = PartialFraction(expression)
        print(pf.expand() if expand_only else pf.solve())
        if verify and not expand_only:
            from .verify import reference_decomposition, verify_constants

            status = "OK" if verify_constants(pf) else "MISMATCH"
            print(f"% verification: {status}")
            reference = reference_decomposition(pf)
            if reference is not None:
                print(f"% sympy: {reference}")
        return 0
    except PartialFractionError as e:
        logger.debug("Rejected %r: %s", expression, e.message, extra={"code": e.code})
        print(f"Error: {e}")
        return 1


def repl_loop(expand_only: bool = False, verify: bool = False) -> int:
    """Read expressions from stdin until quit/exit or end of input."""
    print(f"parfrac {VERSION} - type 'quit' to exit")
    print(f"Example: {config.EXAMPLE_EXPRESSION}")
    while True:
        try:
            line = input(">>> ").strip()
        except EOFError:
            print()
            return 0
        if not line:
            continue
        if line.lower() in EXIT_COMMANDS:
            return 0
        process_expression(line, expand_only=expand_only, verify=verify)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the parfrac CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="parfrac")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Decompose one LaTeX expression and exit (non-interactive)",
        dest="eval_expr",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--solve",
        action="store_true",
        help="Solve the constants and print the integration trace (default)",
    )
    mode.add_argument(
        "--expand",
        action="store_true",
        help="Only print the generic decomposition template",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check solved constants against SymPy",
    )
    parser.add_argument(
        "--lang",
        type=str,
        choices=list(config.SUPPORTED_LANGS),
        help="Language for error messages",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.lang:
        config.LANG = args.lang

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        expression = args.eval_expr.strip()
        if not expression:
            print("Error: Empty input. Please enter a LaTeX fraction.")
            return 1
        return process_expression(expression, expand_only=args.expand, verify=args.verify)
    return repl_loop(expand_only=args.expand, verify=args.verify)


if __name__ == "__main__":
    sys.exit(main_entry())

"""Centralized configuration for parfrac.

This module defines:
- Input validation limits
- Output formatting (precision, message language)
- Verification tolerance for the SymPy cross-check
- Regex patterns for splitting, tokenizing and factorizing

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with PARFRAC_)
"""

import os
import re

from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    standard_transformations,
)

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("parfrac")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("PARFRAC_MAX_INPUT_LENGTH", "10000"))  # characters

# Output configuration
OUTPUT_PRECISION = int(
    os.getenv("PARFRAC_OUTPUT_PRECISION", "10")
)  # significant digits for solved constants
LANG = os.getenv("PARFRAC_LANG", "pt").lower()  # "pt" or "en"
SUPPORTED_LANGS = ("pt", "en")

# Verification
VERIFY_TOLERANCE = float(os.getenv("PARFRAC_VERIFY_TOLERANCE", "1e-9"))
VERIFY_SAMPLE_POINTS = (0.37, 1.91, -2.63, 4.17)

# Shown in the interactive banner
EXAMPLE_EXPRESSION = r"\int \frac{Ax + B}{(x - x_{1})(x - x_{2})} ~\mathrm{d}x"

# SymPy parsing of polynomial text during verification
TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)

WHITESPACE_REGEX = re.compile(r"\s+")

# \frac{A}{B}, single nesting level
FRACTION_REGEX = re.compile(r"\\frac\s*\{([\s\S]*?)\}\s*\{([\s\S]*?)\}")

# Signed numerator term, and the shape of one term:
# sign, optional coefficient, x, optional exponent | sign, constant
TERM_REGEX = re.compile(r"[+\-][^ +\-]+")
TERM_SHAPE_REGEX = re.compile(
    r"([+\-])(?:([\w.]+)?(?:\*?x)(?:\^\{?(\d+)\}?)?|([\w.]+))"
)

# Bracketed denominator factor with optional exponent: (content)^{n}
FACTOR_REGEX = re.compile(r"\(([\s\S]*?)\)(?:\^\s*\{?(\d+)\}?)?")
QUADRATIC_MARKER_REGEX = re.compile(r"x\s*\^")
LINEAR_ROOT_REGEX = re.compile(r"^x([+\-])(.*)$")

# Power of x in a whitespace-free implicit-mode term
POWER_REGEX = re.compile(r"x\^\{?(\d+)\}?")

# Text between bracketed factors: optional signed multiplier, optional bare x^n
OUTSIDE_FACTOR_REGEX = re.compile(r"([+\-]?[\d.]*)(x(?:\^\{?(\d+)\}?)?)?")
MULTIPLICATION_REGEX = re.compile(r"\\cdot|\\times|\*")

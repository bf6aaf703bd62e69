"""
Integer Model

Fixed-width signed integers on top of Python's unbounded int.

Python ints never overflow, so the width is explicit here:
- bounds for each supported width
- representability checks
- two's-complement wraparound
"""

from typing import Tuple

from .errors import OperandRangeError, OperandTypeError

SUPPORTED_WIDTHS = (8, 16, 32, 64)
DEFAULT_WIDTH = 32


def int_bounds(width: int = DEFAULT_WIDTH) -> Tuple[int, int]:
    """
    Return the (min, max) range of a signed integer of the given width.

    Raises:
        ValueError: If the width is not one of SUPPORTED_WIDTHS
    """
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(
            f"Unsupported integer width {width!r}; "
            f"expected one of {SUPPORTED_WIDTHS}"
        )
    half = 1 << (width - 1)
    return -half, half - 1


INT32_MIN, INT32_MAX = int_bounds(32)


def is_representable(value: int, width: int = DEFAULT_WIDTH) -> bool:
    """Check whether value fits in a signed integer of the given width."""
    low, high = int_bounds(width)
    return low <= value <= high


def wrap(value: int, width: int = DEFAULT_WIDTH) -> int:
    """
    Reduce value into the signed range using two's-complement wraparound.

    Example:
        wrap(INT32_MAX + 1) -> INT32_MIN
    """
    low, _ = int_bounds(width)
    modulus = 1 << width
    return (value - low) % modulus + low


def ensure_operand(value, width: int = DEFAULT_WIDTH, name: str = "operand") -> int:
    """
    Validate a single operand and return it unchanged.

    bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandTypeError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    if not is_representable(value, width):
        low, high = int_bounds(width)
        raise OperandRangeError(
            f"{name}={value} is outside the {width}-bit range [{low}, {high}]"
        )
    return value

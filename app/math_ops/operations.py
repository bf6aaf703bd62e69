"""
Operations Module

Addition over fixed-width signed integers:
- add: 32-bit, wraps like native int arithmetic
- checked_add: raises instead of wrapping
- Adder: width and overflow policy taken from Config
"""

import logging
from typing import Optional, Tuple

from .config import OVERFLOW_POLICIES, Config
from .errors import IntegerOverflowError
from .integers import (
    DEFAULT_WIDTH,
    ensure_operand,
    int_bounds,
    is_representable,
    wrap,
)

logger = logging.getLogger(__name__)


def add(a: int, b: int) -> int:
    """
    Add two integers.

    Args:
        a: First addend
        b: Second addend

    Returns:
        The sum of a and b, wrapped into the 32-bit signed range
    """
    ensure_operand(a, DEFAULT_WIDTH, "a")
    ensure_operand(b, DEFAULT_WIDTH, "b")
    return wrap(a + b, DEFAULT_WIDTH)


def checked_add(a: int, b: int, width: int = DEFAULT_WIDTH) -> int:
    """
    Add two integers, refusing to wrap.

    Raises:
        IntegerOverflowError: If the sum does not fit in width bits
    """
    ensure_operand(a, width, "a")
    ensure_operand(b, width, "b")
    total = a + b
    if not is_representable(total, width):
        raise IntegerOverflowError(a, b, width)
    return total


class Adder:
    """
    Adds integers of a configured width under a configured overflow policy.

    Usage:
        adder = Adder.from_config(load_config())
        adder.add(3, 3)
    """

    def __init__(self, width: int = DEFAULT_WIDTH, overflow: str = "wrap"):
        if overflow not in OVERFLOW_POLICIES:
            raise ValueError(
                f"overflow must be one of: {', '.join(OVERFLOW_POLICIES)}"
            )
        self._bounds = int_bounds(width)
        self._width = width
        self._overflow = overflow

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "Adder":
        """Build an Adder from a Config (defaults when None)."""
        config = config or Config()
        return cls(width=config.int_width, overflow=config.overflow)

    @property
    def width(self) -> int:
        return self._width

    @property
    def overflow(self) -> str:
        return self._overflow

    @property
    def bounds(self) -> Tuple[int, int]:
        """(min, max) of the configured width."""
        return self._bounds

    def add(self, a: int, b: int) -> int:
        """Add a and b under this adder's width and overflow policy."""
        ensure_operand(a, self._width, "a")
        ensure_operand(b, self._width, "b")
        total = a + b

        if is_representable(total, self._width):
            return total

        if self._overflow == "check":
            logger.warning(
                f"Overflow: {a} + {b} exceeds {self._width}-bit range {self._bounds}"
            )
            raise IntegerOverflowError(a, b, self._width)

        result = wrap(total, self._width)
        logger.debug(f"Wrapped {a} + {b} to {result} ({self._width}-bit)")
        return result

    def __repr__(self) -> str:
        return f"Adder(width={self._width}, overflow={self._overflow!r})"

#!/usr/bin/env python3
"""
Add Calculator Demo

Run with:
    python app/add_calculator.py

Width and overflow policy come from MATH_OPS_INT_WIDTH / MATH_OPS_OVERFLOW.
"""

import sys
import os

# Add app/ to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from math_ops import Adder, IntegerOverflowError, load_config
from math_ops.integers import is_representable
from math_ops.logging_config import get_logger, setup_logging_from_config

logger = get_logger("add_calculator")


def main():
    """Print a handful of additions with the configured Adder."""
    config = load_config()
    setup_logging_from_config(config)

    adder = Adder.from_config(config)
    low, high = adder.bounds
    logger.info(f"Using {adder!r}")

    print("Add Calculator")
    print("=" * 30)
    print(f"{adder.width}-bit signed, overflow={adder.overflow}")
    print(f"Range: [{low}, {high}]")
    print()

    examples = [
        (3, 3),
        (-2, 2),
        (0, 0),
        (100, 200),
        (-100, -200),
        (high - 1, 1),
        (high, 1),
    ]
    for a, b in examples:
        # Operands wider than the configured type are not valid input
        if not (is_representable(a, adder.width) and is_representable(b, adder.width)):
            print(f"add({a}, {b}) skipped: operands outside {adder.width}-bit range")
            continue
        try:
            print(f"add({a}, {b}) = {adder.add(a, b)}")
        except IntegerOverflowError as e:
            print(f"add({a}, {b}) -> error: {e}")


if __name__ == "__main__":
    main()

"""
math_ops - Fixed-width integer addition

This package contains:
- operations: add, checked_add and the configurable Adder
- integers: signed integer bounds and wraparound
- errors: exception hierarchy
- config: configuration loading
- logging_config: logging setup
"""

from .config import Config, load_config
from .errors import (
    IntegerOverflowError,
    MathOpsError,
    OperandRangeError,
    OperandTypeError,
)
from .integers import INT32_MAX, INT32_MIN
from .operations import Adder, add, checked_add

__version__ = "0.1.0"
__all__ = [
    "Adder",
    "Config",
    "INT32_MAX",
    "INT32_MIN",
    "IntegerOverflowError",
    "MathOpsError",
    "OperandRangeError",
    "OperandTypeError",
    "add",
    "checked_add",
    "load_config",
]

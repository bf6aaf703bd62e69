"""
Custom exceptions for math_ops.
"""


class MathOpsError(Exception):
    """Base exception for math_ops errors."""
    pass


class OperandTypeError(MathOpsError, TypeError):
    """Raised when an operand is not an int."""
    pass


class OperandRangeError(MathOpsError, ValueError):
    """Raised when an operand does not fit the integer width."""
    pass


class IntegerOverflowError(MathOpsError, ArithmeticError):
    """Raised by checked addition when the sum is not representable."""

    def __init__(self, a: int, b: int, width: int):
        self.a = a
        self.b = b
        self.width = width
        super().__init__(f"{a} + {b} overflows a {width}-bit signed integer")

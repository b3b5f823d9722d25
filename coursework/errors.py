"""
Exception types for the coursework components.

Both subclass ValueError so callers that already guard input validation
with ``except ValueError`` keep working.
"""
from typing import Optional


class InvalidDigitError(ValueError):
    """A digit sequence contains a value outside ``[0, base)``."""

    def __init__(self, digit, base: int, position: int, operand: Optional[str] = None):
        self.digit = digit
        self.base = base
        self.position = position
        self.operand = operand
        where = f"{operand}[{position}]" if operand else f"position {position}"
        super().__init__(f"Invalid digit {digit!r} at {where} for base {base}")


class NullComparisonError(ValueError):
    """A strict ``DynamicArray.index`` scan reached an absent slot."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Cannot compare against absent slot at position {position}")

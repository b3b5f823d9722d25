"""
Grade-school arithmetic on digit sequences.

This module provides functions for:
- Long multiplication of digit arrays in an arbitrary base
- Converting between integers and digit arrays

Digit arrays are plain lists of ints, most-significant digit first.
"""

import logging
from typing import List, Optional, Sequence

from .errors import InvalidDigitError


logger = logging.getLogger(__name__)

DEFAULT_BASE = 10


def _check_base(base: int) -> None:
    if not isinstance(base, int) or base < 2:
        raise ValueError(f"Base must be an integer >= 2: {base!r}")


def validate_digits(digits: Sequence[int], base: int = DEFAULT_BASE,
                    operand: Optional[str] = None) -> None:
    """
    Check that every digit is an int in ``[0, base)``.

    Args:
        digits: Digit sequence to check
        base: Number base
        operand: Optional operand name used in the error message

    Raises:
        InvalidDigitError: On the first out-of-range or non-integer digit
    """
    for position, digit in enumerate(digits):
        # bool is an int subclass but never a meaningful digit
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < base:
            raise InvalidDigitError(digit, base, position, operand)


def multiply(x: Sequence[int], y: Sequence[int], base: int = DEFAULT_BASE) -> List[int]:
    """
    Multiply two numbers given as digit arrays using schoolbook multiplication.

    Each digit pair is multiplied from the least significant end, the low
    part of the partial sum stays in ``result[i + j + 1]`` and the carry is
    accumulated into ``result[i + j]``.

    Args:
        x: Digits of the first number, most significant first
        y: Digits of the second number, most significant first
        base: Number base (default: 10)

    Returns:
        Digits of the product with leading zeros removed (zero is ``[0]``)

    Raises:
        ValueError: If base is less than 2
        InvalidDigitError: If any digit is outside ``[0, base)``

    Example:
        >>> multiply([1, 2, 3], [4, 5, 6])
        [5, 6, 0, 8, 8]
        >>> multiply([1, 1], [1, 1], base=2)
        [1, 0, 0, 1]
    """
    _check_base(base)
    validate_digits(x, base, operand="x")
    validate_digits(y, base, operand="y")

    x_len = len(x)
    y_len = len(y)
    logger.debug("Multiplying %d-digit by %d-digit number in base %d", x_len, y_len, base)

    # Product of an m-digit and n-digit number has at most m + n digits
    result = [0] * (x_len + y_len)

    for i in range(x_len - 1, -1, -1):
        for j in range(y_len - 1, -1, -1):
            partial = x[i] * y[j] + result[i + j + 1]
            result[i + j + 1] = partial % base
            result[i + j] += partial // base

    # Two empty operands leave nothing to trim
    if not result:
        return [0]

    start = 0
    while start < len(result) - 1 and result[start] == 0:
        start += 1

    return result[start:]


def to_digits(value: int, base: int = DEFAULT_BASE) -> List[int]:
    """
    Convert a non-negative integer to its digit array.

    Example:
        >>> to_digits(56088)
        [5, 6, 0, 8, 8]
        >>> to_digits(0)
        [0]
    """
    _check_base(base)
    if value < 0:
        raise ValueError(f"Value must be non-negative: {value}")

    if value == 0:
        return [0]

    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(digit)
    digits.reverse()
    return digits


def from_digits(digits: Sequence[int], base: int = DEFAULT_BASE) -> int:
    """
    Convert a digit array back to an integer.

    An empty sequence decodes to 0.

    Raises:
        InvalidDigitError: If any digit is outside ``[0, base)``
    """
    _check_base(base)
    validate_digits(digits, base)

    value = 0
    for digit in digits:
        value = value * base + digit
    return value

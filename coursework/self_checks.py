"""
Driver self-checks for the multiplier and the dynamic array.

Each suite returns a list of (label, passed) pairs that the entry scripts
print through UserOutput.check_summary().
"""

import logging
from typing import Callable, List, Tuple

from .digit_math import multiply
from .dynamic_array import DynamicArray
from .errors import InvalidDigitError, NullComparisonError

logger = logging.getLogger(__name__)

CheckResult = Tuple[str, bool]

TEST_DATA = ["Java", "Python", "C", "C++", "Fortran"]
NON_EXISTING = "COBOL"


def _run(label: str, check: Callable[[], bool]) -> CheckResult:
    """Evaluate one check; an unexpected exception counts as a failure."""
    try:
        passed = bool(check())
    except Exception as e:
        logger.error("Check %r raised %s: %s", label, type(e).__name__, e)
        passed = False
    return label, passed


def _raises(exc_type, func: Callable[[], object]) -> bool:
    try:
        func()
    except exc_type:
        return True
    return False


def run_multiply_checks() -> List[CheckResult]:
    """Checks for multiply(), starting with the 123 x 456 demo operands."""
    return [
        _run("multiply(123, 456)", lambda: multiply([1, 2, 3], [4, 5, 6]) == [5, 6, 0, 8, 8]),
        _run("multiply by zero", lambda: multiply([0], [9, 9, 9]) == [0]),
        _run("multiply(empty, empty)", lambda: multiply([], []) == [0]),
        _run("multiply with one empty operand", lambda: multiply([], [4, 2]) == [0]),
        _run("multiply in base 2", lambda: multiply([1, 1], [1, 1], base=2) == [1, 0, 0, 1]),
        _run("multiply in base 16", lambda: multiply([15, 15], [15, 15], base=16) == [15, 14, 0, 1]),
        _run("multiply no leading zeros", lambda: multiply([0, 0, 1], [0, 2]) == [2]),
        _run("multiply(invalid digit)",
             lambda: _raises(InvalidDigitError, lambda: multiply([1, 10], [2]))),
    ]


def run_array_checks() -> List[CheckResult]:
    """
    Checks for DynamicArray.

    Mirrors the classroom driver program: a container seeded with five
    language names, exercised with contains/get/remove, then grown with inserts.
    """
    results: List[CheckResult] = []

    test = DynamicArray.from_data(TEST_DATA)
    empty = DynamicArray.from_data(None)

    results.append(_run("contains(null)", lambda: not test.contains(None)))
    results.append(_run("contains on empty data", lambda: not empty.contains("Java")))
    results.append(_run("contains (existing)", lambda: test.contains(TEST_DATA[1])))
    results.append(_run("contains (non existing)", lambda: not test.contains(NON_EXISTING)))
    results.append(_run("get(-1)", lambda: test.get(-1) is None))
    results.append(_run("get(0)", lambda: test.get(0) == TEST_DATA[0]))
    results.append(_run("get(out of bounds)", lambda: test.get(len(TEST_DATA) + 1) is None))
    results.append(_run("index(C++)", lambda: test.index("C++") == 3))
    results.append(_run("usage (full)", lambda: test.usage() == 100.0))
    results.append(_run("format", lambda: str(test) == "[Java, Python, C, C++, Fortran]"))

    # Removal compacts, so the second remove(1) sees what used to be at 2
    results.append(_run("remove(1)", lambda: test.remove(1) == TEST_DATA[1]))
    results.append(_run("remove(1) after shift", lambda: test.remove(1) == TEST_DATA[2]))
    results.append(_run("remove(out of bounds)", lambda: test.remove(len(TEST_DATA) + 1) is None))
    results.append(_run("remove on empty data", lambda: empty.remove(0) is None))

    def insert_after_removals() -> bool:
        test.insert("Pascal")
        test.insert("Basic")
        test.insert("Lisp")
        return (str(test) == "[Java, C++, Fortran, Pascal, Basic, Lisp]"
                and test.capacity == 6 and test.occupancy == 6)

    results.append(_run("insert grows by one", insert_after_removals))

    def insert_null() -> bool:
        array = DynamicArray()
        array.insert(None)
        return array.occupancy == 0 and array.capacity == 4

    results.append(_run("insert(null)", insert_null))

    def strict_index() -> bool:
        array = DynamicArray(strict_index=True)
        array.insert("Java")
        return _raises(NullComparisonError, lambda: array.index("Java"))

    results.append(_run("strict index on empty slot", strict_index))

    return results

"""
Dynamic array of strings built on a fixed-size backing list.

Objects of this class store strings in a list that grows to match the
demand for storage. The container can be created with any capacity;
otherwise it starts with room for DEFAULT_CAPACITY strings:

    da1 = DynamicArray(10)   # room for 10 strings
    da2 = DynamicArray()     # room for 4 strings

The backing list grows by exactly one slot each time an insert finds it
full, so filling a container from empty costs O(N^2) copies.
"""

import logging
import math
from typing import Iterable, List, Optional

from .errors import NullComparisonError


logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 4


class DynamicArray:
    """
    Resizable array of optional strings with occupancy tracking.

    Slots ``[0, occupancy)`` hold the stored strings, slots
    ``[occupancy, capacity)`` are None. Note that operations do not all
    look at the same range: ``contains`` and ``remove`` stop at occupancy,
    while ``get``, ``index``, ``usage`` and ``str()`` cover the whole
    capacity.

    Not thread-safe. Callers sharing an instance between threads must
    serialize access themselves.
    """

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY, strict_index: bool = False):
        """
        Create an empty array.

        Args:
            capacity: Initial number of slots; values <= 0 (or None) fall
                back to DEFAULT_CAPACITY
            strict_index: If True, index() raises NullComparisonError when
                it scans an absent slot instead of skipping it
        """
        if capacity is None or capacity <= 0:
            capacity = DEFAULT_CAPACITY
        self._foundation: List[Optional[str]] = [None] * capacity
        self._occupancy = 0
        self.strict_index = strict_index

    @classmethod
    def from_data(cls, data: Optional[Iterable[Optional[str]]],
                  strict_index: bool = False) -> 'DynamicArray':
        """
        Create an array pre-seeded with data.

        The backing list is a copy of ``data``, so later changes to the
        caller's list do not leak into the array. Occupancy is set to the
        full length of ``data``. Passing None gives an empty array of
        default capacity.
        """
        array = cls(DEFAULT_CAPACITY, strict_index=strict_index)
        if data is not None:
            array._foundation = list(data)
            array._occupancy = len(array._foundation)
        return array

    @property
    def capacity(self) -> int:
        """Number of slots in the backing list."""
        return len(self._foundation)

    @property
    def occupancy(self) -> int:
        """Number of leading slots in use."""
        return self._occupancy

    def __len__(self) -> int:
        return self._occupancy

    def __contains__(self, target) -> bool:
        return self.contains(target)

    def contains(self, target: Optional[str]) -> bool:
        """
        Check if target is stored in the occupied part of the array.

        Returns:
            True if found, False otherwise (always False for a None target)
        """
        if target is None:
            return False

        for i in range(self._occupancy):
            if self._foundation[i] is not None and self._foundation[i] == target:
                return True
        return False

    def get(self, index: int) -> Optional[str]:
        """
        Return the slot at index, or None if index is outside the capacity.

        Slots past occupancy are readable and hold None.
        """
        if 0 <= index < len(self._foundation):
            return self._foundation[index]
        return None

    def remove(self, index: int) -> Optional[str]:
        """
        Remove and return the string at index, compacting the array.

        Every slot after index up to occupancy moves one position to the
        left and the previously last occupied slot is cleared.

        Returns:
            The removed value, or None if index is invalid or the array is
            empty. A slot that was already None also returns None.
        """
        if self._occupancy == 0 or not 0 <= index < len(self._foundation):
            return None

        removed = self._foundation[index]
        self._foundation[index] = None
        for i in range(index, self._occupancy - 1):
            self._foundation[i] = self._foundation[i + 1]
        self._foundation[self._occupancy - 1] = None
        self._occupancy -= 1
        return removed

    def delete(self, index: int) -> None:
        """Remove the string at index, discarding it."""
        self.remove(index)

    def _resize(self) -> None:
        """Grow the backing list by one slot, copying only occupied slots."""
        old_capacity = len(self._foundation)
        temp: List[Optional[str]] = [None] * (old_capacity + 1)
        for i in range(self._occupancy):
            temp[i] = self._foundation[i]
        self._foundation = temp
        logger.debug("Resized backing storage from %d to %d slots", old_capacity, old_capacity + 1)

    def insert(self, value: Optional[str]) -> None:
        """
        Append value after the last occupied slot.

        None is ignored. If the backing list is full it grows by one slot
        first.
        """
        if value is None:
            return

        if self._occupancy == len(self._foundation):
            self._resize()
        self._foundation[self._occupancy] = value
        self._occupancy += 1

    def index(self, value: Optional[str]) -> int:
        """
        Return the position of the first slot equal to value, or -1.

        The whole backing list is scanned, not just the occupied part.
        Absent slots are skipped unless ``strict_index`` is set, in which
        case the first absent slot raises NullComparisonError.
        """
        position = -1
        for i, slot in enumerate(self._foundation):
            if slot is None:
                if self.strict_index:
                    raise NullComparisonError(i)
                continue
            if position == -1 and slot == value:
                position = i
        return position

    def usage(self) -> float:
        """
        Percentage of slots across the full capacity that hold a value.

        Rounded half-up to two decimals; an array with no slots reports 0.0.
        """
        if not self._foundation:
            return 0.0
        count = sum(1 for slot in self._foundation if slot is not None)
        percentage = count / len(self._foundation) * 100
        return math.floor(percentage * 100.0 + 0.5) / 100.0

    def __str__(self) -> str:
        return "[" + ", ".join("null" if slot is None else slot for slot in self._foundation) + "]"

    def __repr__(self) -> str:
        return (f"DynamicArray(capacity={len(self._foundation)}, "
                f"occupancy={self._occupancy}, data={self})")

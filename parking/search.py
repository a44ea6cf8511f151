"""Linear and binary search over vehicle records by ID."""

from typing import Optional, Sequence

from .vehicle import Vehicle


class PreconditionError(Exception):
    """An operation was attempted in a store state that does not allow it."""


def linear_search(records: Sequence[Vehicle], vehicle_id: int) -> Optional[Vehicle]:
    """Scan records in order and return the first with a matching ID."""
    for record in records:
        if record.id == vehicle_id:
            return record
    return None


def binary_search(records: Sequence[Vehicle], vehicle_id: int) -> Optional[Vehicle]:
    """
    Halving search over records already ascending by ID.

    Compares the midpoint ID to the target: equal returns it, smaller
    searches the upper half, larger the lower half. Returns None once
    the bounds cross.
    """
    left, right = 0, len(records) - 1
    while left <= right:
        mid = left + (right - left) // 2
        mid_id = records[mid].id
        if mid_id == vehicle_id:
            return records[mid]
        if mid_id < vehicle_id:
            left = mid + 1
        else:
            right = mid - 1
    return None

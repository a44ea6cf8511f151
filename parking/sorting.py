"""
In-place sorts over a list of vehicle records.

Each sort reorders the list it is given; records themselves are never
modified.
"""

from typing import Any, Callable, List

from .vehicle import Vehicle

SortKey = Callable[[Vehicle], Any]


def bubble_sort(records: List[Vehicle], key: SortKey) -> None:
    """
    Repeated adjacent-swap passes until a full pass makes no swap.

    After each pass the largest remaining element has settled at the end,
    so the next pass stops one position earlier.
    """
    end = len(records)
    swapped = True
    while swapped and end > 1:
        swapped = False
        for i in range(end - 1):
            if key(records[i]) > key(records[i + 1]):
                records[i], records[i + 1] = records[i + 1], records[i]
                swapped = True
        end -= 1


def selection_sort(records: List[Vehicle], key: SortKey) -> None:
    """
    Swap the minimum of the unsorted suffix into each position.

    Only a strictly smaller key replaces the current minimum, so among equal
    keys the first encountered wins.
    """
    for i in range(len(records) - 1):
        min_index = i
        for j in range(i + 1, len(records)):
            if key(records[j]) < key(records[min_index]):
                min_index = j
        if min_index != i:
            records[i], records[min_index] = records[min_index], records[i]


def insertion_sort(records: List[Vehicle], key: SortKey) -> None:
    """
    Build a new ordering by inserting each record into a sorted accumulator.

    Works from a snapshot of the input, then replaces the list contents.
    Equal keys are inserted after existing ones, so the sort is stable.
    """
    ordered: List[Vehicle] = []
    for record in list(records):
        position = len(ordered)
        while position > 0 and key(ordered[position - 1]) > key(record):
            position -= 1
        ordered.insert(position, record)
    records[:] = ordered

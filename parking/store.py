"""VehicleStore - the in-memory collection of parked vehicles."""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .loader import load_vehicles, save_vehicles
from .search import PreconditionError, binary_search, linear_search
from .sorting import bubble_sort, insertion_sort, selection_sort
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


class DuplicateIdError(ValueError):
    """A vehicle ID is not positive or is already in the store."""


class VehicleStore:
    """
    Ordered collection of vehicle records.

    Tracks whether the current order is ascending by ID, which binary
    search requires. Adding, deleting, loading or sorting by anything
    other than ID clears the flag.
    """

    def __init__(self, vehicles: Optional[List[Vehicle]] = None):
        self._records: List[Vehicle] = []
        self._sorted_by_id = False
        for vehicle in vehicles or []:
            self.add(vehicle)

    @property
    def sorted_by_id(self) -> bool:
        """True iff iteration order is currently ascending by ID."""
        return self._sorted_by_id

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self.all())

    def all(self) -> List[Vehicle]:
        """Snapshot of the records in current order."""
        return list(self._records)

    def ids(self) -> List[int]:
        return [v.id for v in self._records]

    def is_unique_id(self, vehicle_id: int) -> bool:
        """True iff the ID is positive and not used by any record."""
        if vehicle_id <= 0:
            return False
        return all(v.id != vehicle_id for v in self._records)

    def is_plate_duplicate(self, plate: str) -> bool:
        """True iff any record already has this plate."""
        return any(v.plate == plate for v in self._records)

    def add(self, vehicle: Vehicle) -> None:
        """Prepend a vehicle. Duplicate plates are allowed but logged."""
        if not self.is_unique_id(vehicle.id):
            raise DuplicateIdError(f"Duplicate or invalid ID {vehicle.id}. Must be unique!")
        if self.is_plate_duplicate(vehicle.plate):
            logger.warning("Plate number %s already exists.", vehicle.plate)
        self._records.insert(0, vehicle)
        self._sorted_by_id = False

    def delete(self, vehicle_id: int) -> bool:
        """Remove the first record with this ID. Returns False if none matched."""
        for index, vehicle in enumerate(self._records):
            if vehicle.id == vehicle_id:
                del self._records[index]
                self._sorted_by_id = False
                return True
        return False

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def require_sorted_by_id(self) -> None:
        """Raise PreconditionError unless the store is currently sorted by ID."""
        if not self._sorted_by_id:
            raise PreconditionError("List must be sorted by ID first")

    def linear_search(self, vehicle_id: int) -> Optional[Vehicle]:
        """Find a vehicle by ID in any order."""
        return linear_search(self._records, vehicle_id)

    def binary_search(self, vehicle_id: int) -> Optional[Vehicle]:
        """
        Find a vehicle by ID using binary search.

        Raises:
            PreconditionError: if the store is not currently sorted by ID.
        """
        self.require_sorted_by_id()
        return binary_search(self.all(), vehicle_id)

    # -------------------------------------------------------------------------
    # Sort
    # -------------------------------------------------------------------------

    def bubble_sort_by_id(self) -> None:
        bubble_sort(self._records, key=lambda v: v.id)
        self._sorted_by_id = True

    def selection_sort_by_charge(self) -> None:
        selection_sort(self._records, key=lambda v: v.charge)
        self._sorted_by_id = False

    def insertion_sort_by_duration(self) -> None:
        insertion_sort(self._records, key=lambda v: v.duration_hours)
        self._sorted_by_id = False

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self, filename: Union[str, Path]) -> int:
        """
        Load records from a data file into the store.

        IDs already in the store are skipped. Returns the number of
        records added.
        """
        loaded = load_vehicles(filename, existing_ids=self.ids())
        for vehicle in loaded:
            self._records.insert(0, vehicle)
        self._sorted_by_id = False
        return len(loaded)

    def save(self, filename: Union[str, Path]) -> None:
        """Write all records to a data file, replacing its contents."""
        save_vehicles(filename, self._records)

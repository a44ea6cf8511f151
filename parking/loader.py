"""Text file loading and saving for vehicle records.

Each line holds one record as ``id,plate,type,durationHours,charge``.
There is no header and no escaping, so a plate or type containing a
comma cannot be stored.
"""

import logging
import math
from pathlib import Path
from typing import Iterable, List, Union

from .vehicle import Vehicle

logger = logging.getLogger(__name__)

FIELD_COUNT = 5
ENCODING = "utf-8"


class RecordParseError(ValueError):
    """A data file line could not be turned into a vehicle record."""


def format_line(vehicle: Vehicle) -> str:
    """Serialize a vehicle to one data line (no trailing newline)."""
    return (
        f"{vehicle.id},{vehicle.plate},{vehicle.vehicle_type},"
        f"{vehicle.duration_hours:.2f},{vehicle.charge:.2f}"
    )


def decode_line(raw: bytes) -> str:
    """Decode one raw data line; undecodable bytes make the line invalid."""
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise RecordParseError(f"not valid {ENCODING} text at byte {e.start}")


def parse_line(line: str) -> Vehicle:
    """
    Parse one data line into a vehicle.

    The stored charge is kept as-is rather than recomputed.

    Raises:
        RecordParseError: wrong field count, non-numeric fields, or
            out-of-range values.
    """
    fields = line.rstrip("\r\n").split(",")
    if len(fields) != FIELD_COUNT:
        raise RecordParseError(f"expected {FIELD_COUNT} fields, got {len(fields)}")
    raw_id, plate, vehicle_type, raw_duration, raw_charge = fields

    try:
        vehicle_id = int(raw_id)
    except ValueError:
        raise RecordParseError(f"invalid ID '{raw_id}'")
    try:
        duration = float(raw_duration)
        charge = float(raw_charge)
    except ValueError:
        raise RecordParseError("invalid duration or charge")

    if vehicle_id <= 0:
        raise RecordParseError(f"ID {vehicle_id} is not positive")
    if not (math.isfinite(duration) and math.isfinite(charge)):
        raise RecordParseError("duration and charge must be finite numbers")
    if duration <= 0:
        raise RecordParseError(f"duration {raw_duration} is not positive")
    if charge < 0:
        raise RecordParseError(f"charge {raw_charge} is negative")

    return Vehicle(vehicle_id, plate, vehicle_type, duration, charge)


def load_vehicles(
    filename: Union[str, Path], existing_ids: Iterable[int] = ()
) -> List[Vehicle]:
    """
    Load vehicles from a data file, in file order.

    A missing file means "start empty" and returns an empty list. Malformed
    lines and lines whose ID was already loaded (or is in existing_ids) are
    skipped with a warning.
    """
    path = Path(filename)
    if not path.exists():
        return []

    seen = set(existing_ids)
    vehicles = []
    with open(path, "rb") as fp:
        for line_no, raw in enumerate(fp, start=1):
            if not raw.strip():
                continue
            try:
                vehicle = parse_line(decode_line(raw))
            except RecordParseError as e:
                logger.warning("Skipping invalid line %d in file: %s", line_no, e)
                continue
            if vehicle.id in seen:
                logger.warning("Skipping duplicate ID %d from file.", vehicle.id)
                continue
            seen.add(vehicle.id)
            vehicles.append(vehicle)
    return vehicles


def save_vehicles(filename: Union[str, Path], vehicles: Iterable[Vehicle]) -> None:
    """Write vehicles to a data file, overwriting any existing content."""
    with open(filename, "w", encoding=ENCODING) as fp:
        for vehicle in vehicles:
            fp.write(format_line(vehicle) + "\n")

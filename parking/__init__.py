"""
Parked vehicle tracking.

This package provides the record store and its operations:
- VehicleType: Recognized vehicle categories (car, bike, truck)
- Vehicle: Immutable parked vehicle record with its charge
- VehicleStore: Ordered in-memory collection with search and sort
- compute_charge: Hourly rate x duration
- summarize: Dashboard totals
- load_vehicles / save_vehicles: Flat text file persistence
- load_config: YAML configuration
"""

from .vehicle_type import VehicleType
from .charges import DEFAULT_RATES, compute_charge, rate_for
from .vehicle import Vehicle
from .search import PreconditionError, linear_search, binary_search
from .sorting import bubble_sort, selection_sort, insertion_sort
from .loader import RecordParseError, load_vehicles, save_vehicles, format_line, parse_line
from .store import DuplicateIdError, VehicleStore
from .dashboard import Summary, summarize
from .auth import StaticCredentials
from .config import Config, ConfigError, load_config

__all__ = [
    "VehicleType",
    "DEFAULT_RATES",
    "compute_charge",
    "rate_for",
    "Vehicle",
    "PreconditionError",
    "linear_search",
    "binary_search",
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "RecordParseError",
    "load_vehicles",
    "save_vehicles",
    "format_line",
    "parse_line",
    "DuplicateIdError",
    "VehicleStore",
    "Summary",
    "summarize",
    "StaticCredentials",
    "Config",
    "ConfigError",
    "load_config",
]

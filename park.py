#!/usr/bin/env python3
"""
Interactive console for tracking parked vehicles.

After logging in, the vehicle list is loaded from the data file and a
numbered menu is shown:
  1  Add Vehicle
  2  Display Vehicles
  3  Linear Search
  4  Binary Search (requires option 5 first)
  5  Sort by ID (Bubble Sort)
  6  Sort by Charge (Selection Sort)
  7  Sort by Duration (Insertion Sort)
  8  Delete Vehicle
  9  Save Data
  10 Exit
"""

import argparse
import logging
import math
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from parking import (
    Config,
    ConfigError,
    PreconditionError,
    Summary,
    Vehicle,
    VehicleStore,
    load_config,
    summarize,
)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_money(amount: float) -> str:
    """Format a charge for display."""
    return f"${amount:,.2f}"


def format_hours(hours: float) -> str:
    """Format a parking duration for display."""
    return f"{hours:.2f} hrs"


def make_vehicle_table(vehicles: List[Vehicle]) -> List[List[str]]:
    """Convert vehicles to table rows, numbered in current order."""
    rows = []
    for index, vehicle in enumerate(vehicles, start=1):
        rows.append(
            [
                str(index),
                str(vehicle.id),
                vehicle.plate,
                vehicle.vehicle_type,
                format_hours(vehicle.duration_hours),
                format_money(vehicle.charge),
            ]
        )
    return rows


VEHICLE_HEADERS = ["#", "ID", "Plate Number", "Type", "Duration", "Charge"]


def make_summary_lines(summary: Summary) -> List[str]:
    """Dashboard summary as display lines."""
    counts = summary.count_by_type
    return [
        f"Total Vehicles: {summary.total}",
        f"Total Income: {format_money(summary.total_charge)}",
        f"Average Charge: {format_money(summary.average_charge)}",
        f"Cars: {counts['car']} | Bikes: {counts['bike']} | Trucks: {counts['truck']}",
    ]


def print_vehicle(vehicle: Vehicle) -> None:
    print(f"ID: {vehicle.id}")
    print(f"Plate Number: {vehicle.plate}")
    print(f"Type: {vehicle.vehicle_type}")
    print(f"Duration: {format_hours(vehicle.duration_hours)}")
    print(f"Charge: {format_money(vehicle.charge)}")


# =============================================================================
# Input helpers
# =============================================================================


def prompt_positive_int(prompt: str, error: str = "Invalid ID. Enter a positive integer.") -> int:
    """Prompt until a positive integer is entered."""
    while True:
        raw = input(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            print(error)
            continue
        if value <= 0:
            print(error)
            continue
        return value


def prompt_positive_float(
    prompt: str, error: str = "Invalid duration. Enter a positive number."
) -> float:
    """Prompt until a positive number is entered."""
    while True:
        raw = input(prompt).strip()
        try:
            value = float(raw)
        except ValueError:
            print(error)
            continue
        if not math.isfinite(value) or value <= 0:
            print(error)
            continue
        return value


def prompt_text(prompt: str) -> str:
    """Prompt until a non-empty value is entered."""
    while True:
        raw = input(prompt).strip()
        if raw:
            return raw
        print("Value cannot be empty.")


def prompt_choice(prompt: str, low: int, high: int) -> int:
    """Prompt until a number in [low, high] is entered."""
    while True:
        raw = input(prompt).strip()
        try:
            choice = int(raw)
        except ValueError:
            choice = None
        if choice is not None and low <= choice <= high:
            return choice
        print(f"Invalid choice. Enter a number between {low} and {high}.")


# =============================================================================
# Menu commands
# =============================================================================


def cmd_add(store: VehicleStore, config: Config) -> None:
    """Add a vehicle from console input."""
    vehicle_id = prompt_positive_int("Enter ticket ID (positive integer): ")
    if not store.is_unique_id(vehicle_id):
        print("Duplicate ID. Must be unique!")
        return

    plate = prompt_text("Enter plate number: ")
    vehicle_type = prompt_text("Enter vehicle type (Car/Bike/Truck): ")
    duration = prompt_positive_float(
        "Enter parking duration (in hours, e.g., 1.5 for 90 minutes): "
    )

    vehicle = Vehicle.create(vehicle_id, plate, vehicle_type, duration, config.rates)
    store.add(vehicle)
    print(f"Vehicle added successfully! Charge: {format_money(vehicle.charge)}")


def cmd_display(store: VehicleStore, config: Config) -> None:
    """Show all vehicles in current order."""
    print("\n===== Vehicle List =====")
    vehicles = store.all()
    if not vehicles:
        print("No vehicles to display.")
        return
    print(tabulate(make_vehicle_table(vehicles), headers=VEHICLE_HEADERS, tablefmt="simple"))


def cmd_linear_search(store: VehicleStore, config: Config) -> None:
    """Find a vehicle by scanning the list."""
    vehicle_id = prompt_positive_int("Enter ID to search: ")
    vehicle = store.linear_search(vehicle_id)
    if vehicle is None:
        print("Vehicle Not Found!")
        return
    print("Vehicle Found!")
    print_vehicle(vehicle)


def cmd_binary_search(store: VehicleStore, config: Config) -> None:
    """Find a vehicle by binary search; the list must be sorted by ID."""
    try:
        store.require_sorted_by_id()
    except PreconditionError as e:
        print(f"Error: {e} (use option 5)!")
        return
    vehicle_id = prompt_positive_int("Enter ID to search: ")
    if len(store) == 0:
        print("No vehicles to search.")
        return
    vehicle = store.binary_search(vehicle_id)
    if vehicle is None:
        print("Vehicle Not Found!")
        return
    print("Vehicle Found!")
    print_vehicle(vehicle)


def cmd_sort_by_id(store: VehicleStore, config: Config) -> None:
    store.bubble_sort_by_id()
    print("Sorted by ID using Bubble Sort.")


def cmd_sort_by_charge(store: VehicleStore, config: Config) -> None:
    store.selection_sort_by_charge()
    print("Sorted by Charge using Selection Sort.")


def cmd_sort_by_duration(store: VehicleStore, config: Config) -> None:
    store.insertion_sort_by_duration()
    print("Sorted by Duration using Insertion Sort.")


def cmd_delete(store: VehicleStore, config: Config) -> None:
    """Delete a vehicle by ID."""
    vehicle_id = prompt_positive_int("Enter ID to delete: ")
    if store.delete(vehicle_id):
        print("Vehicle deleted successfully!")
    else:
        print("Vehicle not found!")


def cmd_save(store: VehicleStore, config: Config) -> None:
    """Write the vehicle list to the data file."""
    store.save(config.data_file)
    print(f"Data saved to {config.data_file} successfully!")


# Menu number -> (label, handler). The last entry exits.
MENU = {
    1: ("Add Vehicle", cmd_add),
    2: ("Display Vehicles", cmd_display),
    3: ("Linear Search", cmd_linear_search),
    4: ("Binary Search", cmd_binary_search),
    5: ("Sort by ID (Bubble Sort)", cmd_sort_by_id),
    6: ("Sort by Charge (Selection Sort)", cmd_sort_by_charge),
    7: ("Sort by Duration (Insertion Sort)", cmd_sort_by_duration),
    8: ("Delete Vehicle", cmd_delete),
    9: ("Save Data", cmd_save),
    10: ("Exit", None),
}
EXIT_CHOICE = 10


# =============================================================================
# Session
# =============================================================================


def login(authenticator) -> bool:
    """Prompt for credentials and check them with the authenticator."""
    print("Login")
    username = input("Username: ").strip()
    password = input("Password: ").strip()
    return authenticator.check(username, password)


def load_data(store: VehicleStore, data_file: Path) -> None:
    """Load the data file at startup, if there is one."""
    if not data_file.exists():
        print("No existing data file found. Starting fresh.")
        return
    count = store.load(data_file)
    print(f"Data loaded from file successfully! ({count} vehicles)")


def print_dashboard(store: VehicleStore) -> None:
    print("\n==== Dashboard Summary ====")
    for line in make_summary_lines(summarize(store)):
        print(line)


def print_menu() -> None:
    print("\n==============================")
    for number, (label, _) in MENU.items():
        print(f"{number}. {label}")


def run(store: VehicleStore, config: Config) -> None:
    """Menu loop: show dashboard and menu, dispatch until Exit is chosen."""
    while True:
        print_dashboard(store)
        print_menu()
        choice = prompt_choice("Enter your choice: ", 1, EXIT_CHOICE)
        if choice == EXIT_CHOICE:
            print("Exiting...")
            return
        _, handler = MENU[choice]
        handler(store, config)


# =============================================================================
# Main
# =============================================================================


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parking management system",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --data-file lot-a.txt
  %(prog)s --config parking.yaml
""",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file (rates, credentials, data file)",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        help="Path to vehicle data file (default: vehicles.txt)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="Warning: %(message)s", stream=sys.stdout)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    if args.data_file:
        config.data_file = args.data_file

    print("\n==============================")
    print("   Parking Management System")
    print("==============================")

    try:
        if not login(config.authenticator()):
            print("Access Denied!")
            return 0

        store = VehicleStore()
        load_data(store, config.data_file)
        run(store, config)
    except EOFError:
        print("\nExiting...")

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)

#!/usr/bin/env python3
"""
CLI for the vehicle rental core.

Commands:
  fleet - Show the vehicles described by a fleet file
  demo  - Run the demonstration rental sequence against a fleet file
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from tabulate import tabulate
from typing import Iterable, List, Optional, Tuple

from rental import (
    ActivityLog,
    LogSinkError,
    ManualClock,
    Outcome,
    RentalManager,
    VehicleKind,
    load_fleet_config,
)
from rental.activity_log import DEFAULT_LOG_FILE
from rental.vehicles import Vehicle

DEMO_START = datetime(2025, 1, 1, 9, 0)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_amount(amount: Optional[float]) -> str:
    """Format a money amount for display."""
    return f"{amount:,.2f}" if amount is not None else "-"


def format_details(vehicle: Vehicle) -> str:
    """Variant-specific detail column."""
    if vehicle.kind is VehicleKind.TRUCK:
        return f"max {vehicle.max_load_kg:,.0f} kg"
    if vehicle.kind is VehicleKind.ELECTRIC:
        return f"{vehicle.current_charge_kwh:g}/{vehicle.battery_capacity_kwh:g} kWh"
    return f"{vehicle.passenger_capacity} seats"


def format_outcome(outcome: Outcome) -> str:
    """One-line summary of a transaction outcome."""
    if outcome.ok:
        return f"OK {format_amount(outcome.amount)}"
    return f"FAILED {outcome.error}"


def make_fleet_table(vehicles: Iterable[Vehicle]) -> List[List[str]]:
    """Convert vehicles to table rows."""
    rows = []
    for vehicle in vehicles:
        rows.append(
            [
                str(vehicle.vehicle_id),
                vehicle.kind.value,
                vehicle.name,
                format_amount(vehicle.daily_rate),
                format_details(vehicle),
                vehicle.availability.value,
            ]
        )
    return rows


def resolve_log_file(cli_value: Optional[Path], config_value: Optional[str]) -> Path:
    """--log-file, then $RENTAL_LOG_FILE, then the fleet file, then the default."""
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get("RENTAL_LOG_FILE")
    if env_value:
        return Path(env_value)
    return Path(config_value or DEFAULT_LOG_FILE)


# =============================================================================
# Fleet command
# =============================================================================


def cmd_fleet(args):
    """Show the vehicles described by a fleet file."""
    config = load_fleet_config(args.fleet_file)

    print(f"Vehicles: {len(config.vehicles)}")
    print(
        f"Late fee: {format_amount(config.policy.late_fee_per_day)}/day, "
        f"minor damage fee: {format_amount(config.policy.minor_damage_fee)}"
    )
    print()

    if not config.vehicles:
        print("No vehicles found.")
        return 0

    headers = ["ID", "Type", "Name", "Rate", "Details", "Status"]
    print(
        tabulate(
            make_fleet_table(config.vehicles), headers=headers, tablefmt="simple"
        )
    )
    return 0


# =============================================================================
# Demo command
# =============================================================================


def run_demo(manager: RentalManager, clock: ManualClock) -> List[Tuple[str, Outcome]]:
    """
    Drive the demonstration sequence. Expects vehicles 1 (car),
    2 (truck, max 1000 kg) and 3 (EV with a nearly empty battery).
    """
    steps = []
    steps.append(("Rent truck 2 with 1200 kg", manager.rent("memberA", 2, 3, 1200.0)))
    steps.append(("Rent EV 3 with low battery", manager.rent("memberB", 3, 2)))
    steps.append(
        ("Charge EV 3 by 30 kWh", manager.charge_battery(3, 30.0, renter_id="memberB"))
    )
    steps.append(("Rent EV 3 after charging", manager.rent("memberB", 3, 2)))
    steps.append(("Rent car 1 for 1 day", manager.rent("memberC", 1, 1)))
    clock.advance(days=3)
    steps.append(
        ("Return car 1 after 3 days", manager.return_vehicle("memberC", 1, 3, False))
    )
    steps.append(("Rent truck 2 with 500 kg", manager.rent("memberD", 2, 2, 500.0)))
    steps.append(
        ("Return truck 2 damaged", manager.return_vehicle("memberD", 2, 2, True))
    )
    return steps


def cmd_demo(args):
    """Run the demonstration rental sequence."""
    config = load_fleet_config(args.fleet_file)
    log_file = resolve_log_file(args.log_file, config.log_file)
    clock = ManualClock(DEMO_START)

    with ActivityLog(log_file) as log:
        manager = RentalManager(log, clock=clock, policy=config.policy)
        for vehicle in config.vehicles:
            manager.add_vehicle(vehicle)

        print("Fleet:")
        for line in manager.list_fleet():
            print(f"  {line}")
        print()

        rows = [
            [label, format_outcome(outcome)]
            for label, outcome in run_demo(manager, clock)
        ]
        print(tabulate(rows, headers=["Step", "Outcome"], tablefmt="simple"))
        print()

        print("Final fleet:")
        for line in manager.list_fleet():
            print(f"  {line}")

    print()
    print(f"Activity logged to {log_file}")
    return 0


# =============================================================================
# Main
# =============================================================================


def main():
    parser = argparse.ArgumentParser(
        description="Vehicle rental core",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/demo.yaml fleet
  %(prog)s fleets/demo.yaml demo
  %(prog)s fleets/demo.yaml demo --log-file /tmp/rental_log.txt
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("fleet", help="Show the vehicles in the fleet file")

    demo_parser = subparsers.add_parser(
        "demo", help="Run the demonstration rental sequence"
    )
    demo_parser.add_argument(
        "--log-file",
        type=Path,
        help=f"Activity log file (default: $RENTAL_LOG_FILE or {DEFAULT_LOG_FILE})",
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    try:
        if args.command == "fleet":
            return cmd_fleet(args)
        elif args.command == "demo":
            return cmd_demo(args)
    except LogSinkError as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)

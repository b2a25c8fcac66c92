#!/usr/bin/env python3
"""
Check fleet YAML files.

Runs the JSON schema in schema.yaml, then the rules a schema cannot
express across fields and entries:
- vehicle ids are unique within a fleet
- an EV's currentChargeKwh does not exceed its batteryCapacityKwh

Usage:
  validate_yaml.py                 # every file in fleets/
  validate_yaml.py a.yaml b.yaml   # just these
"""

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml
from jsonschema import Draft7Validator

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"
FLEETS_DIR = Path(__file__).parent / "fleets"


def load_schema(path: Path = SCHEMA_PATH) -> dict:
    with open(path) as f:
        return yaml.safe_load(f)


def schema_errors(data: Any, schema: dict) -> List[str]:
    """Every schema violation, as 'path: message', in document order."""
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    return [
        f"{'/'.join(str(p) for p in e.path) or '(root)'}: {e.message}" for e in errors
    ]


def fleet_rule_errors(data: Dict[str, Any]) -> List[str]:
    """Cross-field checks. Assumes the data already passed the schema."""
    vehicles = data.get("vehicles") or []
    errors = []

    counts = Counter(v["id"] for v in vehicles)
    for vehicle_id, count in sorted(counts.items()):
        if count > 1:
            errors.append(f"vehicles: id {vehicle_id} is used {count} times")

    for index, vehicle in enumerate(vehicles):
        capacity = vehicle.get("batteryCapacityKwh")
        charge = vehicle.get("currentChargeKwh")
        if capacity is not None and charge is not None and charge > capacity:
            errors.append(
                f"vehicles/{index}: currentChargeKwh {charge:g} "
                f"exceeds batteryCapacityKwh {capacity:g}"
            )
    return errors


def check_fleet_file(path: Path, schema: dict) -> List[str]:
    """All problems found in one fleet file; empty when it is usable."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Cannot read file: {e}"]

    errors = schema_errors(data, schema)
    if errors:
        return errors
    return fleet_rule_errors(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check fleet YAML files")
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Fleet files to check (default: every file in fleets/)",
    )
    args = parser.parse_args(argv)

    files = args.files or sorted(FLEETS_DIR.glob("*.y*ml"))
    if not files:
        print(f"Warning: No fleet files found in {FLEETS_DIR}")
        return 0

    schema = load_schema()
    failed = 0
    for path in files:
        errors = check_fleet_file(path, schema)
        if errors:
            failed += 1
            print(f"FAIL: {path.name}")
            for error in errors:
                print(f"  {error}")
        else:
            print(f"OK: {path.name}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

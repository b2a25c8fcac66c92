"""YAML loading for fleet configuration files."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .policy import RentalPolicy
from .status import VehicleKind
from .vehicles import Car, ElectricCar, Truck, Vehicle

logger = logging.getLogger(__name__)


@dataclass
class FleetConfig:
    """Everything a fleet file describes."""

    vehicles: List[Vehicle]
    policy: RentalPolicy = field(default_factory=RentalPolicy)
    log_file: Optional[str] = None


def _parse_vehicle(dct: Dict[str, Any]) -> Vehicle:
    try:
        kind = VehicleKind(dct["type"])
    except ValueError:
        raise ValueError(
            f"Unknown vehicle type '{dct['type']}' for id={dct['id']}"
        ) from None

    if kind is VehicleKind.CAR:
        return Car(
            dct["id"],
            dct["name"],
            dct["dailyRate"],
            dct.get("passengerCapacity", 0),
        )
    elif kind is VehicleKind.TRUCK:
        return Truck(dct["id"], dct["name"], dct["dailyRate"], dct["maxLoadKg"])
    return ElectricCar(
        dct["id"],
        dct["name"],
        dct["dailyRate"],
        dct["batteryCapacityKwh"],
        dct.get("currentChargeKwh", dct["batteryCapacityKwh"]),
    )


def _parse_object(
    dct: Dict[str, Any]
) -> Union[Vehicle, RentalPolicy, FleetConfig, dict]:
    """Parse dictionary into appropriate object type."""
    # Vehicle entry
    if "type" in dct and "id" in dct:
        return _parse_vehicle(dct)
    # Policy section
    elif "lateFeePerDay" in dct or "minorDamageFee" in dct:
        defaults = RentalPolicy()
        return RentalPolicy(
            dct.get("lateFeePerDay", defaults.late_fee_per_day),
            dct.get("minorDamageFee", defaults.minor_damage_fee),
        )
    # Top-level fleet file
    elif "vehicles" in dct:
        settings = dct.get("settings") or {}
        policy = dct.get("policy")
        if not isinstance(policy, RentalPolicy):
            policy = RentalPolicy()
        return FleetConfig(dct["vehicles"] or [], policy, settings.get("logFile"))
    else:
        # Return dict as-is for unknown structures (like 'settings')
        return dct


def load_fleet_config(filename: Union[str, Path]) -> FleetConfig:
    """Load a fleet configuration from a YAML file."""
    with open(filename, "rb") as fp:
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), indent=4)
    config = json.loads(json_data, object_hook=_parse_object)
    if not isinstance(config, FleetConfig):
        raise ValueError(f"{filename}: expected a top-level 'vehicles' list")
    logger.debug("Loaded %d vehicles from %s", len(config.vehicles), filename)
    return config

"""
Vehicle rental models.

This package provides the rental transaction core:
- Availability / VehicleKind: vehicle state and variant tags
- Car, Truck, ElectricCar: vehicle variants with cost and start rules
- Fleet: registry owning the vehicles
- Ledger / RentalRecord: active rentals
- RentalManager: rent, return and charge transactions
- ErrorKind / RentalError / Outcome: transaction results
- ActivityLog: append-only activity log
- ManualClock / SystemClock: injectable time sources
"""

from .status import Availability, VehicleKind
from .errors import ErrorKind, RentalError, Outcome, LogSinkError
from .vehicles import Car, Truck, ElectricCar, Vehicle
from .record import RentalRecord
from .fleet import Fleet
from .ledger import Ledger
from .clock import Clock, ManualClock, SystemClock
from .policy import RentalPolicy
from .activity_log import ActivityLog
from .manager import RentalManager
from .calculations import calc_late_days, calc_late_penalty, is_severe_damage
from .loader import FleetConfig, load_fleet_config

__all__ = [
    "Availability",
    "VehicleKind",
    "ErrorKind",
    "RentalError",
    "Outcome",
    "LogSinkError",
    "Car",
    "Truck",
    "ElectricCar",
    "Vehicle",
    "RentalRecord",
    "Fleet",
    "Ledger",
    "Clock",
    "ManualClock",
    "SystemClock",
    "RentalPolicy",
    "ActivityLog",
    "RentalManager",
    "calc_late_days",
    "calc_late_penalty",
    "is_severe_damage",
    "FleetConfig",
    "load_fleet_config",
]

"""Availability and vehicle kind enums."""

from enum import Enum


class Availability(Enum):
    """Whether a vehicle can be rented right now."""

    AVAILABLE = "available"
    RENTED = "rented"


class VehicleKind(Enum):
    """The closed set of vehicle variants in the fleet."""

    CAR = "car"
    TRUCK = "truck"
    ELECTRIC = "electric"

"""Vehicle variants: Car, Truck and ElectricCar."""

import copy
from typing import Optional, Union

from .calculations import (
    calc_base_cost,
    calc_battery_surcharge,
    calc_load_fee,
    min_start_charge,
)
from .errors import ErrorKind, RentalError
from .status import Availability, VehicleKind


class _BaseVehicle:
    """Fields and behaviour shared by every variant."""

    kind: VehicleKind

    def __init__(self, vehicle_id: int, name: str, daily_rate: float):
        if daily_rate < 0:
            raise ValueError(f"Daily rate must be non-negative, got {daily_rate}")
        self._vehicle_id = vehicle_id
        self.name = name
        self.daily_rate = daily_rate
        self.availability = Availability.AVAILABLE

    @property
    def vehicle_id(self) -> int:
        """Identifier, fixed for the vehicle's lifetime."""
        return self._vehicle_id

    @property
    def is_rented(self) -> bool:
        return self.availability is Availability.RENTED

    def cost(self, days: int) -> float:
        return calc_base_cost(self.daily_rate, days)

    def check_start(self) -> Optional[RentalError]:
        """Return an error if the vehicle cannot be started, else None."""
        return None

    def describe(self) -> str:
        return f"[{self.vehicle_id}] {self.name} (rate {self.daily_rate:g})"

    def clone(self):
        """Independent copy with identical state."""
        return copy.copy(self)


class Car(_BaseVehicle):
    """Passenger car. Capacity is informational only."""

    kind = VehicleKind.CAR

    def __init__(
        self, vehicle_id: int, name: str, daily_rate: float, passenger_capacity: int
    ):
        super().__init__(vehicle_id, name, daily_rate)
        self.passenger_capacity = passenger_capacity

    def describe(self) -> str:
        return f"{super().describe()} Car cap={self.passenger_capacity}"


class Truck(_BaseVehicle):
    """Truck with a maximum load, charged extra per kg carried."""

    kind = VehicleKind.TRUCK

    def __init__(
        self, vehicle_id: int, name: str, daily_rate: float, max_load_kg: float
    ):
        super().__init__(vehicle_id, name, daily_rate)
        if max_load_kg < 0:
            raise ValueError(f"Max load must be non-negative, got {max_load_kg}")
        self.max_load_kg = max_load_kg

    def cost(self, days: int, load_kg: Optional[float] = None) -> float:
        """Base cost, plus the load fee when a load is given."""
        base = calc_base_cost(self.daily_rate, days)
        if load_kg is None:
            return base
        return base + calc_load_fee(load_kg, days)

    def describe(self) -> str:
        return f"{super().describe()} Truck maxLoadKg={self.max_load_kg:g}"


class ElectricCar(_BaseVehicle):
    """Battery electric car; needs a minimum charge to start."""

    kind = VehicleKind.ELECTRIC

    def __init__(
        self,
        vehicle_id: int,
        name: str,
        daily_rate: float,
        battery_capacity_kwh: float,
        current_charge_kwh: float,
    ):
        super().__init__(vehicle_id, name, daily_rate)
        if not 0 <= current_charge_kwh <= battery_capacity_kwh:
            raise ValueError(
                f"Charge {current_charge_kwh} outside 0..{battery_capacity_kwh} kWh"
            )
        self.battery_capacity_kwh = battery_capacity_kwh
        self.current_charge_kwh = current_charge_kwh

    def cost(self, days: int) -> float:
        surcharge = calc_battery_surcharge(
            self.current_charge_kwh, self.battery_capacity_kwh
        )
        return calc_base_cost(self.daily_rate, days) + surcharge

    def check_start(self) -> Optional[RentalError]:
        required = min_start_charge(self.battery_capacity_kwh)
        if self.current_charge_kwh < required:
            return RentalError(
                ErrorKind.BATTERY_LOW,
                f"Battery too low to start vehicle id={self.vehicle_id}",
                self.vehicle_id,
                value=self.current_charge_kwh,
                limit=required,
            )
        return None

    def charge(self, kwh: float) -> None:
        """Add (or drain, for negative kwh) charge, clamped to 0..capacity."""
        self.current_charge_kwh = max(
            0.0, min(self.current_charge_kwh + kwh, self.battery_capacity_kwh)
        )

    def describe(self) -> str:
        return (
            f"{super().describe()} Electric "
            f"battery={self.current_charge_kwh:g}/{self.battery_capacity_kwh:g}"
        )


Vehicle = Union[Car, Truck, ElectricCar]

"""Rental failure taxonomy and the outcome type returned by transactions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of business failures. None of them is fatal."""

    VEHICLE_NOT_FOUND = "VehicleNotFound"
    VEHICLE_UNAVAILABLE = "VehicleUnavailable"
    OVERLOAD = "Overload"
    BATTERY_LOW = "BatteryLow"
    NOT_RENTED = "NotRented"
    RENTER_MISMATCH = "RenterMismatch"
    SEVERE_DAMAGE = "SevereDamage"
    NOT_ELECTRIC = "NotElectric"


@dataclass
class RentalError:
    """
    A failed transaction.

    `value` and `limit` carry the numbers behind the failure:
    - OVERLOAD: requested load / max load (kg)
    - BATTERY_LOW: current charge / minimum start charge (kWh)
    """

    kind: ErrorKind
    message: str
    vehicle_id: int
    value: Optional[float] = None
    limit: Optional[float] = None
    renter_id: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass
class Outcome:
    """Result of a transaction: an amount on success, an error otherwise."""

    amount: Optional[float] = None
    error: Optional[RentalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    @classmethod
    def success(cls, amount: Optional[float] = None) -> "Outcome":
        return cls(amount=amount)

    @classmethod
    def failure(cls, error: RentalError) -> "Outcome":
        return cls(error=error)


class LogSinkError(RuntimeError):
    """The activity log could not be opened. Fatal for the whole process."""

"""RentalPolicy dataclass for configurable return fees."""

from dataclasses import dataclass


@dataclass
class RentalPolicy:
    """Fees applied when a vehicle comes back."""

    late_fee_per_day: float = 20.0
    minor_damage_fee: float = 100.0

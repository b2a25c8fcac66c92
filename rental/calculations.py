"""Helper functions for rental cost and penalty calculations."""

from datetime import datetime

# Per kg of load, per rented day
LOAD_FEE_PER_KG_DAY = 0.10
LOW_BATTERY_SURCHARGE = 50.0
# Fractions of battery capacity
SURCHARGE_CHARGE_RATIO = 0.2
START_CHARGE_RATIO = 0.1


def calc_base_cost(daily_rate: float, days: int) -> float:
    """Rate times days, the cost every variant starts from."""
    return daily_rate * days


def calc_load_fee(load_kg: float, days: int) -> float:
    """Extra truck cost for the load carried over the rental."""
    return load_kg * LOAD_FEE_PER_KG_DAY * days


def calc_battery_surcharge(current_charge: float, capacity: float) -> float:
    """Flat surcharge when an EV leaves with less than 20% charge."""
    if current_charge < SURCHARGE_CHARGE_RATIO * capacity:
        return LOW_BATTERY_SURCHARGE
    return 0.0


def min_start_charge(capacity: float) -> float:
    """Charge an EV needs before it can be started."""
    return START_CHARGE_RATIO * capacity


def calc_late_days(due: datetime, now: datetime) -> int:
    """
    Number of charged late days for a return at `now`.

    - On time (now <= due): 0
    - Late: whole hours late // 24 + 1, so a single overdue hour
      already counts as one full day
    """
    if now <= due:
        return 0
    hours_late = int((now - due).total_seconds() // 3600)
    return hours_late // 24 + 1


def calc_late_penalty(late_days: int, fee_per_day: float) -> float:
    return late_days * fee_per_day


def is_severe_damage(vehicle_id: int) -> bool:
    """Damage severity keyed on identifier parity: even ids are severe."""
    return vehicle_id % 2 == 0

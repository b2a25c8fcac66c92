"""RentalManager - the rent/return transaction engine."""

from typing import List, Optional

from dateutil.relativedelta import relativedelta

from .activity_log import ActivityLog
from .calculations import calc_late_days, calc_late_penalty, is_severe_damage
from .clock import Clock, SystemClock
from .errors import ErrorKind, LogSinkError, Outcome, RentalError
from .fleet import Fleet
from .ledger import Ledger
from .policy import RentalPolicy
from .record import RentalRecord
from .status import Availability, VehicleKind
from .vehicles import Vehicle


class RentalManager:
    """
    Rents and returns vehicles from a single fleet.

    Every public transaction returns an Outcome and writes exactly one
    line to the activity log before returning. Failures never change
    fleet or ledger state, except a severe-damage return, which releases
    the vehicle and still reports the failure.

    The log must stay open for as long as the manager is used; a
    transaction on a closed log raises LogSinkError before touching state.
    """

    def __init__(
        self,
        log: ActivityLog,
        clock: Optional[Clock] = None,
        policy: Optional[RentalPolicy] = None,
    ):
        self.log = log
        self.clock = clock or SystemClock()
        self.policy = policy or RentalPolicy()
        self.fleet = Fleet()
        self.ledger = Ledger()

    def add_vehicle(self, template: Vehicle) -> Vehicle:
        """Register a copy of the vehicle; the fleet owns the copy."""
        return self.fleet.add(template)

    def list_fleet(self) -> List[str]:
        return self.fleet.list()

    def inconsistent_vehicles(self) -> List[int]:
        """
        Ids whose rented flag disagrees with the ledger. Empty when healthy.

        Only the vehicle that lookups resolve to is checked for each id;
        duplicates registered later under the same id are unreachable.
        """
        return [
            v.vehicle_id
            for v in self.fleet
            if self.fleet.find(v.vehicle_id) is v
            and v.is_rented != (v.vehicle_id in self.ledger)
        ]

    # =========================================================================
    # Rent
    # =========================================================================

    def rent(
        self, renter_id: str, vehicle_id: int, days: int, load_kg: float = 0.0
    ) -> Outcome:
        """
        Rent a vehicle for `days`. Returns the rental cost on success.

        Gates, in order (the first failure aborts with no state change):
        1. Vehicle exists
        2. Vehicle is not already rented
        3. Trucks: load_kg <= max load
        4. Cost is computed (trucks include the load fee)
        5. Start precondition (EV battery) passes
        Only then is the vehicle marked rented and a ledger record opened.
        """
        self._require_open_log()
        vehicle = self.fleet.find(vehicle_id)
        if vehicle is None:
            return self._fail("Rent", self._not_found(vehicle_id))
        if vehicle.is_rented:
            return self._fail(
                "Rent",
                RentalError(
                    ErrorKind.VEHICLE_UNAVAILABLE,
                    f"Vehicle not available (already rented) id={vehicle_id}",
                    vehicle_id,
                ),
            )

        committed_load = None
        if vehicle.kind is VehicleKind.TRUCK:
            if load_kg > vehicle.max_load_kg:
                return self._fail(
                    "Rent",
                    RentalError(
                        ErrorKind.OVERLOAD,
                        f"Requested load {load_kg:g} > max {vehicle.max_load_kg:g}",
                        vehicle_id,
                        value=load_kg,
                        limit=vehicle.max_load_kg,
                    ),
                )
            committed_load = load_kg

        cost = self._quote(vehicle, days, committed_load)

        start_error = vehicle.check_start()
        if start_error is not None:
            return self._fail("Rent", start_error)

        now = self.clock.now()
        vehicle.availability = Availability.RENTED
        self.ledger.open(
            vehicle_id,
            RentalRecord(
                renter_id=renter_id,
                rented_at=now,
                due=now + relativedelta(days=days),
                load_kg=committed_load,
            ),
        )

        self.log.log(
            f"Rented vehicle id={vehicle_id} to member={renter_id} "
            f"for {days} days; cost={cost:g}"
        )
        return Outcome.success(cost)

    # =========================================================================
    # Return
    # =========================================================================

    def return_vehicle(
        self, renter_id: str, vehicle_id: int, actual_days: int, damaged: bool = False
    ) -> Outcome:
        """
        Return a rented vehicle. Returns base cost + penalties on success.

        - Base cost is recomputed for `actual_days`; trucks reuse the load
          committed at rent time
        - Late returns pay late_fee_per_day for each charged late day
        - Damage on an even id is severe: the vehicle is released and the
          call fails with SEVERE_DAMAGE. Odd ids pay minor_damage_fee.
        """
        self._require_open_log()
        vehicle = self.fleet.find(vehicle_id)
        if vehicle is None:
            return self._fail("Return", self._not_found(vehicle_id))

        record = self.ledger.get(vehicle_id)
        if record is None:
            return self._fail(
                "Return",
                RentalError(
                    ErrorKind.NOT_RENTED,
                    f"Vehicle not rented id={vehicle_id}",
                    vehicle_id,
                ),
            )
        if record.renter_id != renter_id:
            return self._fail(
                "Return",
                RentalError(
                    ErrorKind.RENTER_MISMATCH,
                    f"Member mismatch for vehicle id={vehicle_id}",
                    vehicle_id,
                    renter_id=renter_id,
                ),
            )

        base_cost = self._quote(vehicle, actual_days, record.load_kg)

        late_days = calc_late_days(record.due, self.clock.now())
        penalty = calc_late_penalty(late_days, self.policy.late_fee_per_day)

        damage_fee = 0.0
        if damaged:
            if is_severe_damage(vehicle_id):
                self._release(vehicle)
                return self._fail(
                    "Return",
                    RentalError(
                        ErrorKind.SEVERE_DAMAGE,
                        f"Severe damage reported on return for vehicle id={vehicle_id}"
                        " (vehicle released)",
                        vehicle_id,
                        renter_id=renter_id,
                    ),
                )
            damage_fee = self.policy.minor_damage_fee
            penalty += damage_fee

        total = base_cost + penalty
        self._release(vehicle)

        line = (
            f"Vehicle id={vehicle_id} returned by {renter_id}. Base={base_cost:g} "
            f"Penalty={penalty:g} Total={total:g}"
        )
        if late_days:
            line += f" (late {late_days} days)"
        if damage_fee:
            line += f" (minor damage fee {damage_fee:g})"
        self.log.log(line)
        return Outcome.success(total)

    # =========================================================================
    # Charge
    # =========================================================================

    def charge_battery(
        self, vehicle_id: int, kwh: float, renter_id: Optional[str] = None
    ) -> Outcome:
        """Charge an electric car. Allowed whether or not it is rented."""
        self._require_open_log()
        vehicle = self.fleet.find(vehicle_id)
        if vehicle is None:
            return self._fail("Charge", self._not_found(vehicle_id))
        if vehicle.kind is not VehicleKind.ELECTRIC:
            return self._fail(
                "Charge",
                RentalError(
                    ErrorKind.NOT_ELECTRIC,
                    f"Vehicle id={vehicle_id} is not an EV",
                    vehicle_id,
                ),
            )

        vehicle.charge(kwh)
        line = (
            f"Charged EV id={vehicle_id} + {kwh:g}kWh "
            f"(now {vehicle.current_charge_kwh:g} kWh)"
        )
        if renter_id is not None:
            line += f" requested by member {renter_id}"
        self.log.log(line)
        return Outcome.success(vehicle.current_charge_kwh)

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _quote(vehicle: Vehicle, days: int, load_kg: Optional[float]) -> float:
        if vehicle.kind is VehicleKind.TRUCK:
            return vehicle.cost(days, load_kg or 0.0)
        return vehicle.cost(days)

    @staticmethod
    def _not_found(vehicle_id: int) -> RentalError:
        return RentalError(
            ErrorKind.VEHICLE_NOT_FOUND,
            f"Vehicle not found id={vehicle_id}",
            vehicle_id,
        )

    def _require_open_log(self) -> None:
        if not self.log.is_open:
            raise LogSinkError("Activity log is closed")

    def _release(self, vehicle: Vehicle) -> None:
        vehicle.availability = Availability.AVAILABLE
        self.ledger.close(vehicle.vehicle_id)

    def _fail(self, action: str, error: RentalError) -> Outcome:
        self.log.log(f"{action} failed: {error}")
        return Outcome.failure(error)

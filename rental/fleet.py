"""Fleet registry - the sole owner of vehicle instances."""

from typing import Dict, Iterator, List, Optional

from .status import Availability
from .vehicles import Vehicle


class Fleet:
    """Ordered collection of vehicles, looked up by identifier."""

    def __init__(self):
        self._vehicles: List[Vehicle] = []
        self._by_id: Dict[int, Vehicle] = {}

    def add(self, template: Vehicle) -> Vehicle:
        """
        Register a copy of `template` and return the stored instance.

        The copy always starts available: this registry has no rental
        record for it, whatever state the template was in.

        Identifiers are not deduplicated; on a collision, lookups
        keep returning the first vehicle registered under that id.
        """
        vehicle = template.clone()
        vehicle.availability = Availability.AVAILABLE
        self._vehicles.append(vehicle)
        self._by_id.setdefault(vehicle.vehicle_id, vehicle)
        return vehicle

    def find(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._by_id.get(vehicle_id)

    def list(self) -> List[str]:
        """Descriptions in insertion order, tagged with availability."""
        return [
            f"{v.describe()} [{'RENTED' if v.is_rented else 'AVAILABLE'}]"
            for v in self._vehicles
        ]

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

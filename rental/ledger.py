"""Rental ledger: at most one active RentalRecord per vehicle."""

from typing import Dict, Iterator, Optional

from .record import RentalRecord


class Ledger:
    def __init__(self):
        self._records: Dict[int, RentalRecord] = {}

    def get(self, vehicle_id: int) -> Optional[RentalRecord]:
        return self._records.get(vehicle_id)

    def open(self, vehicle_id: int, record: RentalRecord) -> None:
        if vehicle_id in self._records:
            raise ValueError(f"Vehicle id={vehicle_id} already has an active rental")
        self._records[vehicle_id] = record

    def close(self, vehicle_id: int) -> RentalRecord:
        """Remove and return the record for a vehicle."""
        return self._records.pop(vehicle_id)

    def __contains__(self, vehicle_id: int) -> bool:
        return vehicle_id in self._records

    def __iter__(self) -> Iterator[int]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

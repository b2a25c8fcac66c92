"""RentalRecord dataclass for an active rental."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class RentalRecord:
    """Who has a vehicle, until when, and (trucks only) with what load."""

    renter_id: str
    rented_at: datetime
    due: datetime
    load_kg: Optional[float] = None

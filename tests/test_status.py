#!/usr/bin/env python3
"""Tests for Availability and VehicleKind enums."""

from rental import Availability, VehicleKind


class TestAvailability:
    """Tests for Availability enum."""

    def test_values(self):
        assert Availability.AVAILABLE.value == "available"
        assert Availability.RENTED.value == "rented"

    def test_lookup_by_value(self):
        assert Availability("rented") is Availability.RENTED


class TestVehicleKind:
    """Tests for VehicleKind enum."""

    def test_closed_set(self):
        """Exactly three variants exist."""
        assert {k.value for k in VehicleKind} == {"car", "truck", "electric"}

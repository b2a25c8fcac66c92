#!/usr/bin/env python3
"""Tests for fleet YAML loading."""

import pytest

from rental import (
    Car,
    ElectricCar,
    FleetConfig,
    RentalPolicy,
    Truck,
    load_fleet_config,
)

# =============================================================================
# load_fleet_config tests
# =============================================================================


class TestLoadFleetConfig:
    """Tests for load_fleet_config function."""

    def test_loads_all_variants(self, tmp_path):
        """Each vehicle type maps to its class."""
        yaml_content = """
vehicles:
  - id: 1
    type: car
    name: Toyota Avanza
    dailyRate: 200
    passengerCapacity: 7
  - id: 2
    type: truck
    name: Hino Dutro
    dailyRate: 400
    maxLoadKg: 1000
  - id: 3
    type: electric
    name: Tesla Model 3
    dailyRate: 350
    batteryCapacityKwh: 75
    currentChargeKwh: 5
"""
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text(yaml_content)

        config = load_fleet_config(yaml_file)

        assert isinstance(config, FleetConfig)
        assert len(config.vehicles) == 3
        car, truck, ev = config.vehicles
        assert isinstance(car, Car)
        assert car.passenger_capacity == 7
        assert isinstance(truck, Truck)
        assert truck.max_load_kg == 1000
        assert isinstance(ev, ElectricCar)
        assert ev.battery_capacity_kwh == 75
        assert ev.current_charge_kwh == 5

    def test_defaults_without_policy_or_settings(self, tmp_path):
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text("""
vehicles:
  - {id: 1, type: car, name: Avanza, dailyRate: 200}
""")
        config = load_fleet_config(yaml_file)
        assert config.policy == RentalPolicy()
        assert config.log_file is None
        assert config.vehicles[0].passenger_capacity == 0

    def test_policy_and_settings(self, tmp_path):
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text("""
settings:
  logFile: logs/rentals.txt
policy:
  lateFeePerDay: 25
  minorDamageFee: 150
vehicles: []
""")
        config = load_fleet_config(yaml_file)
        assert config.policy.late_fee_per_day == 25
        assert config.policy.minor_damage_fee == 150
        assert config.log_file == "logs/rentals.txt"
        assert config.vehicles == []

    def test_partial_policy_keeps_defaults(self, tmp_path):
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text("""
policy:
  minorDamageFee: 150
vehicles: []
""")
        config = load_fleet_config(yaml_file)
        assert config.policy.late_fee_per_day == 20
        assert config.policy.minor_damage_fee == 150

    def test_ev_defaults_to_full_charge(self, tmp_path):
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text("""
vehicles:
  - {id: 5, type: electric, name: Leaf, dailyRate: 150, batteryCapacityKwh: 40}
""")
        ev = load_fleet_config(yaml_file).vehicles[0]
        assert ev.current_charge_kwh == 40

    def test_unknown_type_raises(self, tmp_path):
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text("""
vehicles:
  - {id: 9, type: hovercraft, name: Zoom, dailyRate: 999}
""")
        with pytest.raises(ValueError, match="hovercraft"):
            load_fleet_config(yaml_file)

    def test_missing_vehicles_raises(self, tmp_path):
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text("policy:\n  lateFeePerDay: 10\n")
        with pytest.raises(ValueError):
            load_fleet_config(yaml_file)

    def test_invalid_vehicle_data_raises(self, tmp_path):
        yaml_file = tmp_path / "fleet.yaml"
        yaml_file.write_text("""
vehicles:
  - {id: 3, type: electric, name: Bad, dailyRate: 1,
     batteryCapacityKwh: 10, currentChargeKwh: 20}
""")
        with pytest.raises(ValueError):
            load_fleet_config(yaml_file)

    def test_loads_bundled_demo_fleet(self):
        from pathlib import Path

        demo = Path(__file__).parent.parent / "fleets" / "demo.yaml"
        config = load_fleet_config(demo)
        assert [v.vehicle_id for v in config.vehicles] == [1, 2, 3]
        assert config.log_file == "rental_log.txt"

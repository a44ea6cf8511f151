#!/usr/bin/env python3
"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest

from parking import ConfigError, StaticCredentials, VehicleType, load_config
from parking.config import load_schema, validate_config_file


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_has_expected_properties(self):
        schema = load_schema()
        assert isinstance(schema, dict)
        for key in ("dataFile", "rates", "credentials"):
            assert key in schema["properties"]


class TestValidateConfigFile:
    """Tests for validate_config_file function."""

    def test_valid_file_returns_no_errors(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("""
dataFile: lot-a.txt
rates:
  car: 2.5
credentials:
  username: clerk
  password: secret
""")
        assert validate_config_file(path, load_schema()) == []

    def test_empty_file_is_valid(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("")
        assert validate_config_file(path, load_schema()) == []

    def test_unknown_rate_type_is_invalid(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("rates:\n  scooter: 1.0\n")
        errors = validate_config_file(path, load_schema())
        assert any(e.startswith("rates:") and "scooter" in e for e in errors)

    def test_negative_rate_reports_path(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("rates:\n  car: -1\n")
        errors = validate_config_file(path, load_schema())
        assert any("rates.car" in e for e in errors)

    def test_invalid_yaml_returns_parse_error(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("rates: [unclosed\n")
        errors = validate_config_file(path, load_schema())
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file_returns_error(self, tmp_path):
        errors = validate_config_file(tmp_path / "missing.yaml", load_schema())
        assert len(errors) == 1
        assert errors[0].startswith("Cannot read")


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self):
        config = load_config()
        assert config.data_file == Path("vehicles.txt")
        assert config.rates[VehicleType.CAR] == 2.0
        assert config.rates[VehicleType.BIKE] == 1.0
        assert config.rates[VehicleType.TRUCK] == 3.0
        assert config.username == "admin"
        assert config.password == "1234"

    def test_overrides_from_file(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("""
dataFile: lot-a.txt
rates:
  truck: 4
credentials:
  username: clerk
  password: secret
""")
        config = load_config(path)
        assert config.data_file == Path("lot-a.txt")
        assert config.rates[VehicleType.TRUCK] == 4.0
        assert config.rates[VehicleType.CAR] == 2.0
        assert config.username == "clerk"
        assert config.password == "secret"

    def test_defaults_are_not_shared(self, tmp_path):
        """Overriding a rate does not leak into later defaults."""
        path = tmp_path / "parking.yaml"
        path.write_text("rates:\n  car: 9\n")
        load_config(path)
        assert load_config().rates[VehicleType.CAR] == 2.0

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("colour: blue\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")

    def test_authenticator(self):
        auth = load_config().authenticator()
        assert isinstance(auth, StaticCredentials)
        assert auth.check("admin", "1234")

    def test_reports_every_violation(self, tmp_path):
        """All problems are listed, not just the first one found."""
        path = tmp_path / "parking.yaml"
        path.write_text("dataFile: 42\nrates:\n  car: -1\n")
        errors = validate_config_file(path, load_schema())
        assert len(errors) == 2
        assert errors[0].startswith("dataFile:")
        assert errors[1].startswith("rates.car:")

    def test_top_level_violation(self, tmp_path):
        path = tmp_path / "parking.yaml"
        path.write_text("- just\n- a list\n")
        errors = validate_config_file(path, load_schema())
        assert errors[0].startswith("(top level):")

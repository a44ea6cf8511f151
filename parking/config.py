"""YAML configuration loading and schema validation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from jsonschema import Draft7Validator

from .auth import StaticCredentials
from .charges import DEFAULT_RATES
from .vehicle_type import VehicleType

DEFAULT_DATA_FILE = "vehicles.txt"


class ConfigError(Exception):
    """Configuration file could not be read or failed validation."""


@dataclass
class Config:
    """Runtime settings for the parking tracker."""

    data_file: Path = Path(DEFAULT_DATA_FILE)
    rates: Dict[VehicleType, float] = field(default_factory=lambda: dict(DEFAULT_RATES))
    username: str = "admin"
    password: str = "1234"

    def authenticator(self) -> StaticCredentials:
        return StaticCredentials(self.username, self.password)


def load_schema() -> dict:
    """Load the JSON schema from config_schema.yaml."""
    schema_path = Path(__file__).parent / "config_schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def read_config_data(filepath: Union[str, Path]) -> Any:
    """
    Read raw config data from a YAML file. An empty file reads as {}.

    Raises:
        ConfigError: the file cannot be opened or is not valid YAML.
    """
    try:
        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error in {filepath}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {filepath}: {e}")
    return {} if data is None else data


def schema_errors(data: Any, schema: dict) -> List[str]:
    """Every schema violation in data, as 'path: message' strings."""
    violations = sorted(
        Draft7Validator(schema).iter_errors(data),
        key=lambda e: [str(p) for p in e.path],
    )
    return [
        f"{'.'.join(str(p) for p in e.path) or '(top level)'}: {e.message}"
        for e in violations
    ]


def validate_config_file(filepath: Union[str, Path], schema: dict) -> List[str]:
    """Problems found in a config file; empty when it is valid."""
    try:
        data = read_config_data(filepath)
    except ConfigError as e:
        return [str(e)]
    return schema_errors(data, schema)


def _parse_config(data: Dict[str, Any]) -> Config:
    """Build a Config from validated camelCase YAML data."""
    config = Config()
    if "dataFile" in data:
        config.data_file = Path(data["dataFile"])
    for name, rate in (data.get("rates") or {}).items():
        config.rates[VehicleType(name)] = float(rate)
    credentials = data.get("credentials")
    if credentials:
        config.username = credentials["username"]
        config.password = credentials["password"]
    return config


def load_config(filename: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from a YAML file, or defaults if no file is given.

    Raises:
        ConfigError: the file is missing, not valid YAML, or fails the schema.
    """
    if filename is None:
        return Config()

    data = read_config_data(filename)
    errors = schema_errors(data, load_schema())
    if errors:
        raise ConfigError(f"Invalid config {filename}: " + "; ".join(errors))
    return _parse_config(data)

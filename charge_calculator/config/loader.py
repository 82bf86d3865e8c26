"""
Rate sheet loading.

Reads named customer and provider rates from a YAML file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import yaml

from charge_calculator.core.charge import Customer, Provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateSheet:
    """Named customers and providers from a rate sheet."""
    customers: Dict[str, Customer]
    providers: Dict[str, Provider]

    def get_customer(self, name: str) -> Customer:
        """Get a customer by name.

        Raises:
            ValueError: If the customer is not in the sheet
        """
        if name not in self.customers:
            raise ValueError(f"Unknown customer: {name}")
        return self.customers[name]

    def get_provider(self, name: str) -> Provider:
        """Get a provider by name.

        Raises:
            ValueError: If the provider is not in the sheet
        """
        if name not in self.providers:
            raise ValueError(f"Unknown provider: {name}")
        return self.providers[name]


def load_rate_sheet(path: str) -> RateSheet:
    """Load and validate a rate sheet from a YAML file.

    Only the file's shape is checked; rate values may be zero or
    negative, the formula accepts them as-is.

    Args:
        path: Path to YAML rate sheet

    Returns:
        Validated RateSheet object

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If the rate sheet is invalid
    """
    sheet_path = Path(path)
    if not sheet_path.exists():
        raise FileNotFoundError(f"Rate sheet not found: {path}")

    with open(sheet_path, 'r', encoding='utf-8') as f:
        try:
            raw_sheet = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in rate sheet {path}: {e}")

    if not raw_sheet:
        raise ValueError("Rate sheet is empty")
    if not isinstance(raw_sheet, dict):
        raise ValueError("Rate sheet must be a dictionary")

    allowed_top_keys = {'customers', 'providers'}
    unknown_keys = set(raw_sheet.keys()) - allowed_top_keys
    if unknown_keys:
        raise ValueError(f"Unknown rate sheet keys: {unknown_keys}")

    customers = {
        name: Customer(base_rate=_parse_rate(entry, 'base_rate', f"customers.{name}"))
        for name, entry in _section(raw_sheet, 'customers').items()
    }
    providers = {
        name: Provider(connection_charge=_parse_rate(entry, 'connection_charge', f"providers.{name}"))
        for name, entry in _section(raw_sheet, 'providers').items()
    }

    logger.info(
        "Loaded rate sheet %s: %d customers, %d providers",
        path, len(customers), len(providers)
    )
    return RateSheet(customers=customers, providers=providers)


def _section(raw_sheet: Dict, key: str) -> Dict:
    if key not in raw_sheet:
        raise ValueError(f"Missing required '{key}' section")

    data = raw_sheet[key]
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"'{key}' must be a dictionary")

    # Unquoted YAML names like 123 or no load as int/bool
    for name in data:
        if not isinstance(name, str):
            raise ValueError(f"Name in {key} must be a string: {name!r}")
    return data


def _parse_rate(data, key: str, path: str) -> float:
    """Parse the single rate field of a rate sheet entry.

    Args:
        data: Entry data
        key: Name of the rate field
        path: Path for error messages

    Returns:
        The rate as a number

    Raises:
        ValueError: If the entry is invalid
    """
    if not isinstance(data, dict):
        raise ValueError(f"Entry '{path}' must be a dictionary")

    unknown_keys = set(data.keys()) - {key}
    if unknown_keys:
        raise ValueError(f"Unknown keys in {path}: {unknown_keys}")

    if key not in data:
        raise ValueError(f"Missing required '{key}' in {path}")

    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' in {path} must be a number")

    return value

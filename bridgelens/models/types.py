"""Shared type definitions for LI.FI models.

LI.FI reports token amounts as integer strings in base units and USD values
as decimal strings. Both are kept as strings on the wire models; these types
normalize what the API sends without turning it into numbers.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BeforeValidator, Field


def validate_amount(value: Any) -> str:
    """Validate a base-unit token amount.

    Args:
        value: Value to validate (string or int)

    Returns:
        Amount as a non-negative decimal integer string

    Raises:
        ValueError: If value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be string or int, got bool")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Amount cannot be negative: {value}")
        return str(value)
    if not isinstance(value, str):
        raise ValueError(f"Amount must be string or int, got {type(value).__name__}")

    try:
        int_value = int(value)
    except ValueError as err:
        raise ValueError(f"Amount must be a decimal integer string: '{value}'") from err
    if int_value < 0:
        raise ValueError(f"Amount cannot be negative: {value}")
    return value


def validate_usd(value: Any) -> str:
    """Validate a USD value, accepting numbers and numeric strings.

    Raises:
        ValueError: If value is not numeric
    """
    if isinstance(value, bool):
        raise ValueError("USD value must be string or number, got bool")
    if isinstance(value, int | float):
        return str(value)
    if not isinstance(value, str):
        raise ValueError(f"USD value must be string or number, got {type(value).__name__}")
    try:
        Decimal(value)
    except InvalidOperation as err:
        raise ValueError(f"USD value must be numeric: '{value}'") from err
    return value


# Token amount in base units as decimal string
Amount = Annotated[
    str,
    BeforeValidator(validate_amount),
    Field(description="Token amount in base units as decimal string"),
]

# USD value as decimal string
UsdValue = Annotated[
    str,
    BeforeValidator(validate_usd),
    Field(description="USD value as decimal string"),
]


def parse_usd(value: str | None) -> float:
    """Parse a USD string, returning 0.0 when missing or not numeric."""
    if not value:
        return 0.0
    try:
        return float(value)
    except ValueError:
        return 0.0


def is_evm_address(address: str) -> bool:
    """Check if a string is a 0x-prefixed 20-byte hex address."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x") or len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def normalize_address(address: str) -> str:
    """Normalize a token or wallet address for comparisons.

    EVM addresses are lowercased, since their hex case is only an EIP-55
    checksum. Anything else (Solana, Bitcoin) is case-sensitive and
    returned unchanged.
    """
    if is_evm_address(address):
        return address.lower()
    return address

"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Chain ids, token addresses and transaction hashes
- factories: Token, step, route and status factory functions
"""

from tests.helpers.constants import (
    ARBITRUM,
    ETHEREUM,
    OPTIMISM,
    POLYGON,
    TX_HASH,
    USDC_ARB,
    USDC_ETH,
    USDC_POLYGON,
    WALLET,
    WETH_ETH,
)
from tests.helpers.factories import make_route, make_status, make_step, make_token

__all__ = [
    # Constants
    "ETHEREUM",
    "OPTIMISM",
    "POLYGON",
    "ARBITRUM",
    "USDC_ETH",
    "USDC_ARB",
    "USDC_POLYGON",
    "WETH_ETH",
    "TX_HASH",
    "WALLET",
    # Factories
    "make_token",
    "make_step",
    "make_route",
    "make_status",
]

"""Reliability and liquidity ratings for bridges and exchanges.

The estimators consume ratings through the :class:`ToolRatings` protocol so
tests and deployments can substitute their own tables. The default static
tables are hand-maintained heuristics, not measured data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Protocol


class LiquidityDepth(str, Enum):
    """Coarse liquidity classification of a route."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def score(self) -> float:
        """Liquidity score (0-10) for this depth."""
        return LIQUIDITY_SCORES[self]


LIQUIDITY_SCORES: Mapping[LiquidityDepth, float] = MappingProxyType(
    {
        LiquidityDepth.HIGH: 9.0,
        LiquidityDepth.MEDIUM: 6.0,
        LiquidityDepth.LOW: 3.0,
    }
)


class ToolRatings(Protocol):
    """Protocol for tool rating providers.

    Tool names are the LI.FI tool keys (``"hop"``, ``"across"``, ``"1inch"``);
    implementations should match them case-insensitively.
    """

    @property
    def unbridged_reliability(self) -> float:
        """Reliability of a route that uses no bridge at all."""
        ...

    def reliability(self, tool: str) -> float:
        """Return the 0-10 reliability score of a bridge."""
        ...

    def liquidity_depth(self, tool: str) -> LiquidityDepth | None:
        """Return the liquidity tier of an exchange, or None if unrated."""
        ...

    def is_well_known_bridge(self, tool: str) -> bool:
        """Return True if the tool is an established bridge."""
        ...


DEFAULT_BRIDGE_RELIABILITY: Mapping[str, float] = MappingProxyType(
    {
        "hop": 9.0,
        "across": 8.5,
        "cbridge": 8.0,
        "arbitrum": 9.5,
        "optimism": 9.5,
        "polygon": 9.0,
        "avalanche": 8.5,
        "gnosis": 7.5,
        "relay": 7.0,
        "symbiosis": 6.5,
        "thorswap": 6.0,
        "squid": 7.0,
        "allbridge": 6.0,
        "mayan": 6.0,
        "debridge": 6.5,
        "chainflip": 5.5,
    }
)

# Aggregators and major DEXs
DEFAULT_HIGH_LIQUIDITY_TOOLS = frozenset({"1inch", "paraswap", "0x", "uniswap", "sushiswap"})
DEFAULT_MEDIUM_LIQUIDITY_TOOLS = frozenset({"dodo", "kyber", "balancer"})

DEFAULT_WELL_KNOWN_BRIDGES = frozenset(
    {"hop", "across", "cbridge", "arbitrum", "optimism", "polygon", "avalanche", "gnosis", "relay"}
)


@dataclass(frozen=True)
class StaticToolRatings:
    """Tool ratings backed by fixed lookup tables.

    Attributes:
        bridge_reliability: Reliability score per bridge key (lowercase)
        high_liquidity_tools: Exchanges rated HIGH liquidity
        medium_liquidity_tools: Exchanges rated MEDIUM liquidity
        well_known_bridges: Bridges that carry no unknown-tool penalty
        default_reliability: Score for bridges missing from the table (default: 5)
        unbridged_reliability: Score for routes with no bridge step (default: 9)
    """

    bridge_reliability: Mapping[str, float] = field(
        default_factory=lambda: DEFAULT_BRIDGE_RELIABILITY
    )
    high_liquidity_tools: frozenset[str] = DEFAULT_HIGH_LIQUIDITY_TOOLS
    medium_liquidity_tools: frozenset[str] = DEFAULT_MEDIUM_LIQUIDITY_TOOLS
    well_known_bridges: frozenset[str] = DEFAULT_WELL_KNOWN_BRIDGES
    default_reliability: float = 5.0
    unbridged_reliability: float = 9.0

    def reliability(self, tool: str) -> float:
        return self.bridge_reliability.get(tool.lower(), self.default_reliability)

    def liquidity_depth(self, tool: str) -> LiquidityDepth | None:
        key = tool.lower()
        if key in self.high_liquidity_tools:
            return LiquidityDepth.HIGH
        if key in self.medium_liquidity_tools:
            return LiquidityDepth.MEDIUM
        return None

    def is_well_known_bridge(self, tool: str) -> bool:
        return tool.lower() in self.well_known_bridges


# Default ratings instance
DEFAULT_TOOL_RATINGS = StaticToolRatings()

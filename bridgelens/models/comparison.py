"""Pydantic models for route comparison results.

These are produced fresh for every comparison and consumed by presentation
layers as plain JSON (``model_dump(by_alias=True)``).
"""

from enum import Enum

from pydantic import BaseModel, Field

from bridgelens.models.route import Route, TokenInfo
from bridgelens.models.types import Amount, UsdValue


class RiskLevel(str, Enum):
    """Qualitative execution risk of a route."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class RouteRecommendationType(str, Enum):
    """Category a route is recommended under."""

    OPTIMAL = "OPTIMAL"
    FASTEST = "FASTEST"
    CHEAPEST = "CHEAPEST"
    SAFEST = "SAFEST"
    ALTERNATIVE = "ALTERNATIVE"


class RouteMetrics(BaseModel):
    """Normalized metrics derived from a single route.

    Always recomputed from the route; never stored or updated in place.

    Attributes:
        total_fees_usd: Fee costs plus gas costs over all steps, in USD
        total_gas_usd: Gas costs over all steps, in USD (subset of total fees)
        estimated_time: Sum of step execution durations, in seconds
        price_impact: Value lost beyond fees, as a fraction of the input
        complexity_score: Step count weighted by step kind
        gas_efficiency: Gas cost as a percentage of the input value
        liquidity_score: 0-10 estimate of the liquidity behind the route
        bridge_reliability: 0-10 reliability of the bridges used
        slippage_tolerance: Slippage tolerance, in percent
    """

    total_fees_usd: float = Field(alias="totalFeesUSD")
    total_gas_usd: float = Field(alias="totalGasUSD")
    estimated_time: float = Field(alias="estimatedTime")
    price_impact: float = Field(alias="priceImpact")
    complexity_score: float = Field(alias="complexityScore")
    gas_efficiency: float = Field(alias="gasEfficiency")
    liquidity_score: float = Field(alias="liquidityScore")
    bridge_reliability: float = Field(alias="bridgeReliability")
    slippage_tolerance: float = Field(alias="slippageTolerance")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def estimated_minutes(self) -> float:
        """Estimated execution time in minutes."""
        return self.estimated_time / 60


class RouteAdjustments(BaseModel):
    """Parameter changes suggested for a route."""

    # Percent, 3 == 3%
    slippage: float | None = None
    amount: str | None = None
    timing: str | None = None

    model_config = {"frozen": True}


class RouteRecommendation(BaseModel):
    """Category, reasoning and suggested adjustments for one route."""

    type: RouteRecommendationType
    reasons: list[str] = Field(default_factory=list)
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    adjustments: RouteAdjustments | None = None

    model_config = {"frozen": True}


class AlternativeRoute(BaseModel):
    """A candidate route bundled with its analysis."""

    route: Route
    metrics: RouteMetrics
    recommendation: RouteRecommendationType
    # Percent, clamped by the scoring policy (50-98 by default)
    success_probability: float = Field(alias="successProbability")
    risk_level: RiskLevel = Field(alias="riskLevel")
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "frozen": True}


class OriginalRoute(BaseModel):
    """Best-effort reconstruction of the route a failed transaction took.

    Built from status data only, so it has no steps and may fall back to the
    sending side for destination fields.
    """

    id: str = "original"
    from_chain_id: int = Field(default=0, alias="fromChainId")
    from_amount: Amount = Field(default="0", alias="fromAmount")
    from_amount_usd: UsdValue = Field(default="0", alias="fromAmountUSD")
    from_token: TokenInfo = Field(alias="fromToken")
    from_address: str | None = Field(default=None, alias="fromAddress")
    to_chain_id: int = Field(default=0, alias="toChainId")
    to_amount: Amount = Field(default="0", alias="toAmount")
    to_amount_usd: UsdValue = Field(default="0", alias="toAmountUSD")
    to_amount_min: Amount = Field(default="0", alias="toAmountMin")
    to_token: TokenInfo = Field(alias="toToken")
    to_address: str | None = Field(default=None, alias="toAddress")
    gas_cost_usd: UsdValue | None = Field(default=None, alias="gasCostUSD")
    steps: list[dict] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "frozen": True}


class RouteComparison(BaseModel):
    """Ranked alternatives for a failed or problematic transaction.

    ``recommendations[i]`` belongs to ``alternative_routes[i]``; both lists
    are ordered best-first.
    """

    original_route: OriginalRoute | None = Field(default=None, alias="originalRoute")
    alternative_routes: list[AlternativeRoute] = Field(
        default_factory=list, alias="alternativeRoutes"
    )
    failure_reasons: list[str] = Field(default_factory=list, alias="failureReasons")
    recommendations: list[RouteRecommendation] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @property
    def has_alternatives(self) -> bool:
        """Return True if at least one alternative route was found."""
        return len(self.alternative_routes) > 0

    @property
    def best(self) -> AlternativeRoute | None:
        """Return the top-ranked alternative, if any."""
        return self.alternative_routes[0] if self.alternative_routes else None

    @classmethod
    def empty(cls, failure_reasons: list[str]) -> "RouteComparison":
        """Create a comparison with no alternatives."""
        return cls(failure_reasons=failure_reasons)

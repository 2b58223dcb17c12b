"""Heuristic estimators for route quality.

Each estimator is an independent pure function. Ratings come from a
:class:`~bridgelens.analysis.ratings.ToolRatings` provider and thresholds
from a :class:`~bridgelens.analysis.config.ScoringPolicy`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bridgelens.analysis.config import DEFAULT_SCORING_POLICY, ScoringPolicy
from bridgelens.analysis.ratings import DEFAULT_TOOL_RATINGS, LiquidityDepth, ToolRatings
from bridgelens.models.comparison import RiskLevel

if TYPE_CHECKING:
    from bridgelens.models.comparison import RouteMetrics
    from bridgelens.models.route import Route


def estimate_liquidity_depth(
    route: Route,
    ratings: ToolRatings = DEFAULT_TOOL_RATINGS,
) -> LiquidityDepth:
    """Classify the liquidity behind a route from the tools it uses.

    HIGH if any step uses a high-liquidity tool, otherwise MEDIUM if any step
    uses a medium-liquidity tool, otherwise LOW.
    """
    depths = {ratings.liquidity_depth(step.tool) for step in route.steps}
    if LiquidityDepth.HIGH in depths:
        return LiquidityDepth.HIGH
    if LiquidityDepth.MEDIUM in depths:
        return LiquidityDepth.MEDIUM
    return LiquidityDepth.LOW


def calculate_bridge_reliability(
    route: Route,
    ratings: ToolRatings = DEFAULT_TOOL_RATINGS,
) -> float:
    """Average reliability of the route's cross-chain steps.

    Routes without a cross-chain step get the ratings' unbridged score.
    """
    bridge_steps = [step for step in route.steps if step.is_cross_chain]
    if not bridge_steps:
        return ratings.unbridged_reliability

    total = sum(ratings.reliability(step.tool) for step in bridge_steps)
    return total / len(bridge_steps)


def calculate_success_probability(
    route: Route,
    metrics: RouteMetrics,
    policy: ScoringPolicy = DEFAULT_SCORING_POLICY,
    ratings: ToolRatings = DEFAULT_TOOL_RATINGS,
) -> float:
    """Estimate the chance (in percent) that a route executes successfully.

    Starts from the policy's base probability and subtracts penalties for
    complexity, bridge reliability, thin liquidity, price impact, gas cost
    and tools outside the well-known bridge list. The result is clamped to
    ``[min_success_probability, max_success_probability]``, so degenerate
    metrics still produce a bounded value.

    Args:
        route: The route being scored (used for its tool names)
        metrics: Metrics previously derived from the same route
        policy: Penalty constants and bounds
        ratings: Source of the well-known bridge list

    Returns:
        Success probability in percent
    """
    p = policy
    probability = p.base_success_probability

    probability -= metrics.complexity_score * p.complexity_probability_penalty
    probability -= (10 - metrics.bridge_reliability) * p.reliability_probability_penalty

    if metrics.liquidity_score < p.low_liquidity_threshold:
        probability -= p.low_liquidity_penalty
    elif metrics.liquidity_score < p.medium_liquidity_threshold:
        probability -= p.medium_liquidity_penalty

    if metrics.price_impact > p.high_price_impact:
        probability -= p.high_price_impact_penalty
    elif metrics.price_impact > p.medium_price_impact:
        probability -= p.medium_price_impact_penalty

    if metrics.gas_efficiency > p.high_gas_efficiency:
        probability -= p.high_gas_penalty
    elif metrics.gas_efficiency > p.medium_gas_efficiency:
        probability -= p.medium_gas_penalty

    if any(not ratings.is_well_known_bridge(step.tool) for step in route.steps):
        probability -= p.unknown_bridge_penalty

    return max(p.min_success_probability, min(p.max_success_probability, probability))


def calculate_risk_level(
    metrics: RouteMetrics,
    success_probability: float,
    policy: ScoringPolicy = DEFAULT_SCORING_POLICY,
) -> RiskLevel:
    """Classify execution risk.

    Depends only on success probability, complexity and bridge reliability.
    """
    p = policy
    if (
        success_probability < p.high_risk_probability
        or metrics.complexity_score > p.high_risk_complexity
        or metrics.bridge_reliability < p.high_risk_reliability
    ):
        return RiskLevel.HIGH
    if (
        success_probability < p.medium_risk_probability
        or metrics.complexity_score > p.medium_risk_complexity
        or metrics.bridge_reliability < p.medium_risk_reliability
    ):
        return RiskLevel.MEDIUM
    return RiskLevel.LOW

"""Recommendation labels and qualitative pros/cons for candidate routes.

Labels are assigned by position in the candidate list rather than by route
id, so a candidate set yields at most one CHEAPEST, FASTEST and SAFEST route
even if the API returns duplicate ids.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from bridgelens.analysis.config import DEFAULT_SCORING_POLICY, ScoringPolicy
from bridgelens.analysis.ranking import calculate_optimal_score
from bridgelens.models.comparison import (
    RouteAdjustments,
    RouteMetrics,
    RouteRecommendation,
    RouteRecommendationType,
)

# Pro thresholds
LOW_FEES_USD = 10.0
FAST_SECONDS = 300.0
RELIABLE_BRIDGE = 8.0
SIMPLE_ROUTE = 3.0
GAS_EFFICIENT = 2.0
DEEP_LIQUIDITY = 7.0

# Con thresholds
HIGH_FEES_USD = 50.0
SLOW_SECONDS = 900.0
UNPROVEN_BRIDGE = 6.0
COMPLEX_ROUTE = 5.0
GAS_EXPENSIVE = 5.0
HIGH_PRICE_IMPACT = 0.01

CATEGORY_REASONS = {
    RouteRecommendationType.CHEAPEST: "Lowest total fees among all options",
    RouteRecommendationType.FASTEST: "Shortest estimated execution time",
    RouteRecommendationType.SAFEST: "Uses most reliable bridges and exchanges",
    RouteRecommendationType.OPTIMAL: "Best balance of cost, time, and reliability",
}


def _first_best(
    candidates: Sequence[RouteMetrics],
    key: Callable[[RouteMetrics], float],
) -> int | None:
    """Index of the first candidate with the lowest key."""
    if not candidates:
        return None
    return min(range(len(candidates)), key=lambda i: key(candidates[i]))


def assign_category(
    index: int,
    candidates: Sequence[RouteMetrics],
    policy: ScoringPolicy = DEFAULT_SCORING_POLICY,
) -> RouteRecommendationType:
    """Pick the recommendation category for ``candidates[index]``.

    Precedence: CHEAPEST, FASTEST, SAFEST, then OPTIMAL when the route's
    optimal score is at least every other candidate's, else ALTERNATIVE.
    """
    if index == _first_best(candidates, lambda m: m.total_fees_usd):
        return RouteRecommendationType.CHEAPEST
    if index == _first_best(candidates, lambda m: m.estimated_time):
        return RouteRecommendationType.FASTEST
    if index == _first_best(candidates, lambda m: -m.bridge_reliability):
        return RouteRecommendationType.SAFEST

    score = calculate_optimal_score(candidates[index], policy)
    if all(
        score >= calculate_optimal_score(other, policy)
        for i, other in enumerate(candidates)
        if i != index
    ):
        return RouteRecommendationType.OPTIMAL
    return RouteRecommendationType.ALTERNATIVE


def list_pros(metrics: RouteMetrics) -> list[str]:
    pros = []
    if metrics.total_fees_usd < LOW_FEES_USD:
        pros.append("Low transaction fees")
    if metrics.estimated_time < FAST_SECONDS:
        pros.append("Fast execution time")
    if metrics.bridge_reliability > RELIABLE_BRIDGE:
        pros.append("Uses reliable, battle-tested bridges")
    if metrics.complexity_score < SIMPLE_ROUTE:
        pros.append("Simple, straightforward route")
    if metrics.gas_efficiency < GAS_EFFICIENT:
        pros.append("Gas efficient")
    if metrics.liquidity_score > DEEP_LIQUIDITY:
        pros.append("High liquidity depth")
    return pros


def list_cons(metrics: RouteMetrics) -> list[str]:
    cons = []
    if metrics.total_fees_usd > HIGH_FEES_USD:
        cons.append("Higher transaction fees")
    if metrics.estimated_time > SLOW_SECONDS:
        cons.append("Longer execution time")
    if metrics.bridge_reliability < UNPROVEN_BRIDGE:
        cons.append("Uses less proven bridges")
    if metrics.complexity_score > COMPLEX_ROUTE:
        cons.append("Complex multi-step route")
    if metrics.gas_efficiency > GAS_EXPENSIVE:
        cons.append("Higher gas costs")
    if metrics.price_impact > HIGH_PRICE_IMPACT:
        cons.append("Higher price impact")
    return cons


def suggest_adjustments(
    metrics: RouteMetrics,
    policy: ScoringPolicy = DEFAULT_SCORING_POLICY,
) -> RouteAdjustments | None:
    """Suggest raising slippage when a tight tolerance meets real price impact."""
    if (
        metrics.slippage_tolerance < policy.adjust_below_slippage
        and metrics.price_impact > policy.adjust_above_price_impact
    ):
        return RouteAdjustments(slippage=policy.suggested_slippage)
    return None


def generate_route_recommendation(
    index: int,
    candidates: Sequence[RouteMetrics],
    policy: ScoringPolicy = DEFAULT_SCORING_POLICY,
) -> RouteRecommendation:
    """Build the full recommendation for ``candidates[index]``.

    Args:
        index: Position of the route in the candidate set
        candidates: Metrics of every candidate, in deduplicated order
        policy: Scoring policy used for OPTIMAL and adjustments

    Returns:
        RouteRecommendation with category, reasons, pros, cons and adjustments
    """
    metrics = candidates[index]
    category = assign_category(index, candidates, policy)
    reason = CATEGORY_REASONS.get(category)

    return RouteRecommendation(
        type=category,
        reasons=[reason] if reason else [],
        pros=list_pros(metrics),
        cons=list_cons(metrics),
        adjustments=suggest_adjustments(metrics, policy),
    )

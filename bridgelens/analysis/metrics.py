"""Route metrics calculation.

Derives a :class:`RouteMetrics` record from a single route. Missing or
unparseable USD values count as zero, so this never raises for a route that
passed model validation.
"""

from __future__ import annotations

from bridgelens.analysis.estimators import calculate_bridge_reliability, estimate_liquidity_depth
from bridgelens.analysis.ratings import DEFAULT_TOOL_RATINGS, ToolRatings
from bridgelens.models.comparison import RouteMetrics
from bridgelens.models.route import Route, RouteStep
from bridgelens.models.types import parse_usd

# Slippage (percent) assumed when no step reports one
DEFAULT_SLIPPAGE_TOLERANCE = 2.0

# Gas efficiency reported when the input value is unknown
UNKNOWN_GAS_EFFICIENCY = 100.0


def _step_fees_usd(step: RouteStep) -> float:
    return sum(parse_usd(amount) for amount in step.estimate.fee_costs_usd)


def _step_gas_usd(step: RouteStep) -> float:
    return sum(parse_usd(amount) for amount in step.estimate.gas_costs_usd)


def calculate_complexity_score(route: Route) -> float:
    """Step count, plus 2 for any cross-chain step and 0.5 per swap."""
    score = float(route.step_count)
    if any(step.is_cross_chain for step in route.steps):
        score += 2
    score += 0.5 * sum(1 for step in route.steps if step.is_swap)
    return score


def extract_slippage_tolerance(route: Route) -> float | None:
    """Return the first non-zero step slippage, in percent."""
    for step in route.steps:
        if step.action.slippage:
            return step.action.slippage * 100
    return None


def calculate_route_metrics(
    route: Route,
    ratings: ToolRatings = DEFAULT_TOOL_RATINGS,
) -> RouteMetrics:
    """Calculate comparison metrics for a route.

    Args:
        route: The route to measure
        ratings: Liquidity and reliability tables

    Returns:
        Freshly derived RouteMetrics
    """
    total_gas_usd = sum(_step_gas_usd(step) for step in route.steps)
    total_fees_usd = sum(_step_fees_usd(step) for step in route.steps) + total_gas_usd

    estimated_time = sum(step.estimate.execution_duration for step in route.steps)

    from_amount_usd = parse_usd(route.from_amount_usd)
    to_amount_usd = parse_usd(route.to_amount_usd)
    if from_amount_usd > 0:
        price_impact = abs(from_amount_usd - to_amount_usd - total_fees_usd) / from_amount_usd
        gas_efficiency = total_gas_usd / from_amount_usd * 100
    else:
        price_impact = 0.0
        gas_efficiency = UNKNOWN_GAS_EFFICIENCY

    slippage = extract_slippage_tolerance(route)

    return RouteMetrics(
        total_fees_usd=total_fees_usd,
        total_gas_usd=total_gas_usd,
        estimated_time=estimated_time,
        price_impact=price_impact,
        complexity_score=calculate_complexity_score(route),
        gas_efficiency=gas_efficiency,
        liquidity_score=estimate_liquidity_depth(route, ratings).score,
        bridge_reliability=calculate_bridge_reliability(route, ratings),
        slippage_tolerance=slippage if slippage is not None else DEFAULT_SLIPPAGE_TOLERANCE,
    )

"""Route deduplication and ranking."""

from __future__ import annotations

import structlog

from bridgelens.analysis.config import DEFAULT_SCORING_POLICY, ScoringPolicy
from bridgelens.analysis.metrics import calculate_route_metrics
from bridgelens.analysis.ratings import DEFAULT_TOOL_RATINGS, ToolRatings
from bridgelens.models.comparison import RouteMetrics
from bridgelens.models.route import Route
from bridgelens.models.types import normalize_address

logger = structlog.get_logger()

RouteSignature = tuple[int, int, str, str, tuple[str, ...]]


def route_signature(route: Route) -> RouteSignature:
    """Structural identity of a route, ignoring its id and amounts.

    Two routes with the same chains, tokens and ordered tool names are
    treated as the same path.
    """
    return (
        route.from_chain_id,
        route.to_chain_id,
        normalize_address(route.from_token.address),
        normalize_address(route.to_token.address),
        tuple(route.tools),
    )


def dedupe_routes(routes: list[Route]) -> list[Route]:
    """Drop structurally duplicate routes.

    The first occurrence of each signature wins and the relative order of
    the survivors is preserved, so applying this twice changes nothing.
    """
    seen: set[RouteSignature] = set()
    unique: list[Route] = []
    for route in routes:
        signature = route_signature(route)
        if signature in seen:
            continue
        seen.add(signature)
        unique.append(route)

    if len(unique) < len(routes):
        logger.debug("duplicate_routes_removed", total=len(routes), unique=len(unique))
    return unique


def calculate_optimal_score(
    metrics: RouteMetrics,
    policy: ScoringPolicy = DEFAULT_SCORING_POLICY,
) -> float:
    """Weighted composite score balancing cost, time, reliability and simplicity.

    Each component is on a 0-100 scale (higher is better):
        fee         = max(0, 100 - total_fees_usd)
        time        = max(0, 100 - minutes * 2)
        reliability = bridge_reliability * 10
        complexity  = max(0, 100 - complexity_score * 10)
    """
    fee_score = max(0.0, 100 - metrics.total_fees_usd)
    time_score = max(0.0, 100 - metrics.estimated_minutes * policy.time_penalty_per_minute)
    reliability_score = metrics.bridge_reliability * 10
    complexity_score = max(0.0, 100 - metrics.complexity_score * policy.complexity_penalty)

    return (
        fee_score * policy.fee_weight
        + time_score * policy.time_weight
        + reliability_score * policy.reliability_weight
        + complexity_score * policy.complexity_weight
    )


def rank_routes(
    routes: list[Route],
    ratings: ToolRatings = DEFAULT_TOOL_RATINGS,
    policy: ScoringPolicy = DEFAULT_SCORING_POLICY,
) -> list[Route]:
    """Sort routes by optimal score, best first.

    The sort is stable: routes with equal scores keep their input order.
    """
    scores = {
        id(route): calculate_optimal_score(calculate_route_metrics(route, ratings), policy)
        for route in routes
    }
    return sorted(routes, key=lambda route: scores[id(route)], reverse=True)

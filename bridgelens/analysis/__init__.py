"""Route analysis for failed cross-chain transactions.

This package scores candidate routes and builds recommendations:
- Metrics derivation per route (fees, time, price impact, complexity, ...)
- Heuristic estimators (liquidity, bridge reliability, success, risk)
- Alternative request generation and concurrent fan-out
- Deduplication, optimal-score ranking and recommendation labels
- Failure reason analysis and error diagnosis

Usage:
    from bridgelens.analysis import RouteComparator
    from bridgelens.client import LiFiClient

    comparator = RouteComparator(client=LiFiClient())
    result = await comparator.compare(status)

    if result.is_valid:
        show(result.comparison)
    else:
        explain(result.outcome)

Substituting rating tables:
    from bridgelens.analysis import StaticToolRatings

    ratings = StaticToolRatings(bridge_reliability={"hop": 7.0})
    comparator = RouteComparator(client=client, ratings=ratings)
"""

from bridgelens.analysis.alternatives import (
    ALTERNATIVE_OVERRIDES,
    extract_route_parameters,
    generate_alternative_configs,
)
from bridgelens.analysis.comparator import RouteComparator, RoutingClient, extract_original_route
from bridgelens.analysis.config import DEFAULT_SCORING_POLICY, ScoringPolicy
from bridgelens.analysis.diagnostics import (
    ErrorContext,
    analyze_errors,
    calculate_total_fee_usd,
    can_retry_transaction,
    diagnose_transaction,
    is_temporary_error,
    suggest_alternatives,
)
from bridgelens.analysis.estimators import (
    calculate_bridge_reliability,
    calculate_risk_level,
    calculate_success_probability,
    estimate_liquidity_depth,
)
from bridgelens.analysis.failures import analyze_failure_reasons, describe_substatus
from bridgelens.analysis.metrics import calculate_route_metrics
from bridgelens.analysis.ranking import (
    calculate_optimal_score,
    dedupe_routes,
    rank_routes,
    route_signature,
)
from bridgelens.analysis.ratings import (
    DEFAULT_TOOL_RATINGS,
    LiquidityDepth,
    StaticToolRatings,
    ToolRatings,
)
from bridgelens.analysis.recommendations import assign_category, generate_route_recommendation
from bridgelens.analysis.result import ComparisonError, ComparisonOutcome, ComparisonResult

__all__ = [
    # Orchestration
    "RouteComparator",
    "RoutingClient",
    "extract_original_route",
    # Result
    "ComparisonResult",
    "ComparisonError",
    "ComparisonOutcome",
    # Config
    "ScoringPolicy",
    "DEFAULT_SCORING_POLICY",
    # Ratings
    "ToolRatings",
    "StaticToolRatings",
    "LiquidityDepth",
    "DEFAULT_TOOL_RATINGS",
    # Metrics and estimators
    "calculate_route_metrics",
    "estimate_liquidity_depth",
    "calculate_bridge_reliability",
    "calculate_success_probability",
    "calculate_risk_level",
    # Alternatives
    "ALTERNATIVE_OVERRIDES",
    "extract_route_parameters",
    "generate_alternative_configs",
    # Ranking
    "route_signature",
    "dedupe_routes",
    "calculate_optimal_score",
    "rank_routes",
    # Recommendations
    "assign_category",
    "generate_route_recommendation",
    # Failures
    "analyze_failure_reasons",
    "describe_substatus",
    # Diagnostics
    "ErrorContext",
    "analyze_errors",
    "calculate_total_fee_usd",
    "can_retry_transaction",
    "diagnose_transaction",
    "is_temporary_error",
    "suggest_alternatives",
]

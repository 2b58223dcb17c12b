"""Route comparison orchestration.

The RouteComparator turns a failed transaction's status into a ranked,
annotated :class:`RouteComparison`:

1. Reconstruct the original routes request (skip if data is insufficient)
2. Submit every request variant to the routing API concurrently
3. Deduplicate the candidates and derive metrics per route
4. Estimate success probability and risk, assign recommendation labels
5. Sort best-first by optimal score

Each call is independent; nothing is cached or shared between comparisons.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

import structlog

from bridgelens.analysis.alternatives import extract_route_parameters, generate_alternative_configs
from bridgelens.analysis.config import DEFAULT_SCORING_POLICY, ScoringPolicy
from bridgelens.analysis.estimators import calculate_risk_level, calculate_success_probability
from bridgelens.analysis.failures import analyze_failure_reasons
from bridgelens.analysis.metrics import calculate_route_metrics
from bridgelens.analysis.ranking import calculate_optimal_score, dedupe_routes
from bridgelens.analysis.ratings import DEFAULT_TOOL_RATINGS, ToolRatings
from bridgelens.analysis.recommendations import generate_route_recommendation
from bridgelens.analysis.result import ComparisonError, ComparisonResult
from bridgelens.constants import NO_ALTERNATIVES_REASON
from bridgelens.models.comparison import (
    AlternativeRoute,
    OriginalRoute,
    RouteComparison,
    RouteRecommendation,
)
from bridgelens.models.route import Route, RoutesRequest
from bridgelens.models.status import StatusResponse

logger = structlog.get_logger()


class RoutingClient(Protocol):
    """Protocol for the routing API collaborator."""

    async def get_routes(self, request: RoutesRequest) -> list[Route]:
        """Return candidate routes for a request (possibly none)."""
        ...


def extract_original_route(status: StatusResponse) -> OriginalRoute | None:
    """Reconstruct the route a transaction took, as far as status data allows.

    Destination fields fall back to the sending side when the receiving side
    is unknown. Returns None when the sending token is unknown.
    """
    sending = status.sending
    if sending.token is None:
        return None

    receiving = status.receiving
    to_chain_id = receiving.chain_id if receiving is not None else None
    to_amount = receiving.amount if receiving is not None else None
    to_amount_usd = receiving.amount_usd if receiving is not None else None
    to_token = receiving.token if receiving is not None else None

    return OriginalRoute(
        from_chain_id=sending.chain_id or 0,
        from_amount=sending.amount or "0",
        from_amount_usd=sending.amount_usd or "0",
        from_token=sending.token,
        from_address=status.from_address,
        to_chain_id=to_chain_id or sending.chain_id or 0,
        to_amount=to_amount or "0",
        to_amount_usd=to_amount_usd or "0",
        to_amount_min=to_amount or "0",
        to_token=to_token or sending.token,
        to_address=status.to_address,
        gas_cost_usd=sending.gas_amount_usd,
    )


class RouteComparator:
    """Compares alternative routes for failed or problematic transactions.

    Args:
        client: Routing API collaborator (LiFiClient in production)
        ratings: Tool reliability/liquidity tables. Defaults to the static tables.
        policy: Scoring constants. Defaults to DEFAULT_SCORING_POLICY.
    """

    def __init__(
        self,
        client: RoutingClient,
        ratings: ToolRatings | None = None,
        policy: ScoringPolicy | None = None,
    ) -> None:
        self.client = client
        self.ratings = ratings or DEFAULT_TOOL_RATINGS
        self.policy = policy or DEFAULT_SCORING_POLICY

    async def compare(self, status: StatusResponse) -> ComparisonResult:
        """Compare alternative routes for a transaction.

        Never raises for analysis problems: insufficient input and
        unexpected errors are reported through the result.

        Args:
            status: Status of the failed or problematic transaction

        Returns:
            ComparisonResult whose ``outcome`` tells the caller what to show
        """
        tx_hash = status.sending.tx_hash
        base = extract_route_parameters(status)
        if base is None:
            logger.info("comparison_skipped", tx_hash=tx_hash, reason="insufficient_data")
            return ComparisonResult.with_error(
                ComparisonError.INSUFFICIENT_DATA,
                "Cannot determine both source and destination of the transaction",
            )

        try:
            routes = await self.fetch_candidate_routes(base)
            comparison = self.build_comparison(status, routes)
        except Exception as e:
            logger.exception(
                "comparison_failed",
                tx_hash=tx_hash,
                message="Unexpected error while comparing routes",
            )
            return ComparisonResult.with_error(ComparisonError.ANALYSIS_FAILED, str(e))

        logger.info(
            "comparison_complete",
            tx_hash=tx_hash,
            candidate_count=len(routes),
            alternative_count=len(comparison.alternative_routes),
        )
        return ComparisonResult.with_comparison(comparison)

    async def fetch_alternative_routes(self, status: StatusResponse) -> RouteComparison | None:
        """Compare alternative routes, returning None when no comparison is possible."""
        result = await self.compare(status)
        return result.comparison

    async def fetch_candidate_routes(self, base: RoutesRequest) -> list[Route]:
        """Submit every request variant concurrently and collect all routes.

        Waits for all variants to settle. A failing variant contributes no
        routes and does not affect the others.
        """
        configs = generate_alternative_configs(base)
        results = await asyncio.gather(
            *(self._fetch_variant(index, config) for index, config in enumerate(configs))
        )
        return [route for routes in results for route in routes]

    async def _fetch_variant(self, index: int, request: RoutesRequest) -> list[Route]:
        try:
            return await self.client.get_routes(request)
        except Exception as e:
            options = request.options
            logger.warning(
                "variant_fetch_failed",
                variant=index,
                slippage=options.slippage if options is not None else None,
                error=str(e),
                error_type=type(e).__name__,
            )
            return []

    def build_comparison(self, status: StatusResponse, routes: list[Route]) -> RouteComparison:
        """Analyze candidate routes and assemble the comparison.

        Pure and synchronous; ``routes`` is everything the variants returned.
        """
        if not routes:
            return RouteComparison.empty([NO_ALTERNATIVES_REASON])

        unique = dedupe_routes(routes)
        all_metrics = [calculate_route_metrics(route, self.ratings) for route in unique]

        entries: list[tuple[AlternativeRoute, RouteRecommendation]] = []
        for index, (route, metrics) in enumerate(zip(unique, all_metrics, strict=True)):
            recommendation = generate_route_recommendation(index, all_metrics, self.policy)
            probability = calculate_success_probability(route, metrics, self.policy, self.ratings)
            alternative = AlternativeRoute(
                route=route,
                metrics=metrics,
                recommendation=recommendation.type,
                success_probability=probability,
                risk_level=calculate_risk_level(metrics, probability, self.policy),
                pros=recommendation.pros,
                cons=recommendation.cons,
            )
            entries.append((alternative, recommendation))

        # Stable: equal scores keep deduplicated order
        entries.sort(
            key=lambda entry: calculate_optimal_score(entry[0].metrics, self.policy),
            reverse=True,
        )

        return RouteComparison(
            original_route=extract_original_route(status),
            alternative_routes=[alternative for alternative, _ in entries],
            failure_reasons=analyze_failure_reasons(status),
            recommendations=[recommendation for _, recommendation in entries],
        )

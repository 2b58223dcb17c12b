"""Tests for the RouteComparator orchestration."""

import asyncio

from bridgelens.analysis.comparator import RouteComparator, extract_original_route
from bridgelens.analysis.config import ScoringPolicy
from bridgelens.analysis.ranking import calculate_optimal_score
from bridgelens.analysis.ratings import StaticToolRatings
from bridgelens.analysis.result import ComparisonError, ComparisonOutcome
from bridgelens.client.errors import LiFiApiError
from bridgelens.models.comparison import RouteRecommendationType
from tests.helpers import ARBITRUM, ETHEREUM, USDC_ETH, make_route, make_status, make_step
from tests.helpers.fakes import FakeRoutingClient, GatedRoutingClient


class TestCompare:
    """Tests for RouteComparator.compare."""

    def test_available(self, failed_status, cheap_route, fast_route, safe_route):
        client = FakeRoutingClient(responses=[[cheap_route, fast_route], [safe_route]])
        result = asyncio.run(RouteComparator(client=client).compare(failed_status))

        assert result.is_valid
        assert result.outcome == ComparisonOutcome.AVAILABLE
        comparison = result.comparison
        assert len(comparison.alternative_routes) == 3
        assert len(comparison.recommendations) == 3
        assert comparison.failure_reasons == [
            "Price moved beyond slippage tolerance during execution"
        ]
        assert comparison.original_route is not None

    def test_submits_all_seven_variants(self, failed_status, fake_client):
        asyncio.run(RouteComparator(client=fake_client).compare(failed_status))

        assert len(fake_client.requests) == 7
        assert fake_client.requests[0].options is None
        assert all(request.options is not None for request in fake_client.requests[1:])

    def test_variants_run_concurrently(self, failed_status, cheap_route):
        """All seven requests are in flight before any of them completes."""
        client = GatedRoutingClient(expected=7, routes=[cheap_route])

        result = asyncio.run(RouteComparator(client=client).compare(failed_status))

        assert client.peak == 7
        assert client.timeouts == 0
        assert client.in_flight == 0
        assert result.outcome == ComparisonOutcome.AVAILABLE

    def test_all_variants_fail(self, failed_status):
        error = LiFiApiError(code="500", message="Internal error", status=500)
        client = FakeRoutingClient(responses=[error] * 7)

        result = asyncio.run(RouteComparator(client=client).compare(failed_status))

        assert result.is_valid
        assert result.outcome == ComparisonOutcome.NO_ALTERNATIVES
        assert result.comparison.alternative_routes == []
        assert result.comparison.failure_reasons == ["No alternative routes found"]

    def test_failing_variant_does_not_affect_others(self, failed_status, cheap_route):
        client = FakeRoutingClient(
            responses=[RuntimeError("boom"), [cheap_route], TimeoutError()],
        )
        result = asyncio.run(RouteComparator(client=client).compare(failed_status))

        assert result.outcome == ComparisonOutcome.AVAILABLE
        assert [alt.route.id for alt in result.comparison.alternative_routes] == ["cheap"]

    def test_insufficient_data(self, fake_client):
        status = make_status(receiving=False)
        result = asyncio.run(RouteComparator(client=fake_client).compare(status))

        assert result.error == ComparisonError.INSUFFICIENT_DATA
        assert result.outcome == ComparisonOutcome.INSUFFICIENT_DATA
        assert result.comparison is None
        assert fake_client.requests == []

    def test_unexpected_error_is_reported_as_failed(self, failed_status, cheap_route):
        comparator = RouteComparator(client=FakeRoutingClient(responses=[[cheap_route]]))

        def broken(status, routes):
            raise ValueError("bad data")

        comparator.build_comparison = broken
        result = asyncio.run(comparator.compare(failed_status))

        assert result.error == ComparisonError.ANALYSIS_FAILED
        assert result.outcome == ComparisonOutcome.FAILED
        assert result.error_detail == "bad data"

    def test_fetch_alternative_routes(self, failed_status, cheap_route, fake_client):
        comparator = RouteComparator(client=FakeRoutingClient(responses=[[cheap_route]]))
        comparison = asyncio.run(comparator.fetch_alternative_routes(failed_status))
        assert comparison is not None
        assert comparison.has_alternatives

        skipped = asyncio.run(
            RouteComparator(client=fake_client).fetch_alternative_routes(
                make_status(sending_token=False)
            )
        )
        assert skipped is None


class TestBuildComparison:
    """Tests for RouteComparator.build_comparison."""

    def test_duplicate_paths_keep_first(self, failed_status, fake_client):
        first = make_route(route_id="first")
        second = make_route(route_id="second")

        comparison = RouteComparator(client=fake_client).build_comparison(
            failed_status, [first, second]
        )

        assert [alt.route.id for alt in comparison.alternative_routes] == ["first"]

    def test_sorted_by_optimal_score(
        self, failed_status, fake_client, cheap_route, fast_route, safe_route
    ):
        comparator = RouteComparator(client=fake_client)
        comparison = comparator.build_comparison(
            failed_status, [cheap_route, safe_route, fast_route]
        )

        scores = [calculate_optimal_score(alt.metrics) for alt in comparison.alternative_routes]
        assert scores == sorted(scores, reverse=True)
        assert comparison.best.route.id == "fast"

    def test_recommendations_stay_aligned(
        self, failed_status, fake_client, cheap_route, fast_route, safe_route
    ):
        comparison = RouteComparator(client=fake_client).build_comparison(
            failed_status, [cheap_route, fast_route, safe_route]
        )

        by_id = {alt.route.id: alt.recommendation for alt in comparison.alternative_routes}
        assert by_id == {
            "cheap": RouteRecommendationType.CHEAPEST,
            "fast": RouteRecommendationType.FASTEST,
            "safe": RouteRecommendationType.SAFEST,
        }
        for alternative, recommendation in zip(
            comparison.alternative_routes, comparison.recommendations, strict=True
        ):
            assert alternative.recommendation == recommendation.type
            assert alternative.pros == recommendation.pros
            assert alternative.cons == recommendation.cons

    def test_probability_and_risk_in_range(self, failed_status, fake_client):
        routes = [
            make_route(steps=[]),
            make_route(steps=[make_step(tool="mystery", fee_usd="900", duration=9000)] * 5),
        ]
        comparison = RouteComparator(client=fake_client).build_comparison(failed_status, routes)

        for alternative in comparison.alternative_routes:
            assert 50 <= alternative.success_probability <= 98

    def test_equal_scores_keep_input_order(self, failed_status, fake_client):
        routes = [
            make_route(route_id="a", steps=[make_step(tool="hop")], to_chain_id=10),
            make_route(route_id="b", steps=[make_step(tool="hop")], to_chain_id=137),
        ]
        comparison = RouteComparator(client=fake_client).build_comparison(failed_status, routes)

        assert [alt.route.id for alt in comparison.alternative_routes] == ["a", "b"]

    def test_custom_ratings(self, failed_status, fake_client, cheap_route):
        ratings = StaticToolRatings(bridge_reliability={"symbiosis": 10.0})
        comparison = RouteComparator(client=fake_client, ratings=ratings).build_comparison(
            failed_status, [cheap_route]
        )

        assert comparison.best.metrics.bridge_reliability == 10.0

    def test_empty(self, failed_status, fake_client):
        comparison = RouteComparator(client=fake_client).build_comparison(failed_status, [])

        assert not comparison.has_alternatives
        assert comparison.best is None
        assert comparison.failure_reasons == ["No alternative routes found"]


class TestExtractOriginalRoute:
    """Tests for extract_original_route."""

    def test_from_status(self):
        original = extract_original_route(make_status())

        assert original.id == "original"
        assert original.from_chain_id == ETHEREUM
        assert original.to_chain_id == ARBITRUM
        assert original.from_amount_usd == "1000"
        assert original.to_amount == "990000000"
        assert original.gas_cost_usd == "2.5"

    def test_receiving_falls_back_to_sending(self):
        original = extract_original_route(make_status(receiving=False))

        assert original.to_chain_id == ETHEREUM
        assert original.to_token.address == USDC_ETH
        assert original.to_amount == "0"

    def test_no_sending_token(self):
        assert extract_original_route(make_status(sending_token=False)) is None


class TestCustomPolicy:
    """Tests for comparisons under a non-default scoring policy."""

    def test_wider_probability_clamp(self, failed_status):
        """Probabilities above the default cap survive the pipeline."""
        policy = ScoringPolicy(base_success_probability=130.0, max_success_probability=99.0)
        route = make_route(route_id="direct", steps=[])
        comparator = RouteComparator(client=FakeRoutingClient(responses=[[route]]), policy=policy)

        result = asyncio.run(comparator.compare(failed_status))

        assert result.outcome == ComparisonOutcome.AVAILABLE
        assert result.comparison.best.success_probability == 99.0

    def test_lower_probability_floor(self, failed_status):
        policy = ScoringPolicy(base_success_probability=0.0, min_success_probability=10.0)
        comparator = RouteComparator(
            client=FakeRoutingClient(responses=[[make_route(route_id="r")]]), policy=policy
        )

        result = asyncio.run(comparator.compare(failed_status))

        assert result.outcome == ComparisonOutcome.AVAILABLE
        assert result.comparison.best.success_probability == 10.0

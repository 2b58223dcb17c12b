"""Tests for recommendation labels, pros, cons and adjustments."""

from bridgelens.analysis.metrics import calculate_route_metrics
from bridgelens.analysis.recommendations import (
    CATEGORY_REASONS,
    assign_category,
    generate_route_recommendation,
    list_cons,
    list_pros,
    suggest_adjustments,
)
from bridgelens.models.comparison import RouteMetrics, RouteRecommendationType
from tests.helpers import make_route, make_step


def make_metrics(**overrides) -> RouteMetrics:
    values = {
        "total_fees_usd": 20.0,
        "total_gas_usd": 1.0,
        "estimated_time": 600.0,
        "price_impact": 0.0,
        "complexity_score": 3.0,
        "gas_efficiency": 3.0,
        "liquidity_score": 6.0,
        "bridge_reliability": 7.0,
        "slippage_tolerance": 2.0,
    }
    values.update(overrides)
    return RouteMetrics(**values)


class TestAssignCategory:
    """Tests for assign_category."""

    def test_primary_categories(self, cheap_route, fast_route, safe_route):
        candidates = [calculate_route_metrics(r) for r in (cheap_route, fast_route, safe_route)]

        assert assign_category(0, candidates) == RouteRecommendationType.CHEAPEST
        assert assign_category(1, candidates) == RouteRecommendationType.FASTEST
        assert assign_category(2, candidates) == RouteRecommendationType.SAFEST

    def test_remaining_route_is_alternative(self, cheap_route, fast_route, safe_route):
        plain = make_route(steps=[make_step(tool="hop", fee_usd="18", gas_usd="2", duration=300)])
        candidates = [
            calculate_route_metrics(r) for r in (cheap_route, fast_route, safe_route, plain)
        ]

        assert assign_category(3, candidates) == RouteRecommendationType.ALTERNATIVE

    def test_optimal_when_best_score_without_primary_label(self):
        candidates = [
            make_metrics(total_fees_usd=0.0, estimated_time=3000.0, bridge_reliability=5.0),
            make_metrics(total_fees_usd=50.0, estimated_time=10.0, bridge_reliability=6.0),
            make_metrics(total_fees_usd=40.0, estimated_time=2000.0, bridge_reliability=10.0),
            make_metrics(total_fees_usd=2.0, estimated_time=30.0, bridge_reliability=9.9),
        ]
        assert assign_category(3, candidates) == RouteRecommendationType.OPTIMAL

    def test_single_candidate_is_cheapest(self):
        assert assign_category(0, [make_metrics()]) == RouteRecommendationType.CHEAPEST

    def test_primary_labels_are_unique_with_ties(self):
        """Identical candidates still get at most one of each primary label."""
        candidates = [make_metrics() for _ in range(4)]
        labels = [assign_category(i, candidates) for i in range(len(candidates))]

        for category in (
            RouteRecommendationType.CHEAPEST,
            RouteRecommendationType.FASTEST,
            RouteRecommendationType.SAFEST,
        ):
            assert labels.count(category) <= 1
        assert labels[0] == RouteRecommendationType.CHEAPEST


class TestProsAndCons:
    """Tests for list_pros and list_cons."""

    def test_all_pros(self):
        metrics = make_metrics(
            total_fees_usd=5.0,
            estimated_time=120.0,
            bridge_reliability=9.0,
            complexity_score=1.0,
            gas_efficiency=0.5,
            liquidity_score=9.0,
        )
        assert list_pros(metrics) == [
            "Low transaction fees",
            "Fast execution time",
            "Uses reliable, battle-tested bridges",
            "Simple, straightforward route",
            "Gas efficient",
            "High liquidity depth",
        ]
        assert list_cons(metrics) == []

    def test_all_cons(self):
        metrics = make_metrics(
            total_fees_usd=80.0,
            estimated_time=1800.0,
            bridge_reliability=5.0,
            complexity_score=7.0,
            gas_efficiency=8.0,
            price_impact=0.03,
            liquidity_score=3.0,
        )
        assert list_cons(metrics) == [
            "Higher transaction fees",
            "Longer execution time",
            "Uses less proven bridges",
            "Complex multi-step route",
            "Higher gas costs",
            "Higher price impact",
        ]
        assert list_pros(metrics) == []

    def test_thresholds_are_strict(self):
        metrics = make_metrics(
            total_fees_usd=10.0,
            estimated_time=300.0,
            bridge_reliability=8.0,
            complexity_score=3.0,
            gas_efficiency=2.0,
            liquidity_score=7.0,
        )
        assert list_pros(metrics) == []


class TestSuggestAdjustments:
    """Tests for suggest_adjustments."""

    def test_tight_slippage_with_price_impact(self):
        adjustments = suggest_adjustments(make_metrics(slippage_tolerance=0.5, price_impact=0.01))

        assert adjustments is not None
        assert adjustments.slippage == 3.0

    def test_no_adjustment_with_enough_slippage(self):
        assert suggest_adjustments(make_metrics(slippage_tolerance=2.0, price_impact=0.05)) is None

    def test_no_adjustment_without_price_impact(self):
        assert suggest_adjustments(make_metrics(slippage_tolerance=0.5, price_impact=0.004)) is None


class TestGenerateRouteRecommendation:
    """Tests for generate_route_recommendation."""

    def test_combines_category_reason_pros_and_cons(self):
        candidates = [
            make_metrics(total_fees_usd=5.0, slippage_tolerance=0.5, price_impact=0.02),
            make_metrics(),
        ]
        recommendation = generate_route_recommendation(0, candidates)

        assert recommendation.type == RouteRecommendationType.CHEAPEST
        assert recommendation.reasons == [CATEGORY_REASONS[RouteRecommendationType.CHEAPEST]]
        assert "Low transaction fees" in recommendation.pros
        assert "Higher price impact" in recommendation.cons
        assert recommendation.adjustments is not None

    def test_alternative_has_no_reason(self):
        candidates = [
            make_metrics(total_fees_usd=1.0, estimated_time=60.0, bridge_reliability=9.0),
            make_metrics(total_fees_usd=30.0, estimated_time=900.0, bridge_reliability=6.0),
        ]
        recommendation = generate_route_recommendation(1, candidates)

        assert recommendation.type == RouteRecommendationType.ALTERNATIVE
        assert recommendation.reasons == []

"""Scoring policy for route analysis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringPolicy:
    """Centralized empirical constants for route scoring.

    None of these values are derived from data; they are tuning policy.
    Changing a default changes recommendations and risk levels for every
    caller, so treat it as a behaviour change.

    Attributes:
        fee_weight: Optimal-score weight of the fee score (default: 0.3)
        time_weight: Optimal-score weight of the time score (default: 0.2)
        reliability_weight: Optimal-score weight of bridge reliability (default: 0.3)
        complexity_weight: Optimal-score weight of the complexity score (default: 0.2)
        time_penalty_per_minute: Time score points lost per minute (default: 2)
        complexity_penalty: Complexity score points lost per complexity unit (default: 10)
        base_success_probability: Starting success probability (default: 95)
        min_success_probability: Lower clamp for success probability (default: 50)
        max_success_probability: Upper clamp for success probability (default: 98)
        complexity_probability_penalty: Points lost per complexity unit (default: 2)
        reliability_probability_penalty: Points lost per missing reliability point (default: 3)
        low_liquidity_threshold / low_liquidity_penalty: Liquidity score below
            which 15 points are lost
        medium_liquidity_threshold / medium_liquidity_penalty: Liquidity score
            below which 5 points are lost
        high_price_impact / high_price_impact_penalty: Price impact (fraction)
            above which 10 points are lost
        medium_price_impact / medium_price_impact_penalty: Price impact
            above which 5 points are lost
        high_gas_efficiency / high_gas_penalty: Gas percentage above which
            10 points are lost
        medium_gas_efficiency / medium_gas_penalty: Gas percentage above which
            5 points are lost
        unknown_bridge_penalty: Points lost if any step uses a tool outside
            the well-known bridge list (default: 10)
        high_risk_probability / high_risk_complexity / high_risk_reliability:
            HIGH risk when probability is below, complexity above or
            reliability below these values
        medium_risk_probability / medium_risk_complexity / medium_risk_reliability:
            MEDIUM risk thresholds, checked after HIGH
        adjust_below_slippage: Suggest a slippage change when tolerance (percent)
            is below this value (default: 2)
        adjust_above_price_impact: ... and price impact (fraction) is above
            this value (default: 0.005)
        suggested_slippage: Slippage (percent) to suggest (default: 3)
    """

    # Optimal score weights
    fee_weight: float = 0.3
    time_weight: float = 0.2
    reliability_weight: float = 0.3
    complexity_weight: float = 0.2
    time_penalty_per_minute: float = 2.0
    complexity_penalty: float = 10.0

    # Success probability
    base_success_probability: float = 95.0
    min_success_probability: float = 50.0
    max_success_probability: float = 98.0
    complexity_probability_penalty: float = 2.0
    reliability_probability_penalty: float = 3.0
    low_liquidity_threshold: float = 4.0
    low_liquidity_penalty: float = 15.0
    medium_liquidity_threshold: float = 7.0
    medium_liquidity_penalty: float = 5.0
    high_price_impact: float = 0.02
    high_price_impact_penalty: float = 10.0
    medium_price_impact: float = 0.01
    medium_price_impact_penalty: float = 5.0
    high_gas_efficiency: float = 10.0
    high_gas_penalty: float = 10.0
    medium_gas_efficiency: float = 5.0
    medium_gas_penalty: float = 5.0
    unknown_bridge_penalty: float = 10.0

    # Risk level
    high_risk_probability: float = 70.0
    high_risk_complexity: float = 6.0
    high_risk_reliability: float = 6.0
    medium_risk_probability: float = 85.0
    medium_risk_complexity: float = 3.0
    medium_risk_reliability: float = 8.0

    # Adjustments
    adjust_below_slippage: float = 2.0
    adjust_above_price_impact: float = 0.005
    suggested_slippage: float = 3.0

    def __post_init__(self) -> None:
        """Validate the success probability clamp."""
        if not 0 <= self.min_success_probability <= self.max_success_probability <= 100:
            raise ValueError(
                "success probability bounds must satisfy 0 <= min <= max <= 100, got "
                f"min={self.min_success_probability}, max={self.max_success_probability}"
            )


# Default policy instance
DEFAULT_SCORING_POLICY = ScoringPolicy()

"""Comparison result types."""

from dataclasses import dataclass
from enum import Enum

from bridgelens.models.comparison import RouteComparison


class ComparisonError(Enum):
    """Reasons a comparison could not be produced."""

    INSUFFICIENT_DATA = "insufficient_data"
    ANALYSIS_FAILED = "analysis_failed"


class ComparisonOutcome(str, Enum):
    """What a caller should present for a comparison request."""

    AVAILABLE = "available"
    NO_ALTERNATIVES = "no_alternatives"
    INSUFFICIENT_DATA = "insufficient_data"
    FAILED = "failed"


@dataclass(frozen=True)
class ComparisonResult:
    """Result of a route comparison.

    Makes the three caller-visible outcomes explicit instead of folding
    "not possible" and "failed" into a bare None.

    Attributes:
        comparison: The comparison, or None if it could not be produced.
        error: If no comparison was produced, why.
        error_detail: Optional human-readable detail about the error.

    Examples:
        result = ComparisonResult.with_comparison(comparison)
        assert result.is_valid

        result = ComparisonResult.with_error(ComparisonError.INSUFFICIENT_DATA)
        assert result.outcome == ComparisonOutcome.INSUFFICIENT_DATA
    """

    comparison: RouteComparison | None
    error: ComparisonError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if a comparison was produced (even one without alternatives)."""
        return self.error is None and self.comparison is not None

    @property
    def is_error(self) -> bool:
        """True if no comparison was produced."""
        return not self.is_valid

    @property
    def outcome(self) -> ComparisonOutcome:
        if self.error == ComparisonError.INSUFFICIENT_DATA:
            return ComparisonOutcome.INSUFFICIENT_DATA
        if self.comparison is None:
            return ComparisonOutcome.FAILED
        if self.comparison.has_alternatives:
            return ComparisonOutcome.AVAILABLE
        return ComparisonOutcome.NO_ALTERNATIVES

    @classmethod
    def with_comparison(cls, comparison: RouteComparison) -> "ComparisonResult":
        """Create a successful result."""
        return cls(comparison=comparison)

    @classmethod
    def with_error(cls, error: ComparisonError, detail: str | None = None) -> "ComparisonResult":
        """Create an error result."""
        return cls(comparison=None, error=error, error_detail=detail)

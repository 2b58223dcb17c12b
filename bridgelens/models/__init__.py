"""Pydantic models for LI.FI data structures and comparison results."""

from bridgelens.models.comparison import (
    AlternativeRoute,
    OriginalRoute,
    RiskLevel,
    RouteAdjustments,
    RouteComparison,
    RouteMetrics,
    RouteRecommendation,
    RouteRecommendationType,
)
from bridgelens.models.diagnosis import (
    ApiErrorCode,
    ErrorCategory,
    ErrorSeverity,
    ErrorSummary,
    ToolErrorCode,
    TransactionDiagnosis,
    TransactionType,
)
from bridgelens.models.route import (
    AllowDenyPrefer,
    FeeCost,
    GasCost,
    Route,
    RouteOptions,
    RouteOrder,
    RoutesRequest,
    RoutesResponse,
    RouteStep,
    StepAction,
    StepEstimate,
    StepType,
    TokenInfo,
    ToolDetails,
)
from bridgelens.models.status import (
    IncludedStep,
    StatusResponse,
    ToolError,
    TransactionInfo,
    TransactionStatus,
    TransactionSubstatus,
)
from bridgelens.models.types import Amount, UsdValue, normalize_address, parse_usd

__all__ = [
    # Types
    "Amount",
    "UsdValue",
    "normalize_address",
    "parse_usd",
    # Route models
    "AllowDenyPrefer",
    "FeeCost",
    "GasCost",
    "Route",
    "RouteOptions",
    "RouteOrder",
    "RoutesRequest",
    "RoutesResponse",
    "RouteStep",
    "StepAction",
    "StepEstimate",
    "StepType",
    "TokenInfo",
    "ToolDetails",
    # Status models
    "IncludedStep",
    "StatusResponse",
    "ToolError",
    "TransactionInfo",
    "TransactionStatus",
    "TransactionSubstatus",
    # Comparison models
    "AlternativeRoute",
    "OriginalRoute",
    "RiskLevel",
    "RouteAdjustments",
    "RouteComparison",
    "RouteMetrics",
    "RouteRecommendation",
    "RouteRecommendationType",
    # Diagnosis models
    "ApiErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "ErrorSummary",
    "ToolErrorCode",
    "TransactionDiagnosis",
    "TransactionType",
]

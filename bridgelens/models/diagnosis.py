"""Pydantic models for transaction error diagnosis.

Error codes follow the LI.FI error reference:
https://docs.li.fi/api-reference/error-codes
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, Field


class ApiErrorCode(IntEnum):
    """Numeric codes of LI.FI API errors (sent as strings on the wire)."""

    DEFAULT = 1000
    FAILED_TO_BUILD_TRANSACTION = 1001
    NO_QUOTE = 1002
    NOT_FOUND = 1003
    NOT_PROCESSABLE = 1004
    RATE_LIMIT = 1005
    SERVER = 1006
    SLIPPAGE = 1007
    THIRD_PARTY = 1008
    TIMEOUT = 1009
    UNAUTHORIZED = 1010
    VALIDATION = 1011
    RPC_FAILURE = 1012
    MALFORMED_SCHEMA = 1013

    @property
    def wire(self) -> str:
        """The code as it appears in an error response."""
        return str(self.value)


class ToolErrorCode(str, Enum):
    """Codes reported by individual bridges and exchanges."""

    NO_POSSIBLE_ROUTE = "NO_POSSIBLE_ROUTE"
    INSUFFICIENT_LIQUIDITY = "INSUFFICIENT_LIQUIDITY"
    TOOL_TIMEOUT = "TOOL_TIMEOUT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    RPC_ERROR = "RPC_ERROR"
    AMOUNT_TOO_LOW = "AMOUNT_TOO_LOW"
    AMOUNT_TOO_HIGH = "AMOUNT_TOO_HIGH"
    FEES_HIGHER_THAN_AMOUNT = "FEES_HIGHER_THAN_AMOUNT"
    DIFFERENT_RECIPIENT_NOT_SUPPORTED = "DIFFERENT_RECIPIENT_NOT_SUPPORTED"
    TOOL_SPECIFIC_ERROR = "TOOL_SPECIFIC_ERROR"
    CANNOT_GUARANTEE_MIN_AMOUNT = "CANNOT_GUARANTEE_MIN_AMOUNT"


class ErrorSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory(str, Enum):
    """Area the primary issue belongs to."""

    NETWORK = "network"
    LIQUIDITY = "liquidity"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    SYSTEM = "system"


class TransactionType(str, Enum):
    SWAP = "swap"
    BRIDGE = "bridge"
    UNKNOWN = "unknown"


class ErrorSummary(BaseModel):
    """Combined view of every error attached to a transaction.

    Attributes:
        severity: CRITICAL if any error needs user action before retrying,
            INFO if every error is informational, WARNING otherwise
        category: Area of the first matching error group
        is_retryable: False only when every error is known to be permanent
        estimated_resolution_time: Rough time until a retry may succeed
        primary_suggestion: The single most useful next step
        error_count: API, tool and substatus errors counted together
        affected_services: Tools that reported errors, in first-seen order
    """

    severity: ErrorSeverity
    category: ErrorCategory
    is_retryable: bool = Field(alias="isRetryable")
    estimated_resolution_time: str | None = Field(default=None, alias="estimatedResolutionTime")
    primary_suggestion: str = Field(alias="primarySuggestion")
    error_count: int = Field(ge=0, alias="errorCount")
    affected_services: list[str] = Field(default_factory=list, alias="affectedServices")

    model_config = {"populate_by_name": True, "frozen": True}


class TransactionDiagnosis(BaseModel):
    """Error summary and retry guidance for one transaction status."""

    summary: ErrorSummary
    is_temporary: bool = Field(alias="isTemporary")
    can_retry: bool = Field(alias="canRetry")
    suggested_alternatives: list[str] = Field(
        default_factory=list, alias="suggestedAlternatives"
    )
    total_fee_usd: float | None = Field(default=None, alias="totalFeeUSD")
    transaction_type: TransactionType = Field(alias="transactionType")

    model_config = {"populate_by_name": True, "frozen": True}

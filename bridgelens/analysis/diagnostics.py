"""Error diagnosis for failed and stuck transactions.

Combines the API error, the per-tool errors and the substatus of a status
response into a single summary with severity, category, retryability and
suggested next steps. Complements :mod:`bridgelens.analysis.failures`,
which explains the substatus alone.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from bridgelens.constants import get_chain_name
from bridgelens.models.diagnosis import (
    ApiErrorCode,
    ErrorCategory,
    ErrorSeverity,
    ErrorSummary,
    ToolErrorCode,
    TransactionDiagnosis,
    TransactionType,
)
from bridgelens.models.route import FeeCost
from bridgelens.models.status import (
    ApiErrorDetail,
    StatusResponse,
    ToolError,
    TransactionStatus,
    TransactionSubstatus,
)

logger = structlog.get_logger()

# Codes needing user action before a retry can succeed
CRITICAL_CODES = frozenset(
    {
        ApiErrorCode.FAILED_TO_BUILD_TRANSACTION.wire,
        ApiErrorCode.NOT_PROCESSABLE.wire,
        ApiErrorCode.UNAUTHORIZED.wire,
        ApiErrorCode.VALIDATION.wire,
        ApiErrorCode.MALFORMED_SCHEMA.wire,
        ToolErrorCode.FEES_HIGHER_THAN_AMOUNT.value,
        TransactionSubstatus.INSUFFICIENT_BALANCE.value,
        TransactionSubstatus.INSUFFICIENT_ALLOWANCE.value,
        TransactionSubstatus.OUT_OF_GAS.value,
    }
)

INFO_CODES = frozenset(
    {
        ToolErrorCode.AMOUNT_TOO_LOW.value,
        ToolErrorCode.DIFFERENT_RECIPIENT_NOT_SUPPORTED.value,
    }
)

# Checked in order; the first group with a matching code names the category
CATEGORY_CODES: list[tuple[ErrorCategory, frozenset[str]]] = [
    (
        ErrorCategory.NETWORK,
        frozenset(
            {
                ToolErrorCode.TOOL_TIMEOUT.value,
                ToolErrorCode.RPC_ERROR.value,
                ApiErrorCode.TIMEOUT.wire,
                ApiErrorCode.RPC_FAILURE.wire,
            }
        ),
    ),
    (
        ErrorCategory.LIQUIDITY,
        frozenset(
            {
                ToolErrorCode.INSUFFICIENT_LIQUIDITY.value,
                ToolErrorCode.NO_POSSIBLE_ROUTE.value,
                ApiErrorCode.NO_QUOTE.wire,
            }
        ),
    ),
    (
        ErrorCategory.CONFIGURATION,
        frozenset(
            {
                ToolErrorCode.AMOUNT_TOO_LOW.value,
                ToolErrorCode.AMOUNT_TOO_HIGH.value,
                ToolErrorCode.DIFFERENT_RECIPIENT_NOT_SUPPORTED.value,
            }
        ),
    ),
    (
        ErrorCategory.VALIDATION,
        frozenset(
            {
                ApiErrorCode.VALIDATION.wire,
                ApiErrorCode.MALFORMED_SCHEMA.wire,
                ApiErrorCode.NOT_PROCESSABLE.wire,
            }
        ),
    ),
]

NON_RETRYABLE_CODES = frozenset(
    {
        ApiErrorCode.NOT_FOUND.wire,
        ApiErrorCode.NOT_PROCESSABLE.wire,
        ApiErrorCode.UNAUTHORIZED.wire,
        ApiErrorCode.VALIDATION.wire,
        ApiErrorCode.MALFORMED_SCHEMA.wire,
        ToolErrorCode.AMOUNT_TOO_LOW.value,
        ToolErrorCode.AMOUNT_TOO_HIGH.value,
        ToolErrorCode.FEES_HIGHER_THAN_AMOUNT.value,
        ToolErrorCode.DIFFERENT_RECIPIENT_NOT_SUPPORTED.value,
        TransactionSubstatus.INSUFFICIENT_BALANCE.value,
        TransactionSubstatus.INSUFFICIENT_ALLOWANCE.value,
    }
)

TEMPORARY_CODES = frozenset(
    {
        ToolErrorCode.TOOL_TIMEOUT.value,
        ToolErrorCode.RPC_ERROR.value,
        ToolErrorCode.INSUFFICIENT_LIQUIDITY.value,
        ApiErrorCode.TIMEOUT.wire,
        ApiErrorCode.THIRD_PARTY.wire,
        ApiErrorCode.RATE_LIMIT.wire,
        ApiErrorCode.SERVER.wire,
    }
)

# Checked in order; the first matching group gives the suggestion
PRIMARY_SUGGESTIONS: list[tuple[frozenset[str], str]] = [
    (
        frozenset({ToolErrorCode.FEES_HIGHER_THAN_AMOUNT.value}),
        "Increase transfer amount or wait for lower gas fees",
    ),
    (
        frozenset({TransactionSubstatus.INSUFFICIENT_BALANCE.value}),
        "Add more funds to your wallet to cover the transfer and gas fees",
    ),
    (
        frozenset({TransactionSubstatus.INSUFFICIENT_ALLOWANCE.value}),
        "Approve token spending for the bridge contract",
    ),
    (
        frozenset(
            {ToolErrorCode.INSUFFICIENT_LIQUIDITY.value, ToolErrorCode.NO_POSSIBLE_ROUTE.value}
        ),
        "Try reducing the amount or using different tokens with better liquidity",
    ),
    (
        frozenset({ToolErrorCode.TOOL_TIMEOUT.value, ToolErrorCode.RPC_ERROR.value}),
        "Retry the request or try during off-peak hours",
    ),
    (
        frozenset({ApiErrorCode.RATE_LIMIT.wire}),
        "Reduce request frequency and implement exponential backoff",
    ),
]
DEFAULT_SUGGESTION = "Review error details and follow the suggested actions"

RESOLUTION_TIMES: list[tuple[frozenset[str], str]] = [
    (frozenset({ApiErrorCode.RATE_LIMIT.wire}), "1-60 minutes"),
    (
        frozenset({ToolErrorCode.TOOL_TIMEOUT.value, ToolErrorCode.RPC_ERROR.value}),
        "5-30 minutes",
    ),
    (frozenset({ToolErrorCode.INSUFFICIENT_LIQUIDITY.value}), "1-24 hours"),
    (
        frozenset(
            {
                ToolErrorCode.AMOUNT_TOO_LOW.value,
                ToolErrorCode.AMOUNT_TOO_HIGH.value,
                ToolErrorCode.FEES_HIGHER_THAN_AMOUNT.value,
                TransactionSubstatus.INSUFFICIENT_BALANCE.value,
                TransactionSubstatus.INSUFFICIENT_ALLOWANCE.value,
            }
        ),
        "Immediate with fixes",
    ),
]

RETRYABLE_SUBSTATUSES = frozenset(
    {
        TransactionSubstatus.OUT_OF_GAS.value,
        TransactionSubstatus.SLIPPAGE_EXCEEDED.value,
        TransactionSubstatus.EXPIRED.value,
    }
)


@dataclass(frozen=True)
class ErrorContext:
    """Transfer details used to make suggestions specific."""

    transaction_hash: str | None = None
    from_chain: str | None = None
    to_chain: str | None = None
    from_token: str | None = None
    to_token: str | None = None
    amount: str | None = None
    bridge: str | None = None
    timestamp: int | None = None

    @classmethod
    def from_status(cls, status: StatusResponse) -> ErrorContext:
        """Build a context from a status, naming chains for display."""
        sending = status.sending
        receiving = status.receiving
        return cls(
            transaction_hash=sending.tx_hash,
            from_chain=get_chain_name(sending.chain_id) if sending.chain_id else None,
            to_chain=(
                get_chain_name(receiving.chain_id)
                if receiving is not None and receiving.chain_id
                else None
            ),
            from_token=sending.token.symbol if sending.token else None,
            to_token=receiving.token.symbol if receiving and receiving.token else None,
            amount=sending.amount,
            bridge=status.tool,
            timestamp=sending.timestamp,
        )


@dataclass(frozen=True)
class ExtractedErrors:
    """Error fields pulled out of a status response."""

    api_error: ApiErrorDetail | None = None
    tool_errors: list[ToolError] | None = None
    substatus: str | None = None
    substatus_message: str | None = None


def extract_errors(status: StatusResponse) -> ExtractedErrors:
    return ExtractedErrors(
        api_error=status.error,
        tool_errors=status.errors,
        substatus=status.substatus,
        substatus_message=status.substatus_message,
    )


def _first_match(codes: list[str], groups: Iterable[tuple[frozenset[str], str]]) -> str | None:
    for group, value in groups:
        if any(code in group for code in codes):
            return value
    return None


def _determine_severity(codes: list[str]) -> ErrorSeverity:
    if any(code in CRITICAL_CODES for code in codes):
        return ErrorSeverity.CRITICAL
    if all(code in INFO_CODES for code in codes):
        return ErrorSeverity.INFO
    return ErrorSeverity.WARNING


def _categorize(codes: list[str]) -> ErrorCategory:
    for category, group in CATEGORY_CODES:
        if any(code in group for code in codes):
            return category
    return ErrorCategory.SYSTEM


def analyze_errors(
    api_error: ApiErrorDetail | None = None,
    tool_errors: list[ToolError] | None = None,
    substatus: str | None = None,
) -> ErrorSummary:
    """Summarize every error attached to a transaction.

    Errors are collected in order: the API error, each tool error, then the
    substatus. With no errors at all the summary is INFO severity and not
    retryable.

    Args:
        api_error: Top-level API error of the status response
        tool_errors: Errors reported by individual bridges and exchanges
        substatus: Raw substatus of the transfer

    Returns:
        ErrorSummary with severity, category and guidance
    """
    codes: list[str] = []
    affected_services: list[str] = []

    if api_error is not None:
        codes.append(api_error.code)
    for error in tool_errors or []:
        codes.append(error.code)
        if error.tool and error.tool not in affected_services:
            affected_services.append(error.tool)
    if substatus:
        codes.append(substatus)

    return ErrorSummary(
        severity=_determine_severity(codes),
        category=_categorize(codes),
        # An empty error list counts as non-retryable
        is_retryable=not all(code in NON_RETRYABLE_CODES for code in codes),
        estimated_resolution_time=_first_match(codes, RESOLUTION_TIMES),
        primary_suggestion=_first_match(codes, PRIMARY_SUGGESTIONS) or DEFAULT_SUGGESTION,
        error_count=len(codes),
        affected_services=affected_services,
    )


def is_temporary_error(
    api_error: ApiErrorDetail | None = None,
    tool_errors: list[ToolError] | None = None,
) -> bool:
    """Return True if the errors are likely to clear up on their own."""
    if api_error is not None and api_error.code in TEMPORARY_CODES:
        return True
    if tool_errors is not None:
        return any(error.code in TEMPORARY_CODES for error in tool_errors)
    return False


def suggest_alternatives(
    tool_errors: list[ToolError] | None,
    context: ErrorContext | None = None,
) -> list[str]:
    """Suggest user actions for the tool error codes present."""
    if not tool_errors:
        return []

    codes = {error.code for error in tool_errors}
    suggestions: list[str] = []

    if codes & {ToolErrorCode.INSUFFICIENT_LIQUIDITY.value, ToolErrorCode.NO_POSSIBLE_ROUTE.value}:
        suggestions.append("Try splitting large trades into smaller amounts")
        suggestions.append("Consider using different token pairs with better liquidity")
        if context is not None and context.from_chain and context.to_chain:
            suggestions.append(
                f"Try alternative bridges for {context.from_chain} -> {context.to_chain}"
            )

    if codes & {ToolErrorCode.TOOL_TIMEOUT.value, ToolErrorCode.RPC_ERROR.value}:
        suggestions.append("Retry during off-peak hours (early morning UTC)")
        suggestions.append("Use alternative RPC endpoints if available")

    if ToolErrorCode.AMOUNT_TOO_LOW.value in codes:
        suggestions.append("Check minimum transfer amounts for each bridge")
        suggestions.append("Combine multiple small transfers into one larger transfer")

    if ToolErrorCode.AMOUNT_TOO_HIGH.value in codes:
        suggestions.append("Split into multiple smaller transactions")
        suggestions.append("Check daily/weekly limits for the bridge")

    if ToolErrorCode.FEES_HIGHER_THAN_AMOUNT.value in codes:
        suggestions.append("Wait for lower gas prices on the network")
        suggestions.append("Consider if the transfer is economically viable")
        suggestions.append("Try bridges with lower fee structures")

    return suggestions


def can_retry_transaction(status: TransactionStatus, substatus: str | None) -> bool:
    """Return True if resubmitting the same transfer may succeed.

    Only failures caused by gas, price movement or expiry qualify; completed
    and pending transfers never do.
    """
    if status != TransactionStatus.FAILED or substatus is None:
        return False
    return substatus in RETRYABLE_SUBSTATUSES


def calculate_total_fee_usd(fee_costs: list[FeeCost] | None) -> float | None:
    """Sum the USD amounts of fee costs, or None if none is known."""
    if not fee_costs:
        return None
    amounts = [float(fee.amount_usd) for fee in fee_costs if fee.amount_usd]
    if not amounts:
        return None
    return sum(amounts)


def get_transaction_type(from_chain_id: int | None, to_chain_id: int | None) -> TransactionType:
    if from_chain_id is None or to_chain_id is None:
        return TransactionType.UNKNOWN
    if from_chain_id == to_chain_id:
        return TransactionType.SWAP
    return TransactionType.BRIDGE


def diagnose_transaction(status: StatusResponse) -> TransactionDiagnosis:
    """Build the full error diagnosis for a status response."""
    errors = extract_errors(status)
    context = ErrorContext.from_status(status)
    receiving_chain = status.receiving.chain_id if status.receiving is not None else None

    diagnosis = TransactionDiagnosis(
        summary=analyze_errors(errors.api_error, errors.tool_errors, errors.substatus),
        is_temporary=is_temporary_error(errors.api_error, errors.tool_errors),
        can_retry=can_retry_transaction(status.status, errors.substatus),
        suggested_alternatives=suggest_alternatives(errors.tool_errors, context),
        total_fee_usd=calculate_total_fee_usd(status.fee_costs),
        transaction_type=get_transaction_type(status.sending.chain_id, receiving_chain),
    )
    logger.debug(
        "transaction_diagnosed",
        tx_hash=context.transaction_hash,
        severity=diagnosis.summary.severity.value,
        category=diagnosis.summary.category.value,
        error_count=diagnosis.summary.error_count,
    )
    return diagnosis

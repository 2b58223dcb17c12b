"""Plain-language explanations for failed transactions."""

from bridgelens.constants import GENERIC_FAILURE_REASON, UNKNOWN_FAILURE_REASON
from bridgelens.models.status import StatusResponse, TransactionSubstatus

# Diagnostic sentence per failure substatus
FAILURE_REASONS: dict[TransactionSubstatus, str] = {
    TransactionSubstatus.SLIPPAGE_EXCEEDED: "Price moved beyond slippage tolerance during execution",
    TransactionSubstatus.INSUFFICIENT_BALANCE: "Insufficient balance to complete the transaction",
    TransactionSubstatus.INSUFFICIENT_ALLOWANCE: "Token allowance was insufficient",
    TransactionSubstatus.OUT_OF_GAS: "Transaction ran out of gas",
    TransactionSubstatus.BRIDGE_NOT_AVAILABLE: "Bridge service was unavailable",
}

# Short LI.FI description of every substatus
SUBSTATUS_DESCRIPTIONS: dict[TransactionSubstatus, str] = {
    TransactionSubstatus.WAIT_SOURCE_CONFIRMATIONS: "Waiting for source chain confirmations",
    TransactionSubstatus.WAIT_DESTINATION_TRANSACTION: "Waiting for destination transaction",
    TransactionSubstatus.BRIDGE_NOT_AVAILABLE: "Bridge API is unavailable",
    TransactionSubstatus.CHAIN_NOT_AVAILABLE: "Source/destination chain RPC unavailable",
    TransactionSubstatus.REFUND_IN_PROGRESS: "Refund in progress",
    TransactionSubstatus.UNKNOWN_ERROR: "Status is indeterminate",
    TransactionSubstatus.COMPLETED: "Transfer was successful",
    TransactionSubstatus.PARTIAL: "Only partial transfer completed",
    TransactionSubstatus.REFUNDED: "Tokens were refunded",
    TransactionSubstatus.NOT_PROCESSABLE_REFUND_NEEDED: "Cannot complete, refund needed",
    TransactionSubstatus.OUT_OF_GAS: "Transaction ran out of gas",
    TransactionSubstatus.SLIPPAGE_EXCEEDED: "Received amount too low",
    TransactionSubstatus.INSUFFICIENT_ALLOWANCE: "Not enough allowance",
    TransactionSubstatus.INSUFFICIENT_BALANCE: "Not enough balance",
    TransactionSubstatus.EXPIRED: "Transaction expired",
}


def describe_substatus(substatus: str | None) -> str | None:
    """Return the short description of a substatus, or None if unknown."""
    if substatus is None:
        return None
    try:
        return SUBSTATUS_DESCRIPTIONS[TransactionSubstatus(substatus)]
    except ValueError:
        return None


def analyze_failure_reasons(status: StatusResponse) -> list[str]:
    """Explain why a transaction failed.

    The substatus maps to one fixed sentence (unrecognized values get a
    generic one), and the free-text substatus message follows it. The result
    is never empty.

    Args:
        status: Status response of the failed transaction

    Returns:
        Reasons, most specific first
    """
    reasons: list[str] = []

    if status.substatus:
        substatus = status.known_substatus
        reasons.append(FAILURE_REASONS.get(substatus, UNKNOWN_FAILURE_REASON))

    if status.substatus_message:
        reasons.append(status.substatus_message)

    return reasons or [GENERIC_FAILURE_REASON]

"""Pydantic models for the LI.FI transaction status endpoint (``GET /status``)."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from bridgelens.models.route import FeeCost, TokenInfo, ToolDetails
from bridgelens.models.types import Amount, UsdValue


class TransactionStatus(str, Enum):
    """Overall state of a cross-chain transfer."""

    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    PENDING = "PENDING"
    DONE = "DONE"
    FAILED = "FAILED"


class TransactionSubstatus(str, Enum):
    """Detailed state, grouped by the status it accompanies."""

    # PENDING
    WAIT_SOURCE_CONFIRMATIONS = "WAIT_SOURCE_CONFIRMATIONS"
    WAIT_DESTINATION_TRANSACTION = "WAIT_DESTINATION_TRANSACTION"
    BRIDGE_NOT_AVAILABLE = "BRIDGE_NOT_AVAILABLE"
    CHAIN_NOT_AVAILABLE = "CHAIN_NOT_AVAILABLE"
    REFUND_IN_PROGRESS = "REFUND_IN_PROGRESS"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # DONE
    COMPLETED = "COMPLETED"
    PARTIAL = "PARTIAL"
    REFUNDED = "REFUNDED"

    # FAILED
    NOT_PROCESSABLE_REFUND_NEEDED = "NOT_PROCESSABLE_REFUND_NEEDED"
    OUT_OF_GAS = "OUT_OF_GAS"
    SLIPPAGE_EXCEEDED = "SLIPPAGE_EXCEEDED"
    INSUFFICIENT_ALLOWANCE = "INSUFFICIENT_ALLOWANCE"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    EXPIRED = "EXPIRED"


class IncludedStep(BaseModel):
    """Summary of a step executed as part of the transfer."""

    tool: str
    tool_details: ToolDetails | None = Field(default=None, alias="toolDetails")
    from_amount: Amount | None = Field(default=None, alias="fromAmount")
    from_token: TokenInfo | None = Field(default=None, alias="fromToken")
    to_amount: Amount | None = Field(default=None, alias="toAmount")
    to_token: TokenInfo | None = Field(default=None, alias="toToken")
    bridged_amount: Amount | None = Field(default=None, alias="bridgedAmount")

    model_config = {"populate_by_name": True}


class TransactionInfo(BaseModel):
    """One side (sending or receiving) of a transfer."""

    tx_hash: str | None = Field(default=None, alias="txHash")
    tx_link: str | None = Field(default=None, alias="txLink")
    amount: Amount | None = None
    token: TokenInfo | None = None
    chain_id: int | None = Field(default=None, alias="chainId")
    gas_token: TokenInfo | None = Field(default=None, alias="gasToken")
    gas_amount: Amount | None = Field(default=None, alias="gasAmount")
    gas_amount_usd: UsdValue | None = Field(default=None, alias="gasAmountUSD")
    gas_price: str | None = Field(default=None, alias="gasPrice")
    gas_used: str | None = Field(default=None, alias="gasUsed")
    timestamp: int | None = None
    value: str | None = None
    amount_usd: UsdValue | None = Field(default=None, alias="amountUSD")
    included_steps: list[IncludedStep] | None = Field(default=None, alias="includedSteps")

    model_config = {"populate_by_name": True}

    @property
    def has_token_and_chain(self) -> bool:
        """Return True if both the token and chain of this side are known."""
        return self.token is not None and self.chain_id is not None


class ApiErrorDetail(BaseModel):
    """Error block embedded in a status response."""

    code: str
    message: str


class ToolError(BaseModel):
    """Error reported by one bridge or exchange while processing a transfer.

    ``code`` is a LI.FI tool error code such as ``INSUFFICIENT_LIQUIDITY``
    or ``TOOL_TIMEOUT``.
    """

    error_type: str | None = Field(default=None, alias="errorType")
    code: str
    action: Any = None
    tool: str | None = None
    message: str | None = None

    model_config = {"populate_by_name": True}


class StatusResponse(BaseModel):
    """Status of a cross-chain transfer as reported by LI.FI.

    ``substatus`` is kept as a raw string so that values added upstream after
    this model was written still parse; compare against
    :class:`TransactionSubstatus` members.
    """

    transaction_id: str | None = Field(default=None, alias="transactionId")
    sending: TransactionInfo
    receiving: TransactionInfo | None = None
    fee_costs: list[FeeCost] | None = Field(default=None, alias="feeCosts")
    status: TransactionStatus
    substatus: str | None = None
    substatus_message: str | None = Field(default=None, alias="substatusMessage")
    tool: str | None = None
    from_address: str | None = Field(default=None, alias="fromAddress")
    to_address: str | None = Field(default=None, alias="toAddress")
    lifi_explorer_link: str | None = Field(default=None, alias="lifiExplorerLink")
    bridge_explorer_link: str | None = Field(default=None, alias="bridgeExplorerLink")
    metadata: dict[str, Any] | None = None
    error: ApiErrorDetail | None = None
    errors: list[ToolError] | None = None

    model_config = {"populate_by_name": True}

    @property
    def is_failed(self) -> bool:
        """Return True if the transfer failed."""
        return self.status == TransactionStatus.FAILED

    @property
    def known_substatus(self) -> TransactionSubstatus | None:
        """Return the substatus as an enum member, or None if unset or unknown."""
        if self.substatus is None:
            return None
        try:
            return TransactionSubstatus(self.substatus)
        except ValueError:
            return None

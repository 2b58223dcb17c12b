"""Pydantic models for LI.FI route data structures.

Based on the LI.FI API reference for ``POST /advanced/routes``:
https://docs.li.fi/api-reference/advanced/get-a-set-of-routes-for-a-request-that-describes-a-transfer-of-tokens
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from bridgelens.models.types import Amount, UsdValue


class StepType(str, Enum):
    """Kind of operation a route step performs."""

    SWAP = "swap"
    CROSS = "cross"
    LIFI = "lifi"


class GasCostType(str, Enum):
    """What a gas cost entry pays for."""

    SEND = "SEND"
    APPROVE = "APPROVE"
    CROSS = "CROSS"


class RouteOrder(str, Enum):
    """Ordering strategy the routing API uses to sort its results."""

    CHEAPEST = "CHEAPEST"
    FASTEST = "FASTEST"


class TokenInfo(BaseModel):
    """Token descriptor as reported by LI.FI."""

    address: str
    chain_id: int = Field(alias="chainId")
    symbol: str
    # Most tokens use 18 decimals, stablecoins often 6, WBTC 8
    decimals: int = Field(ge=0, le=77)
    name: str | None = None
    coin_key: str | None = Field(default=None, alias="coinKey")
    logo_uri: str | None = Field(default=None, alias="logoURI")
    price_usd: UsdValue | None = Field(default=None, alias="priceUSD")

    model_config = {"populate_by_name": True, "frozen": True}


class ToolDetails(BaseModel):
    """Display metadata for a bridge or exchange."""

    key: str
    name: str
    logo_uri: str | None = Field(default=None, alias="logoURI")

    model_config = {"populate_by_name": True, "frozen": True}


class FeeCost(BaseModel):
    """A named fee charged by a step (protocol fee, bridge fee, ...)."""

    name: str
    description: str | None = None
    percentage: str | None = None
    token: TokenInfo | None = None
    amount: Amount | None = None
    amount_usd: UsdValue | None = Field(default=None, alias="amountUSD")
    included: bool | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class GasCost(BaseModel):
    """Gas required by a step, priced in the chain's gas token."""

    # Raw string; upstream adds new kinds (SUM, FEE) without notice
    type: str
    price: str | None = None
    estimate: str | None = None
    limit: str | None = None
    amount: Amount
    amount_usd: UsdValue | None = Field(default=None, alias="amountUSD")
    token: TokenInfo | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class StepAction(BaseModel):
    """Inputs of a route step."""

    from_chain_id: int = Field(alias="fromChainId")
    to_chain_id: int = Field(alias="toChainId")
    from_token: TokenInfo = Field(alias="fromToken")
    to_token: TokenInfo = Field(alias="toToken")
    from_amount: Amount = Field(default="0", alias="fromAmount")
    # Fraction, 0.03 == 3%
    slippage: float | None = Field(default=None, ge=0)
    from_address: str | None = Field(default=None, alias="fromAddress")
    to_address: str | None = Field(default=None, alias="toAddress")

    model_config = {"populate_by_name": True, "frozen": True}


class StepEstimate(BaseModel):
    """Expected outcome and costs of a route step."""

    tool: str | None = None
    from_amount: Amount = Field(default="0", alias="fromAmount")
    to_amount: Amount = Field(default="0", alias="toAmount")
    to_amount_min: Amount = Field(default="0", alias="toAmountMin")
    approval_address: str | None = Field(default=None, alias="approvalAddress")
    execution_duration: float = Field(default=0, ge=0, alias="executionDuration")
    fee_costs: list[FeeCost] | None = Field(default=None, alias="feeCosts")
    gas_costs: list[GasCost] | None = Field(default=None, alias="gasCosts")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def fee_costs_usd(self) -> list[UsdValue | None]:
        """USD amounts of all listed fee costs."""
        return [fee.amount_usd for fee in self.fee_costs or []]

    @property
    def gas_costs_usd(self) -> list[UsdValue | None]:
        """USD amounts of all listed gas costs."""
        return [gas.amount_usd for gas in self.gas_costs or []]


class RouteStep(BaseModel):
    """One leg of a route, executed by a single bridge or exchange."""

    id: str | None = None
    # Raw string; compare against StepType
    type: str
    tool: str
    tool_details: ToolDetails | None = Field(default=None, alias="toolDetails")
    action: StepAction
    estimate: StepEstimate
    included_steps: list[RouteStep] | None = Field(default=None, alias="includedSteps")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_cross_chain(self) -> bool:
        """Return True if this step moves value between chains."""
        return self.type == StepType.CROSS

    @property
    def is_swap(self) -> bool:
        """Return True if this step is a same-chain swap."""
        return self.type == StepType.SWAP


class Route(BaseModel):
    """A complete transfer path proposed by the routing API.

    Routes are immutable once returned by the API and identified by an
    opaque ``id``.
    """

    id: str
    from_chain_id: int = Field(alias="fromChainId")
    from_amount_usd: UsdValue | None = Field(default=None, alias="fromAmountUSD")
    from_amount: Amount = Field(default="0", alias="fromAmount")
    from_token: TokenInfo = Field(alias="fromToken")
    from_address: str | None = Field(default=None, alias="fromAddress")
    to_chain_id: int = Field(alias="toChainId")
    to_amount_usd: UsdValue | None = Field(default=None, alias="toAmountUSD")
    to_amount: Amount = Field(default="0", alias="toAmount")
    to_amount_min: Amount = Field(default="0", alias="toAmountMin")
    to_token: TokenInfo = Field(alias="toToken")
    to_address: str | None = Field(default=None, alias="toAddress")
    gas_cost_usd: UsdValue | None = Field(default=None, alias="gasCostUSD")
    steps: list[RouteStep] = Field(default_factory=list)
    insurance: dict[str, Any] | None = None
    tags: list[str] | None = None

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def step_count(self) -> int:
        """Return the number of steps in this route."""
        return len(self.steps)

    @property
    def tools(self) -> list[str]:
        """Return the tool names of all steps, in execution order."""
        return [step.tool for step in self.steps]

    @property
    def is_cross_chain(self) -> bool:
        """Return True if source and destination chains differ."""
        return self.from_chain_id != self.to_chain_id


class AllowDenyPrefer(BaseModel):
    """Allow/deny/prefer lists for bridges or exchanges."""

    allow: list[str] | None = None
    deny: list[str] | None = None
    prefer: list[str] | None = None

    model_config = {"frozen": True}


class RouteOptions(BaseModel):
    """Options attached to a routes request."""

    integrator: str | None = None
    fee: float | None = None
    max_price_impact: float | None = Field(default=None, alias="maxPriceImpact")
    order: RouteOrder | None = None
    # Fraction, 0.03 == 3%
    slippage: float | None = Field(default=None, ge=0, le=1)
    referrer: str | None = None
    allow_switch_chain: bool | None = Field(default=None, alias="allowSwitchChain")
    allow_destination_call: bool | None = Field(default=None, alias="allowDestinationCall")
    bridges: AllowDenyPrefer | None = None
    exchanges: AllowDenyPrefer | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class RoutesRequest(BaseModel):
    """Request body for the routing API."""

    from_chain_id: int = Field(alias="fromChainId")
    to_chain_id: int = Field(alias="toChainId")
    from_token_address: str = Field(alias="fromTokenAddress")
    to_token_address: str = Field(alias="toTokenAddress")
    from_amount: Amount = Field(alias="fromAmount")
    from_address: str | None = Field(default=None, alias="fromAddress")
    to_address: str | None = Field(default=None, alias="toAddress")
    from_amount_for_gas: Amount | None = Field(default=None, alias="fromAmountForGas")
    options: RouteOptions | None = None

    model_config = {"populate_by_name": True, "frozen": True}

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON body the API expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RoutesResponse(BaseModel):
    """Response of the routing API."""

    routes: list[Route]
    unavailable_routes: dict[str, Any] | None = Field(default=None, alias="unavailableRoutes")

    model_config = {"populate_by_name": True}

"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_route, make_step
    # or
    from tests.helpers.factories import make_status, make_token

    route = make_route(steps=[make_step(tool="hop", fee_usd="1.5")])
"""

from bridgelens.models.route import (
    FeeCost,
    GasCost,
    GasCostType,
    Route,
    RouteStep,
    StepAction,
    StepEstimate,
    StepType,
    TokenInfo,
)
from bridgelens.models.status import (
    IncludedStep,
    StatusResponse,
    TransactionInfo,
    TransactionStatus,
)
from tests.helpers.constants import ARBITRUM, ETHEREUM, TX_HASH, USDC_ARB, USDC_ETH, WALLET

# Global counter for unique route ids
_route_counter = 0


def make_token(
    address: str = USDC_ETH,
    chain_id: int = ETHEREUM,
    symbol: str = "USDC",
    decimals: int = 6,
) -> TokenInfo:
    """Create a token descriptor (default: USDC on Ethereum)."""
    return TokenInfo(address=address, chain_id=chain_id, symbol=symbol, decimals=decimals)


def make_step(
    tool: str = "hop",
    step_type: StepType | str = StepType.CROSS,
    fee_usd: str | None = "0",
    gas_usd: str | None = "0",
    duration: float = 0,
    slippage: float | None = None,
    from_chain_id: int = ETHEREUM,
    to_chain_id: int = ARBITRUM,
) -> RouteStep:
    """Create a route step with one fee cost and one gas cost.

    Args:
        tool: Bridge or exchange key (default: hop)
        step_type: swap/cross/lifi (default: cross)
        fee_usd: USD amount of the single fee cost, None to omit fee costs
        gas_usd: USD amount of the single gas cost, None to omit gas costs
        duration: Execution duration in seconds
        slippage: Step slippage as a fraction (0.005 == 0.5%)
        from_chain_id: Source chain of the step
        to_chain_id: Destination chain of the step

    Returns:
        RouteStep ready for metric calculations
    """
    fee_costs = None
    if fee_usd is not None:
        fee_costs = [FeeCost(name="Bridge fee", amount="0", amount_usd=fee_usd)]
    gas_costs = None
    if gas_usd is not None:
        gas_costs = [GasCost(type=GasCostType.SEND.value, amount="0", amount_usd=gas_usd)]

    return RouteStep(
        type=StepType(step_type).value,
        tool=tool,
        action=StepAction(
            from_chain_id=from_chain_id,
            to_chain_id=to_chain_id,
            from_token=make_token(chain_id=from_chain_id),
            to_token=make_token(address=USDC_ARB, chain_id=to_chain_id),
            slippage=slippage,
        ),
        estimate=StepEstimate(
            tool=tool,
            execution_duration=duration,
            fee_costs=fee_costs,
            gas_costs=gas_costs,
        ),
    )


def make_route(
    steps: list[RouteStep] | None = None,
    route_id: str | None = None,
    from_amount_usd: str | None = "1000",
    to_amount_usd: str | None = "990",
    from_chain_id: int = ETHEREUM,
    to_chain_id: int = ARBITRUM,
    from_token: str = USDC_ETH,
    to_token: str = USDC_ARB,
) -> Route:
    """Create a route with sensible defaults.

    The default route bridges 1000 USDC from Ethereum to Arbitrum through a
    single hop step with no costs.
    """
    global _route_counter
    if route_id is None:
        _route_counter += 1
        route_id = f"route-{_route_counter}"
    if steps is None:
        steps = [make_step()]

    return Route(
        id=route_id,
        from_chain_id=from_chain_id,
        from_amount_usd=from_amount_usd,
        from_amount="1000000000",
        from_token=make_token(address=from_token, chain_id=from_chain_id),
        to_chain_id=to_chain_id,
        to_amount_usd=to_amount_usd,
        to_amount="990000000",
        to_amount_min="985000000",
        to_token=make_token(address=to_token, chain_id=to_chain_id),
        steps=steps,
    )


def make_status(
    status: TransactionStatus | str = TransactionStatus.FAILED,
    substatus: str | None = "SLIPPAGE_EXCEEDED",
    substatus_message: str | None = None,
    sending_token: bool = True,
    receiving: bool = True,
    included_steps: list[IncludedStep] | None = None,
    amount: str = "1000000000",
) -> StatusResponse:
    """Create a status response for a USDC transfer from Ethereum to Arbitrum.

    Args:
        status: Overall status (default: FAILED)
        substatus: Raw substatus string (default: SLIPPAGE_EXCEEDED)
        substatus_message: Free-text message from the API
        sending_token: Include the sending token and chain
        receiving: Include the receiving side
        included_steps: Steps reported on the sending side
        amount: Sent amount in base units (default: 1000 USDC)

    Returns:
        StatusResponse ready for comparison
    """
    if isinstance(status, str):
        status = TransactionStatus(status)

    sending = TransactionInfo(
        tx_hash=TX_HASH,
        amount=amount,
        amount_usd="1000",
        token=make_token() if sending_token else None,
        chain_id=ETHEREUM if sending_token else None,
        gas_amount_usd="2.5",
        included_steps=included_steps,
    )
    receiving_info = None
    if receiving:
        receiving_info = TransactionInfo(
            chain_id=ARBITRUM,
            token=make_token(address=USDC_ARB, chain_id=ARBITRUM),
            amount="990000000",
            amount_usd="990",
        )

    return StatusResponse(
        sending=sending,
        receiving=receiving_info,
        status=status,
        substatus=substatus,
        substatus_message=substatus_message,
        tool="hop",
        from_address=WALLET,
        to_address=WALLET,
    )

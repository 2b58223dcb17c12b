"""Alternative route request generation.

Reconstructs a routes request from a failed transaction's status and derives
a fixed set of parameter variants (slippage, ordering, bridge and exchange
preferences, chain switching) to submit to the routing API.
"""

from __future__ import annotations

from typing import Any

import structlog

from bridgelens.models.route import AllowDenyPrefer, RouteOptions, RouteOrder, RoutesRequest
from bridgelens.models.status import StatusResponse

logger = structlog.get_logger()

RELIABLE_BRIDGES = ["hop", "across", "cbridge"]
MAJOR_EXCHANGES = ["1inch", "paraswap", "0x"]
CONSERVATIVE_BRIDGES = ["hop", "arbitrum", "optimism", "polygon"]

# Option overrides applied on top of the base request, in submission order.
# The base request itself is always submitted first.
ALTERNATIVE_OVERRIDES: list[dict[str, Any]] = [
    {"slippage": 0.03, "order": RouteOrder.CHEAPEST},
    {"slippage": 0.05, "order": RouteOrder.FASTEST},
    {"slippage": 0.02, "bridges": AllowDenyPrefer(prefer=RELIABLE_BRIDGES)},
    {"slippage": 0.02, "exchanges": AllowDenyPrefer(prefer=MAJOR_EXCHANGES)},
    {"slippage": 0.025, "allow_switch_chain": True},
    {
        "slippage": 0.01,
        "bridges": AllowDenyPrefer(prefer=CONSERVATIVE_BRIDGES),
        "order": RouteOrder.CHEAPEST,
    },
]


def extract_route_parameters(status: StatusResponse) -> RoutesRequest | None:
    """Rebuild the routes request behind a transaction.

    The source side comes from ``status.sending``. The destination side comes
    from ``status.receiving`` when it carries a token and chain, otherwise
    from the ``to_token`` of the last included step.

    Returns:
        The reconstructed request, or None if either side cannot be
        determined. Callers must skip the comparison rather than guess.
    """
    sending = status.sending
    if not sending.has_token_and_chain:
        logger.debug("route_parameters_missing_sending_side", tx_hash=sending.tx_hash)
        return None

    to_chain_id: int | None = None
    to_token_address: str | None = None

    receiving = status.receiving
    if receiving is not None and receiving.has_token_and_chain:
        to_chain_id = receiving.chain_id
        to_token_address = receiving.token.address
    elif sending.included_steps:
        last_step = sending.included_steps[-1]
        if last_step.to_token is not None:
            to_chain_id = last_step.to_token.chain_id
            to_token_address = last_step.to_token.address

    if to_chain_id is None or to_token_address is None:
        logger.debug("route_parameters_missing_receiving_side", tx_hash=sending.tx_hash)
        return None

    return RoutesRequest(
        from_chain_id=sending.chain_id,
        to_chain_id=to_chain_id,
        from_token_address=sending.token.address,
        to_token_address=to_token_address,
        from_amount=sending.amount or "0",
        from_address=status.from_address,
        to_address=status.to_address,
    )


def with_options(base: RoutesRequest, **overrides: Any) -> RoutesRequest:
    """Return a copy of ``base`` with option fields overridden."""
    options = (base.options or RouteOptions()).model_copy(update=overrides)
    return base.model_copy(update={"options": options})


def generate_alternative_configs(base: RoutesRequest) -> list[RoutesRequest]:
    """Derive the request variants to submit for a comparison.

    Returns the base request followed by one variant per entry of
    :data:`ALTERNATIVE_OVERRIDES`. Output is deterministic and ``base`` is
    left untouched.
    """
    return [base] + [with_options(base, **overrides) for overrides in ALTERNATIVE_OVERRIDES]

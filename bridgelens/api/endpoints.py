"""API endpoints for route comparisons."""

from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from bridgelens.analysis.comparator import RouteComparator
from bridgelens.analysis.diagnostics import diagnose_transaction
from bridgelens.analysis.result import ComparisonOutcome, ComparisonResult
from bridgelens.client import ClientConfig, LiFiApiError, LiFiClient
from bridgelens.models.comparison import RouteComparison
from bridgelens.models.diagnosis import TransactionDiagnosis
from bridgelens.models.status import StatusResponse

logger = structlog.get_logger()

router = APIRouter()

# Shown to users when analysis fails for a transient reason
RETRY_MESSAGE = "Route analysis is unavailable right now, please try again shortly"


class ComparisonResponse(BaseModel):
    """Response body for comparison endpoints.

    ``outcome`` distinguishes a usable comparison, a comparison with no
    alternatives, a transaction without enough data, and a failed analysis.
    ``diagnosis`` is present whenever a status was available to diagnose.
    """

    outcome: ComparisonOutcome
    comparison: RouteComparison | None = None
    diagnosis: TransactionDiagnosis | None = None
    detail: str | None = None

    @classmethod
    def from_result(
        cls,
        result: ComparisonResult,
        diagnosis: TransactionDiagnosis | None = None,
    ) -> "ComparisonResponse":
        detail = result.error_detail
        if result.outcome == ComparisonOutcome.FAILED:
            detail = RETRY_MESSAGE
        return cls(
            outcome=result.outcome,
            comparison=result.comparison,
            diagnosis=diagnosis,
            detail=detail,
        )


@lru_cache(maxsize=1)
def get_client() -> LiFiClient:
    """Dependency provider for the LI.FI client.

    Override this in tests to inject a mock client:
        app.dependency_overrides[get_client] = lambda: mock_client
    """
    return LiFiClient(ClientConfig.from_env())


def get_comparator(client: LiFiClient = Depends(get_client)) -> RouteComparator:
    """Dependency provider for the route comparator.

    A new comparator per request; comparisons share no state.
    """
    return RouteComparator(client=client)


@router.post("/comparisons", response_model_exclude_none=True)
async def compare_routes(
    status: StatusResponse,
    comparator: RouteComparator = Depends(get_comparator),
) -> ComparisonResponse:
    """Compare alternative routes for a transaction status.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Insufficient data or analysis failure: 200 with the matching outcome
    """
    logger.info(
        "received_comparison_request",
        tx_hash=status.sending.tx_hash,
        status=status.status.value,
        substatus=status.substatus,
    )
    result = await comparator.compare(status)
    return ComparisonResponse.from_result(result, diagnose_transaction(status))


@router.get("/transactions/{tx_hash}/comparison", response_model_exclude_none=True)
async def compare_transaction(
    tx_hash: str,
    from_chain: str | None = None,
    to_chain: str | None = None,
    bridge: str | None = None,
    client: LiFiClient = Depends(get_client),
    comparator: RouteComparator = Depends(get_comparator),
) -> ComparisonResponse:
    """Fetch a transaction's status from LI.FI, then compare alternatives.

    Error Handling:
        - Transaction unknown upstream: 404
        - Network, server or rate-limit failures: 200 with outcome "failed" and a retry hint
        - Other rejected lookups: 200 with outcome "failed" and the upstream message
    """
    try:
        status = await client.get_status(
            tx_hash, from_chain=from_chain, to_chain=to_chain, bridge=bridge
        )
    except LiFiApiError as e:
        if e.is_not_found:
            raise HTTPException(status_code=404, detail=f"Transaction {tx_hash} not found") from e
        logger.warning(
            "status_fetch_failed",
            tx_hash=tx_hash,
            code=e.code,
            status=e.status,
            network_error=e.is_network_error,
        )
        transient = e.is_network_error or e.is_retryable
        detail = RETRY_MESSAGE if transient else f"Status lookup rejected: {e.message}"
        return ComparisonResponse(outcome=ComparisonOutcome.FAILED, detail=detail)

    result = await comparator.compare(status)
    return ComparisonResponse.from_result(result, diagnose_transaction(status))

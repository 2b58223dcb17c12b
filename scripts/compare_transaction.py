"""Compare alternative routes for a LI.FI transaction from the command line.

Fetches the transaction status, runs the route comparison and prints a
summary (or the full comparison as JSON).

Usage:
    python -m scripts.compare_transaction 0xabc... --from-chain 1
    python -m scripts.compare_transaction 0xabc... --json > comparison.json
    python -m scripts.compare_transaction --status-file status.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import structlog

from bridgelens.analysis import ComparisonOutcome, ComparisonResult, RouteComparator
from bridgelens.analysis.diagnostics import diagnose_transaction
from bridgelens.analysis.failures import describe_substatus
from bridgelens.client import ClientConfig, LiFiApiError, LiFiClient
from bridgelens.constants import get_chain_name
from bridgelens.models.diagnosis import TransactionDiagnosis
from bridgelens.models.status import StatusResponse

logger = structlog.get_logger()


async def load_status(args: argparse.Namespace, client: LiFiClient) -> StatusResponse:
    """Load the status from a file or from the API."""
    if args.status_file:
        with open(args.status_file) as f:
            return StatusResponse.model_validate(json.load(f))
    return await client.get_status(
        args.tx_hash,
        from_chain=args.from_chain,
        to_chain=args.to_chain,
        bridge=args.bridge,
    )


def print_diagnosis(diagnosis: TransactionDiagnosis) -> None:
    summary = diagnosis.summary
    print(
        f"Diagnosis:   {summary.severity.value} {summary.category.value} issue, "
        f"{summary.error_count} error(s)"
    )
    print(f"             {summary.primary_suggestion}")
    if summary.estimated_resolution_time:
        print(f"             Expected resolution: {summary.estimated_resolution_time}")
    if diagnosis.total_fee_usd is not None:
        print(f"Fees paid:   ${diagnosis.total_fee_usd:,.2f}")
    print(f"Retry same:  {'yes' if diagnosis.can_retry else 'no'}")
    for suggestion in diagnosis.suggested_alternatives:
        print(f"  * {suggestion}")


def print_summary(
    status: StatusResponse,
    result: ComparisonResult,
    diagnosis: TransactionDiagnosis,
) -> None:
    """Print a human-readable comparison summary."""
    sending = status.sending
    print("=" * 60)
    print(f"Transaction: {sending.tx_hash or 'unknown'}")
    print(f"Status:      {status.status.value} ({status.substatus or '-'})")
    description = describe_substatus(status.substatus)
    if description:
        print(f"             {description}")
    print(f"Source:      {get_chain_name(sending.chain_id)}")
    if status.receiving is not None:
        print(f"Destination: {get_chain_name(status.receiving.chain_id)}")
    print("=" * 60)
    print_diagnosis(diagnosis)
    print("=" * 60)

    if result.outcome == ComparisonOutcome.INSUFFICIENT_DATA:
        print("Not enough data to compare routes for this transaction.")
        return
    if result.outcome == ComparisonOutcome.FAILED:
        print("Route analysis failed. Please try again shortly.")
        return

    comparison = result.comparison
    assert comparison is not None

    print("Failure reasons:")
    for reason in comparison.failure_reasons:
        print(f"  - {reason}")

    if not comparison.has_alternatives:
        print("\nNo alternative routes are available right now.")
        return

    print(f"\nAlternative routes ({len(comparison.alternative_routes)}):")
    for rank, alternative in enumerate(comparison.alternative_routes, start=1):
        metrics = alternative.metrics
        tools = " -> ".join(alternative.route.tools) or "direct"
        kind = "bridge" if alternative.route.is_cross_chain else "swap"
        print(
            f"{rank:>2}. [{alternative.recommendation.value:<11}] {tools} ({kind})\n"
            f"    fees ${metrics.total_fees_usd:,.2f}  "
            f"time {metrics.estimated_minutes:.1f} min  "
            f"success {alternative.success_probability:.0f}%  "
            f"risk {alternative.risk_level.value}"
        )
        for pro in alternative.pros:
            print(f"      + {pro}")
        for con in alternative.cons:
            print(f"      - {con}")


async def run(args: argparse.Namespace) -> int:
    client = LiFiClient(ClientConfig.from_env())
    try:
        status = await load_status(args, client)
    except LiFiApiError as e:
        logger.error("status_fetch_failed", code=e.code, status=e.status, message=e.message)
        print(f"Error: could not fetch transaction status ({e.message})")
        return 1

    comparator = RouteComparator(client=client)
    result = await comparator.compare(status)
    diagnosis = diagnose_transaction(status)

    if args.json:
        payload = {
            "outcome": result.outcome.value,
            "comparison": (
                result.comparison.model_dump(mode="json", by_alias=True, exclude_none=True)
                if result.comparison is not None
                else None
            ),
            "diagnosis": diagnosis.model_dump(mode="json", by_alias=True, exclude_none=True),
        }
        print(json.dumps(payload, indent=2))
    else:
        print_summary(status, result, diagnosis)

    return 0 if result.outcome != ComparisonOutcome.FAILED else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Compare alternative routes for a transaction")
    parser.add_argument("tx_hash", nargs="?", help="Transaction hash to inspect")
    parser.add_argument(
        "--status-file",
        type=Path,
        help="Read the status response from a JSON file instead of the API",
    )
    parser.add_argument("--from-chain", help="Source chain id or key")
    parser.add_argument("--to-chain", help="Destination chain id or key")
    parser.add_argument("--bridge", help="Bridge tool key")
    parser.add_argument("--json", action="store_true", help="Print the comparison as JSON")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()
    if not args.tx_hash and not args.status_file:
        parser.error("either tx_hash or --status-file is required")

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())

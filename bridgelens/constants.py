"""Well-known constants for the LI.FI API and bridge analysis.

Centralizes upstream endpoints, chain identifiers and fixed sentences shared
by the analysis and presentation layers.
"""

# Upstream LI.FI API (the Next.js proxy in front of it is not modelled here)
LIFI_BASE_URL = "https://li.quest/v1"

# Header carrying the LI.FI API key
LIFI_API_KEY_HEADER = "x-lifi-api-key"

# Chain ids used in tests, logs and the CLI
CHAIN_NAMES: dict[int, str] = {
    1: "Ethereum",
    10: "Optimism",
    56: "BNB Chain",
    100: "Gnosis",
    137: "Polygon",
    250: "Fantom",
    324: "zkSync Era",
    8453: "Base",
    42161: "Arbitrum",
    43114: "Avalanche",
    59144: "Linea",
}


def get_chain_name(chain_id: int | None) -> str:
    """Return a display name for a chain id ("Unknown" when not set)."""
    if chain_id is None:
        return "Unknown"
    return CHAIN_NAMES.get(chain_id, f"Chain {chain_id}")


# Reason returned when every alternative route request comes back empty
NO_ALTERNATIVES_REASON = "No alternative routes found"

# Fallback reason when a failed transaction carries no diagnostic data
GENERIC_FAILURE_REASON = "Transaction failed"

# Reason for a substatus that has no dedicated sentence
UNKNOWN_FAILURE_REASON = "Transaction failed due to unknown reasons"

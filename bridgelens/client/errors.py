"""Errors raised by the LI.FI API client."""

# Status codes worth retrying: timeouts, rate limits and server errors.
RETRYABLE_STATUS_CODES = frozenset({408, 429})


def is_retryable_status(status: int) -> bool:
    """Return True if a response status should be retried."""
    return status >= 500 or status in RETRYABLE_STATUS_CODES


class LiFiApiError(Exception):
    """An error response (or transport failure) from the LI.FI API.

    Attributes:
        code: LI.FI error code, or the HTTP status as a string
        message: Human-readable message
        status: HTTP status, or None for transport failures
        is_retryable: Whether repeating the request may succeed
        retry_after: Seconds the server asked us to wait, if any
    """

    def __init__(
        self,
        code: str,
        message: str,
        status: int | None = None,
        is_retryable: bool = False,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.is_retryable = is_retryable
        self.retry_after = retry_after

    @property
    def is_network_error(self) -> bool:
        """True for transport failures and server-side errors."""
        return self.status is None or self.status >= 500

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    def __repr__(self) -> str:
        return f"LiFiApiError(code={self.code!r}, status={self.status}, message={self.message!r})"


class MalformedResponseError(LiFiApiError):
    """A response body that does not match the expected schema."""

    def __init__(self, message: str) -> None:
        super().__init__(code="MALFORMED_RESPONSE", message=message)

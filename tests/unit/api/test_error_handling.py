"""Unit tests for API error handling."""

import pytest
from fastapi.testclient import TestClient

from bridgelens.analysis.result import ComparisonError, ComparisonResult
from bridgelens.api.endpoints import RETRY_MESSAGE, get_client, get_comparator
from bridgelens.api.main import app
from bridgelens.client.errors import LiFiApiError
from bridgelens.models.status import StatusResponse
from tests.helpers import make_status
from tests.helpers.fakes import FakeLiFiClient


@pytest.fixture
def client():
    """Create a test client for the API."""
    yield TestClient(app)
    app.dependency_overrides.clear()


def status_json(**kwargs) -> dict:
    return make_status(**kwargs).model_dump(mode="json", by_alias=True, exclude_none=True)


class TestAnalysisFailure:
    """Tests for failures inside the comparison pipeline."""

    def test_comparator_error_returns_failed_outcome(self, client):
        """An unexpected analysis error is reported as 'failed', not 500."""

        class ExplodingRouting(FakeLiFiClient):
            async def get_routes(self, request):
                raise RuntimeError("Boom! This should be caught.")

        app.dependency_overrides[get_client] = lambda: ExplodingRouting()

        response = client.post("/comparisons", json=status_json())

        # Every variant failing is an empty comparison, not an error
        assert response.status_code == 200
        assert response.json()["outcome"] == "no_alternatives"

    def test_build_failure_returns_retry_message(self, client):
        class BrokenComparator:
            async def compare(self, status: StatusResponse):
                return ComparisonResult.with_error(
                    ComparisonError.ANALYSIS_FAILED, "division by zero"
                )

        app.dependency_overrides[get_comparator] = lambda: BrokenComparator()

        response = client.post("/comparisons", json=status_json())

        assert response.status_code == 200
        data = response.json()
        assert data["outcome"] == "failed"
        assert data["detail"] == RETRY_MESSAGE
        # The status is still diagnosed when route analysis fails
        assert data["diagnosis"]["canRetry"] is True

    def test_rate_limited_upstream(self, client):
        lifi = FakeLiFiClient(
            status_error=LiFiApiError(
                code="429", message="Too Many Requests", status=429, is_retryable=True
            )
        )
        app.dependency_overrides[get_client] = lambda: lifi

        response = client.get("/transactions/0xabc/comparison")

        assert response.status_code == 200
        assert response.json() == {"outcome": "failed", "detail": RETRY_MESSAGE}

    def test_rejected_lookup_returns_upstream_message(self, client):
        lifi = FakeLiFiClient(
            status_error=LiFiApiError(code="1011", message="Invalid txHash", status=400)
        )
        app.dependency_overrides[get_client] = lambda: lifi

        response = client.get("/transactions/0xabc/comparison")

        assert response.status_code == 200
        assert response.json() == {
            "outcome": "failed",
            "detail": "Status lookup rejected: Invalid txHash",
        }


class TestInvalidJsonSchema:
    """Tests for invalid JSON schema handling."""

    def test_missing_sending(self, client):
        response = client.post("/comparisons", json={"status": "FAILED"})
        assert response.status_code == 422

    def test_unknown_status_value(self, client):
        payload = status_json()
        payload["status"] = "EXPLODED"

        response = client.post("/comparisons", json=payload)

        assert response.status_code == 422

    def test_unknown_substatus_is_accepted(self, client):
        app.dependency_overrides[get_client] = lambda: FakeLiFiClient()

        response = client.post("/comparisons", json=status_json(substatus="BRAND_NEW_STATE"))

        assert response.status_code == 200
        assert response.json()["comparison"]["failureReasons"] == [
            "No alternative routes found"
        ]

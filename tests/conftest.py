"""Pytest configuration and fixtures."""

import pytest

from bridgelens.models.route import Route
from bridgelens.models.status import StatusResponse
from tests.helpers import make_route, make_status, make_step
from tests.helpers.fakes import FakeRoutingClient


@pytest.fixture
def failed_status() -> StatusResponse:
    """A failed USDC transfer from Ethereum to Arbitrum."""
    return make_status()


@pytest.fixture
def cheap_route() -> Route:
    """Low fees, slow, unproven bridge."""
    return make_route(
        route_id="cheap",
        steps=[make_step(tool="symbiosis", fee_usd="0.5", gas_usd="0.5", duration=1200)],
    )


@pytest.fixture
def fast_route() -> Route:
    """Moderate fees, very fast."""
    return make_route(
        route_id="fast",
        steps=[make_step(tool="across", fee_usd="4", gas_usd="1", duration=60)],
    )


@pytest.fixture
def safe_route() -> Route:
    """Highest reliability, average cost and time."""
    return make_route(
        route_id="safe",
        steps=[make_step(tool="arbitrum", fee_usd="6", gas_usd="2", duration=600)],
    )


@pytest.fixture
def fake_client() -> FakeRoutingClient:
    return FakeRoutingClient()

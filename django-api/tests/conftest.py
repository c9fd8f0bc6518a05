"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from theater.domain import Invoice, Performance, Play, PlayId


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play(id=PlayId("hamlet"), name="Hamlet", type="tragedy"),
        "as-like": Play(id=PlayId("as-like"), name="As You Like It", type="comedy"),
        "othello": Play(id=PlayId("othello"), name="Othello", type="tragedy"),
    }


@pytest.fixture
def big_co_invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance.create("hamlet", 55),
            Performance.create("as-like", 35),
            Performance.create("othello", 40),
        ),
    )

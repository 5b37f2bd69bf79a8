"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from shalom.mock import MockShalomAPI
from shalom.models import Agency
from shalom.sample_data import SAMPLE_AGENCIES


@pytest.fixture
def sample_agencies() -> list[Agency]:
    """The mock catalog, parsed from its wire format."""
    return [Agency.model_validate(a) for a in SAMPLE_AGENCIES]


@pytest.fixture
def mock_api() -> MockShalomAPI:
    return MockShalomAPI()


@pytest.fixture
def source() -> AsyncMock:
    """Bare gateway double; configure return values / side effects per test."""
    return AsyncMock()

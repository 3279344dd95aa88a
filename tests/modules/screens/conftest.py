"""
Fixtures for screen tests.

Screens are exercised against AsyncMock services; the wire layer is
covered by the service tests.
"""

from unittest.mock import AsyncMock

import pytest

from tests.modules.screens.factories import RecordingNotifier


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def agency_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def vehicle_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def employee_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def courier_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def delivery_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def invoice_service() -> AsyncMock:
    return AsyncMock()

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the API integration test directory."""

from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from ranking.analytics import get_provider
from ranking.analytics.backends.reporting import AnalyticsReportingBackend
from ranking.analytics.config import AnalyticsConfig
from ranking.analytics.provider import RankingProvider
from ranking.main import app


@pytest.fixture(name="backend_mock")
def fixture_backend_mock(mocker: MockerFixture) -> Any:
    """Create an AnalyticsReportingBackend mock object for test."""
    backend = mocker.AsyncMock(spec=AnalyticsReportingBackend)
    backend.authenticate.return_value = mocker.sentinel.credentials
    return backend


@pytest.fixture(name="provider")
def fixture_provider(backend_mock: Any, analytics_config: AnalyticsConfig) -> RankingProvider:
    """Create a RankingProvider backed by the mock backend."""
    return RankingProvider(backend=backend_mock, config=analytics_config)


@pytest.fixture(name="client")
def fixture_test_client(provider: RankingProvider) -> Iterator[TestClient]:
    """Return a FastAPI TestClient instance with the ranking provider overridden.

    Note that this will NOT trigger event handlers (i.e. `startup` and `shutdown`) for
    the app, see: https://fastapi.tiangolo.com/advanced/testing-events/
    """
    app.dependency_overrides[get_provider] = lambda: provider
    yield TestClient(app)
    del app.dependency_overrides[get_provider]

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the unit test directory."""

from typing import Any

import aiodogstatsd
import pytest
from pytest_mock import MockerFixture


@pytest.fixture(name="statsd_mock")
def fixture_statsd_mock(mocker: MockerFixture) -> Any:
    """Return mock for the StatsD client."""
    return mocker.MagicMock(spec_set=aiodogstatsd.Client)


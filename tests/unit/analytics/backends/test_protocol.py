# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the report request model."""

import pytest

from ranking.analytics.backends.protocol import ReportRequest


@pytest.fixture(name="report_request")
def fixture_report_request() -> ReportRequest:
    """Return a test ReportRequest."""
    return ReportRequest(
        view_id="123456",
        path_filters=["/blog.*", "/news.*"],
        start_date="30daysAgo",
        end_date="1daysAgo",
        dimension="ga:pagePath",
        metric="ga:pageviews",
        page_size=10,
    )


def test_to_request_body(report_request: ReportRequest) -> None:
    """Test the batchGet body sent for a filtered ranking."""
    assert report_request.to_request_body() == {
        "reportRequests": [
            {
                "viewId": "123456",
                "dateRanges": [{"startDate": "30daysAgo", "endDate": "1daysAgo"}],
                "dimensions": [{"name": "ga:pagePath"}],
                "dimensionFilterClauses": [
                    {
                        "operator": "OR",
                        "filters": [
                            {
                                "dimensionName": "ga:pagePath",
                                "operator": "REGEXP",
                                "expressions": ["/blog.*"],
                            },
                            {
                                "dimensionName": "ga:pagePath",
                                "operator": "REGEXP",
                                "expressions": ["/news.*"],
                            },
                        ],
                    }
                ],
                "metrics": [{"expression": "ga:pageviews"}],
                "orderBys": [{"fieldName": "ga:pageviews", "sortOrder": "DESCENDING"}],
                "pageSize": 10,
            }
        ]
    }


def test_to_request_body_without_filters(report_request: ReportRequest) -> None:
    """Test that no dimension filter clause is sent when there are no path filters."""
    report_request.path_filters = []

    body = report_request.to_request_body()

    assert "dimensionFilterClauses" not in body["reportRequests"][0]
    assert body["reportRequests"][0]["pageSize"] == 10

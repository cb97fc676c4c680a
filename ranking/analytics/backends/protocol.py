"""Protocol and models for the Analytics Reporting backends."""

from typing import Any, Protocol, TypeAlias

from google.oauth2.service_account import Credentials
from pydantic import BaseModel

# An opaque type alias for a `reports.batchGet` response of the Analytics Reporting API v4.
# The backend relays it as-is, only the formatter looks inside it.
ReportResponse: TypeAlias = dict[str, Any]


class PageViews(BaseModel):
    """Model for a single ranking entry: a page path and its view count."""

    path: str
    views: int


class ReportRequest(BaseModel):
    """Class that contains parameters needed to make a ranking report query."""

    view_id: str
    # Decoded regular expressions, OR-combined against the page path dimension.
    path_filters: list[str]
    start_date: str
    end_date: str
    dimension: str
    metric: str
    page_size: int

    def to_request_body(self) -> dict[str, Any]:
        """Build the `reports.batchGet` request body.

        No dimension filter clause is sent when there are no path filters, so the
        ranking covers every page path.
        """
        report_request: dict[str, Any] = {
            "viewId": self.view_id,
            "dateRanges": [{"startDate": self.start_date, "endDate": self.end_date}],
            "dimensions": [{"name": self.dimension}],
            "metrics": [{"expression": self.metric}],
            "orderBys": [{"fieldName": self.metric, "sortOrder": "DESCENDING"}],
            "pageSize": self.page_size,
        }
        if self.path_filters:
            report_request["dimensionFilterClauses"] = [
                {
                    "operator": "OR",
                    "filters": [
                        {
                            "dimensionName": self.dimension,
                            "operator": "REGEXP",
                            "expressions": [path],
                        }
                        for path in self.path_filters
                    ],
                }
            ]
        return {"reportRequests": [report_request]}


class AnalyticsBackendProtocol(Protocol):
    """Protocol for an Analytics Reporting backend.

    Note: This only defines the methods used by the provider. The actual backend
    might define additional methods and attributes which the provider doesn't
    directly depend on.
    """

    async def authenticate(self, info: dict[str, Any]) -> Credentials:  # pragma: no cover
        """Exchange a service account credential for authorized credentials.

        `AuthError` will be raised if the exchange fails.
        """
        ...

    async def fetch_report(
        self, credentials: Credentials, request: ReportRequest
    ) -> ReportResponse:  # pragma: no cover
        """Fetch a ranking report.

        `ReportFetchError` will be raised if the request run into any issues.
        """
        ...

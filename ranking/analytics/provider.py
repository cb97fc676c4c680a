"""Page view ranking provider."""

import logging

from ranking.analytics.backends.credentials import load_credential
from ranking.analytics.backends.protocol import (
    AnalyticsBackendProtocol,
    PageViews,
    ReportRequest,
)
from ranking.analytics.config import AnalyticsConfig
from ranking.analytics.filters import parse_path_filters
from ranking.analytics.formatter import format_report

logger = logging.getLogger(__name__)


class RankingProvider:
    """Provider of the most viewed page paths over the configured date range."""

    backend: AnalyticsBackendProtocol
    config: AnalyticsConfig

    def __init__(self, backend: AnalyticsBackendProtocol, config: AnalyticsConfig) -> None:
        self.backend = backend
        self.config = config

    def build_report_request(self, path_filters: list[str]) -> ReportRequest:
        """Build the report query for the given path filters."""
        return ReportRequest(
            view_id=self.config.view_id or "",
            path_filters=path_filters,
            start_date=self.config.start_date,
            end_date=self.config.end_date,
            dimension=self.config.dimension,
            metric=self.config.metric,
            page_size=self.config.page_size,
        )

    async def get_ranking(self, includes_paths: str = "") -> list[PageViews]:
        """Fetch the page view ranking for the paths matching `includes_paths`.

        Each stage raises its own `RankingError` subclass and stops the pipeline.
        Those errors are intentionally unhandled here, the API handler turns them
        into the error response.
        """
        credential = load_credential(self.config.credential)
        credentials = await self.backend.authenticate(credential)
        path_filters = parse_path_filters(includes_paths)
        report = await self.backend.fetch_report(
            credentials, self.build_report_request(path_filters)
        )
        return format_report(report)

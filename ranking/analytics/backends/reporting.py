"""Backend for the Google Analytics Reporting API v4."""

import asyncio
import logging
from typing import Any

import aiodogstatsd
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as AuthRequest
from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from ranking.analytics.backends.protocol import ReportRequest, ReportResponse
from ranking.exceptions import AuthError, ReportFetchError

logger = logging.getLogger(__name__)


class AnalyticsReportingBackend:
    """Backend that authenticates a service account and queries the Reporting API."""

    scopes: list[str]
    api_service_name: str
    api_version: str
    metrics_client: aiodogstatsd.Client

    def __init__(
        self,
        scopes: list[str],
        api_service_name: str,
        api_version: str,
        metrics_client: aiodogstatsd.Client,
    ) -> None:
        """Initialize the backend."""
        self.scopes = scopes
        self.api_service_name = api_service_name
        self.api_version = api_version
        self.metrics_client = metrics_client

    async def authenticate(self, info: dict[str, Any]) -> Credentials:
        """Exchange a service account credential for an access token scoped to `scopes`.

        The token is requested eagerly so that a revoked key or an unreachable token
        endpoint is reported as an `AuthError` rather than as a report failure.
        """
        try:
            credentials = Credentials.from_service_account_info(info, scopes=self.scopes)
            with self.metrics_client.timeit("analytics.auth.duration"):
                await asyncio.to_thread(credentials.refresh, AuthRequest())
        except (ValueError, TypeError, GoogleAuthError) as ex:
            logger.error(f"Analytics authentication failed: {ex}")
            self.metrics_client.increment("analytics.auth.failure")
            raise AuthError(f"Failed to authenticate with the Analytics API: {ex}") from ex

        return credentials

    async def fetch_report(
        self, credentials: Credentials, request: ReportRequest
    ) -> ReportResponse:
        """Fetch a ranking report through `reports.batchGet`.

        `ReportFetchError` will be raised if the client can't be built or the request
        runs into any issue, including malformed or truncated responses.
        """
        if not request.view_id:
            logger.error("Failed to fetch the Analytics report: the view id is not configured")
            self.metrics_client.increment("analytics.report.failure")
            raise ReportFetchError("The Analytics view id is not configured")

        try:
            with self.metrics_client.timeit("analytics.report.duration"):
                report: ReportResponse = await asyncio.to_thread(
                    self._batch_get, credentials, request.to_request_body()
                )
        except Exception as ex:
            logger.error(f"Failed to fetch the Analytics report: {ex}")
            self.metrics_client.increment("analytics.report.failure")
            raise ReportFetchError(f"Failed to fetch the Analytics report: {ex}") from ex

        return report

    def _batch_get(self, credentials: Credentials, body: dict[str, Any]) -> ReportResponse:
        """Build a reporting client and run a single `batchGet` query. Blocking."""
        service = build(
            self.api_service_name,
            self.api_version,
            credentials=credentials,
            cache_discovery=False,
        )
        try:
            return service.reports().batchGet(body=body).execute()
        finally:
            service.close()

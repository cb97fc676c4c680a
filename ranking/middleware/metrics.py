"""Middleware for request metrics using FastAPI's middleware system."""

from functools import cache
from http import HTTPStatus
from time import monotonic

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from ranking.middleware import ScopeKey
from ranking.utils.metrics import get_metrics_client


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for instrumenting request level metrics. We collect timing and status
    codes for all known paths as well as status codes for all paths (known and unknown).

    Endpoints can tag the request metrics by updating the dict stored under
    `ScopeKey.METRICS_TAGS`. The ranking endpoint records whether the request was
    filtered by `includes_paths` and, on failure, which stage failed.
    """

    @cache
    def _build_metric_name(self, method: str, path: str) -> str:
        return "{}.{}".format(method, path.lower().lstrip("/").replace("/", ".")).lower()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Capture request metrics including timing and status codes."""
        metrics_client = get_metrics_client()
        tags: dict[str, str] = {}

        # Store `Client` instance and the tags in the request scope, so that they can be
        # used by other middleware and endpoints.
        request.scope[ScopeKey.METRICS_CLIENT] = metrics_client
        request.scope[ScopeKey.METRICS_TAGS] = tags

        started_at = monotonic()
        try:
            response = await call_next(request)

            duration = (monotonic() - started_at) * 1000
            status_code = response.status_code

            # don't track NOT_FOUND statuses by path.
            # Instead we will track those within a general `response.status_codes` metric.
            if status_code != HTTPStatus.NOT_FOUND:
                metric_name = self._build_metric_name(request.method, request.url.path)
                metrics_client.timing(f"{metric_name}.timing", value=duration, tags=tags)
                metrics_client.increment(f"{metric_name}.status_codes.{status_code}", tags=tags)

            metrics_client.increment(f"response.status_codes.{status_code}", tags=tags)
            return response

        except Exception:
            duration = (monotonic() - started_at) * 1000
            metric_name = self._build_metric_name(request.method, request.url.path)
            status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value

            metrics_client.timing(f"{metric_name}.timing", value=duration, tags=tags)
            metrics_client.increment(f"{metric_name}.status_codes.{status_code}", tags=tags)
            metrics_client.increment(f"response.status_codes.{status_code}", tags=tags)
            raise

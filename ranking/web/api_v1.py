"""Ranking V1 API"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import ORJSONResponse

from ranking.analytics import get_provider
from ranking.analytics.provider import RankingProvider
from ranking.exceptions import RankingError
from ranking.middleware import ScopeKey
from ranking.utils.api.query_params import get_query_params
from ranking.web.models_v1 import ErrorResponse, RankingResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/ranking",
    tags=["ranking"],
    summary="Page view ranking endpoint",
    response_model=RankingResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def ranking(
    request: Request,
    params: dict[str, str] = Depends(get_query_params),
    provider: RankingProvider = Depends(get_provider),
) -> ORJSONResponse:
    """Return the most viewed page paths of the configured Analytics view.

    **Args:**

    - `includes_paths`: [Optional] A comma-separated list of URL encoded regular
        expressions. Only page paths matching at least one of them are ranked.
        If omitted or empty, every page path is ranked.

    Repeated query parameters are collapsed to their first occurrence.

    **Returns:**

    A JSON array of at most 10 `{"path": str, "views": int}` objects ordered by
    descending views over the last 30 days, excluding today. An empty array
    means no page matched. Any failure returns HTTP 500 with
    `{"error": "internal error"}`.
    """
    logger.debug("Ranking request", extra={"querystring": params})

    includes_paths = params.get("includes_paths", "")
    metrics_tags = request.scope.get(ScopeKey.METRICS_TAGS, {})
    metrics_tags["filtered"] = "true" if includes_paths else "false"

    try:
        page_views = await provider.get_ranking(includes_paths)
    except RankingError as ex:
        metrics_tags["error"] = type(ex).__name__
        # The failing stage already logged the cause.
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=jsonable_encoder(ErrorResponse()),
        )

    return ORJSONResponse(content=jsonable_encoder(page_views))

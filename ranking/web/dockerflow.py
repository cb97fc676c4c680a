"""Dockerflow Endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import ORJSONResponse, RedirectResponse, Response

from ranking.analytics import get_provider
from ranking.analytics.provider import RankingProvider
from ranking.utils.version import Version, fetch_app_version_from_file

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
async def redirect_home_to_docs():
    """Redirects home endpoint to the interactive documentation provided by FastAPI."""
    return RedirectResponse(url="/docs")


@router.get("/__version__", tags=["__version__"], summary="Dockerflow: __version__")
async def version() -> Version:
    """Dockerflow: Query service version."""
    try:
        return fetch_app_version_from_file()
    except FileNotFoundError:
        raise HTTPException(status_code=500, detail="Version file does not exist")


@router.get("/__heartbeat__", tags=["__heartbeat__"], summary="Dockerflow: __heartbeat__")
async def heartbeat(provider: RankingProvider = Depends(get_provider)) -> Response:
    """Dockerflow: Query service heartbeat.

    Returns 503 listing the missing Analytics secrets when the credential or the view
    id is not configured, as every ranking request would fail. Otherwise it returns an
    empty response.
    """
    if missing := provider.config.missing_secrets():
        logger.warning(f"Heartbeat failed, missing Analytics secrets: {', '.join(missing)}")
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "missing": missing},
        )
    return Response(content="")


@router.get("/__lbheartbeat__", tags=["__lbheartbeat__"], summary="Dockerflow: __lbheartbeat__")
async def lbheartbeat() -> Response:
    """Dockerflow: Liveness check for the load balancer, independent of the Analytics
    configuration.
    """
    return Response(content="")


@router.get("/__error__", tags=["__error__"], summary="Dockerflow: __error__")
async def test_error() -> Response:
    """Dockerflow: Return an API error to test service error handling."""
    logger.error("The __error__ endpoint was called")
    raise HTTPException(status_code=500, detail="")

"""Response models for the v1 API."""

from pydantic import BaseModel

from ranking.analytics.backends.protocol import PageViews

# The body of every failed ranking request. Internal details are never exposed.
INTERNAL_ERROR_MESSAGE = "internal error"


class ErrorResponse(BaseModel):
    """Model for the error response of the ranking endpoint."""

    error: str = INTERNAL_ERROR_MESSAGE


RankingResponse = list[PageViews]

"""Ranking middlewares"""

from enum import Enum, unique


@unique
class ScopeKey(str, Enum):
    """Keys into the ASGI scope dict"""

    METRICS_CLIENT = "ranking_metrics_client"
    METRICS_TAGS = "ranking_metrics_tags"

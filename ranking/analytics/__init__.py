"""Initialize the ranking provider"""

import logging
import os

from ranking.analytics.backends.reporting import AnalyticsReportingBackend
from ranking.analytics.config import AnalyticsConfig
from ranking.analytics.provider import RankingProvider
from ranking.configs import settings
from ranking.utils.metrics import get_metrics_client

logger = logging.getLogger(__name__)

provider: RankingProvider | None = None


def init_provider() -> None:
    """Initialize the ranking provider.

    This should only be called once at the startup of application.
    """
    global provider

    config = AnalyticsConfig.from_settings(settings.analytics, os.environ)
    provider = RankingProvider(
        backend=AnalyticsReportingBackend(
            scopes=list(config.scopes),
            api_service_name=config.api_service_name,
            api_version=config.api_version,
            metrics_client=get_metrics_client(),
        ),
        config=config,
    )

    if config.credential is None:
        logger.warning(
            f"{settings.analytics.credential_env_var} is not set, ranking requests will fail"
        )
    logger.info("Ranking provider initialization completed", extra={"provider": "ranking"})


def get_provider() -> RankingProvider:
    """Return the ranking provider"""
    if provider is None:
        raise ValueError("Ranking provider has not been initialized.")
    return provider

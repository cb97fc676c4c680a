"""Request-independent configuration for the ranking provider."""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class AnalyticsConfig(BaseModel):
    """Immutable configuration built once at startup and handed to the provider."""

    model_config = ConfigDict(frozen=True)

    # Raw, double-encoded service account credential. Decoded per request.
    credential: str | None = None
    view_id: str | None = None
    scopes: tuple[str, ...]
    api_service_name: str
    api_version: str
    start_date: str
    end_date: str
    dimension: str
    metric: str
    page_size: int

    @classmethod
    def from_settings(cls, analytics: Any, environ: Mapping[str, str]) -> "AnalyticsConfig":
        """Build the config from the `analytics` settings section.

        Secrets are read from `environ` as-is, under the variable names the settings
        point to.
        """
        return cls(
            credential=environ.get(analytics.credential_env_var),
            view_id=environ.get(analytics.view_id_env_var),
            scopes=tuple(analytics.scopes),
            api_service_name=analytics.api_service_name,
            api_version=analytics.api_version,
            start_date=analytics.start_date,
            end_date=analytics.end_date,
            dimension=analytics.dimension,
            metric=analytics.metric,
            page_size=analytics.page_size,
        )

    def missing_secrets(self) -> list[str]:
        """Return the names of the secrets that are not set."""
        return [name for name in ("credential", "view_id") if not getattr(self, name)]

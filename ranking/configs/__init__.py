"""Configuration for the ranking service"""

from dynaconf import Dynaconf, Validator

# Validators for ranking settings.
_validators = [
    Validator("deployment.canary", is_type_of=bool),
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator("metrics.dev_logger", is_type_of=bool),
    Validator("metrics.host", is_type_of=str),
    Validator("metrics.port", gte=0, is_type_of=int),
    Validator(
        "analytics.credential_env_var",
        "analytics.view_id_env_var",
        "analytics.api_service_name",
        "analytics.api_version",
        "analytics.start_date",
        "analytics.end_date",
        "analytics.dimension",
        "analytics.metric",
        is_type_of=str,
        must_exist=True,
        len_min=1,
    ),
    Validator("analytics.scopes", is_type_of=list, must_exist=True, len_min=1),
    # The Reporting API v4 caps a single page at 100,000 rows, we never need that many.
    Validator("analytics.page_size", is_type_of=int, must_exist=True, gte=1, lte=10000),
    Validator("sentry.env", is_in=["prod", "stage", "dev"]),
    Validator("sentry.mode", is_in=["disabled", "release", "debug"]),
    Validator("sentry.traces_sample_rate", gte=0, lte=1),
]

# `root_path` = The root path for Dynaconf, DO NOT CHANGE.
# `envvar_prefix` = Export envvars with `export RANKING_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export RANKING_ENV=production`. Default: `development`.
# `validators` = Define validators for ranking settings.

settings = Dynaconf(
    root_path="ranking",
    envvar_prefix="RANKING",
    settings_files=[
        "configs/default.toml",
        "configs/development.toml",
        "configs/production.toml",
        "configs/ci.toml",
        "configs/testing.toml",
    ],
    environments=True,
    env_switcher="RANKING_ENV",
    validators=_validators,
)

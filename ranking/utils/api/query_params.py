"""A utility module for API query params."""

from typing import Iterable, Mapping

from starlette.requests import Request


def normalize_query_params(
    params: Mapping[str, str | list[str]] | Iterable[tuple[str, str]],
) -> dict[str, str]:
    """Collapse repeated query parameters to their first occurrence.

    Accepts either a mapping whose values may be a string or a list of strings,
    or the raw `(key, value)` pairs of a query string in request order.
    """
    normalized: dict[str, str] = {}
    items = params.items() if isinstance(params, Mapping) else params
    for key, value in items:
        if isinstance(value, list):
            if not value:
                continue
            value = value[0]
        normalized.setdefault(key, value)
    return normalized


def get_query_params(request: Request) -> dict[str, str]:
    """FastAPI dependency returning the request's query params with repeats collapsed.

    Starlette resolves a repeated key to its last value, so the multi-items are
    walked in order instead.
    """
    return normalize_query_params(request.query_params.multi_items())

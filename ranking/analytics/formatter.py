"""Reshaping of a Reporting API response into a page view ranking."""

import logging

from ranking.analytics.backends.protocol import PageViews, ReportResponse
from ranking.exceptions import FormatError

logger = logging.getLogger(__name__)


def parse_views(value: str) -> int:
    """Parse a view count made only of ASCII decimal digits."""
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"view count is not a decimal integer: {value!r}")
    return int(value, 10)


def format_report(report: ReportResponse) -> list[PageViews]:
    """Map the rows of the first report to `PageViews`, keeping the order received.

    A report without rows is a valid, empty ranking.

    Raises:
        FormatError: if the response shape is unexpected or a view count is not an integer.
    """
    try:
        rows = report["reports"][0]["data"].get("rows") or []
        ranking = [
            PageViews(path=row["dimensions"][0], views=parse_views(row["metrics"][0]["values"][0]))
            for row in rows
        ]
    except (KeyError, IndexError, TypeError, AttributeError, ValueError) as ex:
        logger.error(f"Failed to format the Analytics report: {ex!r}")
        raise FormatError(f"Unexpected Analytics report shape: {ex!r}") from ex

    if not ranking:
        logger.info("Got the Analytics report successfully, but it has no data")

    return ranking

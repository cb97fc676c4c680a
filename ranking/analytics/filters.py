"""Parsing of the `includes_paths` query parameter."""

import logging
import re
from urllib.parse import unquote

from ranking.exceptions import PathFilterError

logger = logging.getLogger(__name__)

# A `%` that doesn't start a two hex digit escape.
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_segment(segment: str) -> str:
    """Percent-decode a single segment as UTF-8.

    Raises:
        ValueError: if the segment holds a malformed escape or doesn't decode as UTF-8.
    """
    if match := MALFORMED_ESCAPE.search(segment):
        raise ValueError(f"malformed percent escape at position {match.start()}")
    return unquote(segment, errors="strict")


def parse_path_filters(includes_paths: str) -> list[str]:
    """Split a comma-separated `includes_paths` value into decoded regular expressions.

    Each segment is percent-decoded and must compile as a regular expression. The
    returned strings are the exact values sent to the Reporting API. Empty segments
    are dropped, so an empty value yields no filters at all.

    Raises:
        PathFilterError: if a segment can't be decoded or compiled.
    """
    path_filters: list[str] = []
    for segment in includes_paths.split(","):
        try:
            path = decode_segment(segment)
            re.compile(path)
        except (ValueError, re.error) as ex:
            logger.error(f"includes_paths is not valid: {ex}")
            raise PathFilterError(f"Invalid path filter {segment!r}: {ex}") from ex

        if path:
            path_filters.append(path)

    return path_filters

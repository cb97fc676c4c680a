# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the `includes_paths` parser."""

import logging

import pytest
from pytest import LogCaptureFixture

from ranking.analytics.filters import parse_path_filters
from ranking.exceptions import PathFilterError
from tests.types import FilterCaplogFixture


@pytest.mark.parametrize(
    ("includes_paths", "expected_filters"),
    [
        ("%2Fblog.*,%2Fnews.*", ["/blog.*", "/news.*"]),
        ("/blog.*,/news.*", ["/blog.*", "/news.*"]),
        ("^%2Fposts%2F%5Cd%2B%24", ["^/posts/\\d+$"]),
        ("/about", ["/about"]),
        ("%2Fa%252Cb", ["/a%2Cb"]),
        ("/a,,/b", ["/a", "/b"]),
        ("", []),
    ],
    ids=["encoded", "plain", "encoded-metacharacters", "single", "decoded-once", "gap", "empty"],
)
def test_parse_path_filters(includes_paths: str, expected_filters: list[str]) -> None:
    """Test that segments are split, decoded and kept in order."""
    assert parse_path_filters(includes_paths) == expected_filters


@pytest.mark.parametrize(
    "includes_paths",
    [
        "/blog(",
        "/blog.*,/news(",
        "[a-",
        "%2Fblog%28",
        "%FF",
        "%zz",
        "/blog%",
        "/blog%2",
    ],
    ids=[
        "unmatched-paren",
        "second-segment",
        "unterminated-set",
        "encoded-paren",
        "bad-utf8",
        "non-hex-escape",
        "trailing-percent",
        "truncated-escape",
    ],
)
def test_parse_path_filters_invalid(
    includes_paths: str, caplog: LogCaptureFixture, filter_caplog: FilterCaplogFixture
) -> None:
    """Test that a segment that isn't a valid regular expression raises a PathFilterError."""
    caplog.set_level(logging.ERROR)

    with pytest.raises(PathFilterError):
        parse_path_filters(includes_paths)

    records = filter_caplog(caplog.records, "ranking.analytics.filters")
    assert len(records) == 1
    assert records[0].message.startswith("includes_paths is not valid")

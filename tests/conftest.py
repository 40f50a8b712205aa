"""Shared test fixtures."""

from __future__ import annotations

import pytest

from url_prettifier import PrettyUrlPattern, Route, UrlPrettifier

PATTERN_STRING = "/page-pretty-url-:id"


@pytest.fixture
def pattern_string() -> str:
    """Express-style pattern with a single ``id`` param."""
    return PATTERN_STRING


@pytest.fixture
def pretty_url_patterns() -> list[PrettyUrlPattern]:
    """Two patterns for one page, the second with default params."""
    return [
        PrettyUrlPattern(PATTERN_STRING),
        PrettyUrlPattern("/page-pretty-url-one", default_params={"id": 1}),
    ]


@pytest.fixture
def route(pretty_url_patterns: list[PrettyUrlPattern]) -> Route:
    """A route with a callable pretty URL and explicit patterns."""
    return Route(
        page="pageName",
        pretty_url=lambda params: f"/page-pretty-url-{params['id']}",
        pretty_url_patterns=pretty_url_patterns,
    )


@pytest.fixture
def prettifier(route: Route) -> UrlPrettifier:
    """A prettifier serving the single ``pageName`` route."""
    return UrlPrettifier([route])

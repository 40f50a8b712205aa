"""url-prettifier: map page names and params to pretty URLs."""

from __future__ import annotations

from url_prettifier.__metadata__ import __version__
from url_prettifier.config import (
    PrettifierConfig,
    PrettifierOptions,
    load_config_from_pyproject,
)
from url_prettifier.prettifier import DuplicateRouteError, UrlPrettifier
from url_prettifier.query import params_to_query_string, urlencoded_query_string
from url_prettifier.routes import PageLink, PrettyUrlPattern, Route, get_pretty_url_patterns

__all__ = [
    "__version__",
    # Config
    "PrettifierConfig",
    "PrettifierOptions",
    "load_config_from_pyproject",
    # Prettifier
    "DuplicateRouteError",
    "UrlPrettifier",
    # Query strings
    "params_to_query_string",
    "urlencoded_query_string",
    # Routes
    "PageLink",
    "PrettyUrlPattern",
    "Route",
    "get_pretty_url_patterns",
]

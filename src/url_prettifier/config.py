"""Configuration for url-prettifier."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from url_prettifier.query import QueryStringSerializer, get_serializer
from url_prettifier.routes import Route

# Python 3.11+ has tomllib, earlier versions need tomli
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

if TYPE_CHECKING:
    from url_prettifier.prettifier import UrlPrettifier

CONFIG_SECTION = "url-prettifier"


@dataclass(frozen=True)
class PrettifierOptions:
    """Runtime options for a UrlPrettifier.

    Attributes:
        params_to_query_string: Serializer for the href query string. When None,
            the plain ``?key=value&...`` serializer is used.

    Example:
        >>> options = PrettifierOptions(params_to_query_string=lambda params: f"/id/{params['id']}")
    """

    params_to_query_string: QueryStringSerializer | None = None


@dataclass
class PrettifierConfig:
    """Declarative configuration, usually read from pyproject.toml.

    Routes declared here can only use literal pretty URLs; callable pretty URLs
    are passed to UrlPrettifier directly in code.

    Attributes:
        query_string: Name of the built-in serializer ("plain" or "urlencoded").
        routes: The declared routes, in order.
    """

    query_string: Literal["plain", "urlencoded"] = "plain"
    routes: list[Route] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PrettifierConfig:
        """Create config from a dictionary (e.g. the pyproject.toml section).

        Args:
            data: Dictionary containing configuration values.

        Returns:
            PrettifierConfig with values from the dictionary, defaults elsewhere.

        Raises:
            ValueError: If the serializer name or a route entry is invalid.

        Examples:
            >>> config = PrettifierConfig.from_dict(
            ...     {
            ...         "query_string": "urlencoded",
            ...         "routes": [{"page": "about", "pretty_url": "/about-us"}],
            ...     }
            ... )
            >>> config.routes
            [Route(about)]
        """
        defaults = cls()
        query_string = data.get("query_string", defaults.query_string)
        # Fail early on unknown serializer names
        get_serializer(query_string)

        return cls(
            query_string=query_string,
            routes=_parse_routes(data.get("routes", [])),
        )

    def to_options(self) -> PrettifierOptions:
        """Build the runtime options this config describes."""
        return PrettifierOptions(params_to_query_string=get_serializer(self.query_string))

    def build_prettifier(self) -> UrlPrettifier:
        """Build a UrlPrettifier serving the configured routes."""
        # Import here to avoid circular imports
        from url_prettifier.prettifier import UrlPrettifier

        return UrlPrettifier(self.routes, self.to_options())


def _parse_routes(routes_data: Any) -> list[Route]:
    """Parse route tables.

    Example config in pyproject.toml::

        [[tool.url-prettifier.routes]]
        page = "article"
        pretty_url = "/articles"
        pretty_url_patterns = [
            "/articles/:id",
            { pattern = "/articles", default_params = { id = 1 } },
        ]
    """
    if not isinstance(routes_data, list):
        msg = f"'routes' must be an array of tables ([[tool.{CONFIG_SECTION}.routes]]), got {routes_data!r}"
        raise ValueError(msg)

    routes = []
    for index, route_data in enumerate(routes_data):
        if not isinstance(route_data, Mapping):
            msg = f"Route #{index} must be a table, got {route_data!r}"
            raise ValueError(msg)

        page = route_data.get("page")
        pretty_url = route_data.get("pretty_url")
        if not isinstance(page, str) or not isinstance(pretty_url, str):
            msg = f"Route #{index} must define string 'page' and 'pretty_url' keys: {dict(route_data)!r}"
            raise ValueError(msg)

        patterns = route_data.get("pretty_url_patterns")
        # TOML arrays load as lists; keep them immutable inside the frozen Route
        if isinstance(patterns, list):
            patterns = tuple(patterns)
        routes.append(Route(page=page, pretty_url=pretty_url, pretty_url_patterns=patterns))

    return routes


def load_config_from_pyproject(path: Path | None = None) -> PrettifierConfig:
    """Load configuration from the pyproject.toml [tool.url-prettifier] section.

    Args:
        path: Path to pyproject.toml file. If None, looks in current working directory.

    Returns:
        PrettifierConfig loaded from file, or defaults if file or section is missing.

    Raises:
        ValueError: If pyproject.toml cannot be parsed or contains invalid configuration.

    Examples:
        >>> config = load_config_from_pyproject()
        >>> config = load_config_from_pyproject(Path("/path/to/pyproject.toml"))
    """
    if path is None:
        path = Path.cwd() / "pyproject.toml"

    if not path.exists():
        return PrettifierConfig()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse {path}: {e}"
        raise ValueError(msg) from e

    config_data = data.get("tool", {}).get(CONFIG_SECTION, {})
    if not config_data:
        return PrettifierConfig()

    return PrettifierConfig.from_dict(config_data)

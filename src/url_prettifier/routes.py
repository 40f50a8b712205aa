"""Route table types and pretty-URL pattern normalization."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

PrettyUrl = Union[str, Callable[[Mapping[str, Any]], str]]
"""Either a literal pretty URL or a callable building one from the params."""

PatternShape = Union[str, Sequence[Union[str, "PrettyUrlPattern", Mapping[str, Any]]], None]
"""Every shape accepted for ``Route.pretty_url_patterns``."""


@dataclass(frozen=True)
class PrettyUrlPattern:
    """A single server-side route registration for a page.

    Attributes:
        pattern: The route-matching template (e.g. ``"/articles/:id"``).
        default_params: Values applied when the pattern omits a parameter.
    """

    pattern: str
    default_params: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class Route:
    """A page and the pretty URLs it is reachable through.

    Attributes:
        page: Unique page name, used as the lookup key.
        pretty_url: The displayed URL, or a callable building it from params.
        pretty_url_patterns: Patterns to register with the server. When omitted
            or empty, a string ``pretty_url`` doubles as the only pattern.

    Example:
        >>> route = Route(
        ...     page="article",
        ...     pretty_url=lambda params: f"/articles/{params['id']}",
        ...     pretty_url_patterns="/articles/:id",
        ... )
    """

    page: str
    pretty_url: PrettyUrl
    pretty_url_patterns: PatternShape = None

    def __repr__(self) -> str:
        return f"Route({self.page})"


@dataclass(frozen=True)
class PageLink:
    """The two-part link a page resolves to.

    Attributes:
        href: Internal URL of the page with its params as a query string.
        as_: Pretty URL displayed to the user, if the page has a route.
    """

    href: str
    as_: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return the ``{"href", "as"}`` mapping, without ``"as"`` when unset."""
        data = {"href": self.href}
        if self.as_ is not None:
            data["as"] = self.as_
        return data


def get_pretty_url_patterns(route: Route) -> list[PrettyUrlPattern]:
    """Normalize the patterns declared on a route.

    Args:
        route: The route to read patterns from.

    Returns:
        The route's patterns as a list of PrettyUrlPattern, in declaration order.
        Unsupported shapes yield an empty list.

    Examples:
        >>> get_pretty_url_patterns(Route("about", "/about-us"))
        [PrettyUrlPattern(pattern='/about-us', default_params=None)]
        >>> get_pretty_url_patterns(Route("about", "/about-us", ["/about"]))
        [PrettyUrlPattern(pattern='/about', default_params=None)]
    """
    declared = route.pretty_url_patterns

    # An empty list or tuple counts as no patterns declared
    if declared is None or (isinstance(declared, (list, tuple)) and not declared):
        if isinstance(route.pretty_url, str):
            return [PrettyUrlPattern(route.pretty_url)]
        return []

    if isinstance(declared, str):
        return [PrettyUrlPattern(declared)]

    if isinstance(declared, (list, tuple)):
        patterns = []
        for entry in declared:
            pattern = _coerce_pattern(entry)
            if pattern is None:
                logger.debug("Ignoring unsupported pattern entry %r on %r", entry, route)
                continue
            patterns.append(pattern)
        return patterns

    logger.debug("Ignoring unsupported pretty_url_patterns %r on %r", declared, route)
    return []


def _coerce_pattern(entry: Any) -> PrettyUrlPattern | None:
    """Convert one list entry to a PrettyUrlPattern, or None if unsupported."""
    if isinstance(entry, PrettyUrlPattern):
        return entry
    if isinstance(entry, str):
        return PrettyUrlPattern(entry)
    if isinstance(entry, Mapping) and isinstance(entry.get("pattern"), str):
        # camelCase is accepted for configs shared with JavaScript tooling
        default_params = entry.get("default_params", entry.get("defaultParams"))
        return PrettyUrlPattern(entry["pattern"], default_params)
    return None

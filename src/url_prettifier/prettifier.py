"""Resolve page names to hrefs and pretty URLs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from url_prettifier.config import PrettifierOptions
from url_prettifier.query import params_to_query_string
from url_prettifier.routes import PageLink, PrettyUrlPattern, Route, get_pretty_url_patterns

PatternCallback = Callable[[str, str, "Mapping[str, Any] | None"], Any]


class DuplicateRouteError(ValueError):
    """Raised when two routes share the same page name."""

    def __init__(self, page: str) -> None:
        self.page = page
        super().__init__(f"Duplicate route for page: {page!r}")


class UrlPrettifier:
    """Map page names and params to internal hrefs and pretty URLs.

    The route table is fixed at construction time.

    Example:
        >>> prettifier = UrlPrettifier(
        ...     [Route("article", lambda params: f"/articles/{params['id']}", "/articles/:id")]
        ... )
        >>> prettifier.link_page("article", {"id": 1}).to_dict()
        {'href': '/article?id=1', 'as': '/articles/1'}
    """

    def __init__(self, routes: Iterable[Route], options: PrettifierOptions | None = None) -> None:
        """Initialize the prettifier.

        Args:
            routes: The routes to serve, one per page name.
            options: Optional overrides, such as the query string serializer.

        Raises:
            DuplicateRouteError: If two routes declare the same page.
        """
        self._routes = tuple(routes)
        self.options = options or PrettifierOptions()
        self.params_to_query_string = self.options.params_to_query_string or params_to_query_string

        by_page: dict[str, Route] = {}
        for route in self._routes:
            if route.page in by_page:
                raise DuplicateRouteError(route.page)
            by_page[route.page] = route
        self._by_page = MappingProxyType(by_page)

    def __repr__(self) -> str:
        return f"UrlPrettifier({', '.join(self._by_page)})"

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, page: object) -> bool:
        return page in self._by_page

    @property
    def routes(self) -> tuple[Route, ...]:
        """The route table, in declaration order."""
        return self._routes

    def get_route(self, page: str) -> Route | None:
        """Return the route registered for a page, if any."""
        return self._by_page.get(page)

    def link_page(self, page_name: str, params: Mapping[str, Any] | None = None) -> PageLink:
        """Resolve a page and its params to a link.

        The href is always built, whether or not the page has a route. The pretty
        URL is only set for known pages. Exceptions raised by a callable
        ``pretty_url`` propagate to the caller.

        Args:
            page_name: Name of the page to link to.
            params: Page parameters, serialized into the href's query string.

        Returns:
            A PageLink with ``href`` and, for known pages, ``as_``.
        """
        params = params if params is not None else {}
        query_string = self.params_to_query_string(params) if params else ""
        href = f"/{page_name}{query_string}"

        route = self._by_page.get(page_name)
        if route is None:
            return PageLink(href=href)

        pretty_url = route.pretty_url(params) if callable(route.pretty_url) else route.pretty_url
        return PageLink(href=href, as_=pretty_url)

    def get_pretty_url_patterns(self, route: Route) -> list[PrettyUrlPattern]:
        """Normalize a route's patterns. See :func:`url_prettifier.routes.get_pretty_url_patterns`."""
        return get_pretty_url_patterns(route)

    def iter_patterns(self) -> Iterator[tuple[str, str, Mapping[str, Any] | None]]:
        """Yield ``(page, pattern, default_params)`` for every route pattern.

        Routes are visited in declaration order, then each route's patterns in order.
        """
        for route in self._routes:
            for pretty_url_pattern in self.get_pretty_url_patterns(route):
                yield route.page, pretty_url_pattern.pattern, pretty_url_pattern.default_params

    def for_each_pattern(self, callback: PatternCallback) -> None:
        """Call ``callback(page, pattern, default_params)`` for every route pattern.

        Args:
            callback: Invoked once per pattern; ``default_params`` is None when the
                pattern declares none.
        """
        for page, pattern, default_params in self.iter_patterns():
            callback(page, pattern, default_params)

"""Serve pretty URLs from a Starlette application."""

from __future__ import annotations

import functools
import inspect
import logging
import re
from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, Union

from starlette.concurrency import run_in_threadpool
from starlette.routing import Route

if TYPE_CHECKING:
    from starlette.applications import Starlette
    from starlette.requests import Request
    from starlette.responses import Response

    from url_prettifier.prettifier import UrlPrettifier

logger = logging.getLogger(__name__)

PageRenderer = Callable[["Request", str, dict[str, Any]], Union["Response", Awaitable["Response"]]]
"""Renders ``page`` for a request given the merged page params."""

# Either an existing {param} / {param:type} segment, or an Express-style :param
# followed by any modifier (optional, repeat or regex constraint)
_PARAM_RE = re.compile(r"(\{[^}]*\})|:([A-Za-z_]\w*)([?*+(]?)")


def starlette_path(pattern: str) -> str:
    """Convert an Express-style pattern to a Starlette path.

    ``:name`` segments become ``{name}``. Starlette placeholders, including typed
    ones such as ``{id:int}``, are left untouched. Express modifiers (``:id?``,
    ``:id*``, ``:id+``, ``:id(\\d+)``) have no Starlette equivalent; declare one
    pattern per variant instead, using ``default_params`` for omitted segments.

    Raises:
        ValueError: If the pattern uses an Express parameter modifier.

    Examples:
        >>> starlette_path("/page-pretty-url-:id")
        '/page-pretty-url-{id}'
        >>> starlette_path("/users/{user_id:int}/:tab")
        '/users/{user_id:int}/{tab}'
    """

    def _replace(match: re.Match[str]) -> str:
        if match.group(1) is not None:
            return match.group(1)
        if match.group(3):
            msg = f"Unsupported modifier {match.group(3)!r} on parameter {match.group(2)!r} in pattern {pattern!r}"
            raise ValueError(msg)
        return "{" + match.group(2) + "}"

    return _PARAM_RE.sub(_replace, pattern)


def _is_async_callable(obj: Any) -> bool:
    """Check for coroutine functions, including partials and async ``__call__``."""
    while isinstance(obj, functools.partial):
        obj = obj.func
    return inspect.iscoroutinefunction(obj) or inspect.iscoroutinefunction(getattr(obj, "__call__", None))


def _make_endpoint(
    render: PageRenderer,
    page: str,
    default_params: Mapping[str, Any] | None,
) -> Callable[[Request], Awaitable[Response]]:
    """Build the request handler for one page pattern."""
    is_async = _is_async_callable(render)

    async def endpoint(request: Request) -> Response:
        # Path params win over query params, which win over pattern defaults
        params: dict[str, Any] = {
            **(default_params or {}),
            **request.query_params,
            **request.path_params,
        }
        if is_async:
            return await render(request, page, params)
        response = await run_in_threadpool(render, request, page, params)
        # Sync callables may still hand back an awaitable
        if inspect.isawaitable(response):
            response = await response
        return response

    endpoint.__name__ = f"render_{page}"
    return endpoint


def build_starlette_routes(prettifier: UrlPrettifier, render: PageRenderer) -> list[Route]:
    """Build one Starlette route per pretty-URL pattern.

    Args:
        prettifier: The prettifier whose patterns to serve.
        render: Called as ``render(request, page, params)`` to produce the response.
            It may be a plain function or a coroutine function.

    Returns:
        Routes in pattern order, named ``"<page>:<index>"``.

    Example:
        >>> async def render(request, page, params):
        ...     return templates.TemplateResponse(request, f"{page}.html", params)
        >>> routes = build_starlette_routes(prettifier, render)
        >>> app = Starlette(routes=routes)
    """
    routes: list[Route] = []
    counts: dict[str, int] = {}

    for page, pattern, default_params in prettifier.iter_patterns():
        index = counts.get(page, 0)
        counts[page] = index + 1

        path = starlette_path(pattern)
        logger.debug("Registering %s -> page %r (defaults: %r)", path, page, default_params)
        routes.append(
            Route(
                path,
                _make_endpoint(render, page, default_params),
                methods=["GET"],
                name=f"{page}:{index}",
            )
        )

    return routes


def register_pretty_urls(app: Starlette, prettifier: UrlPrettifier, render: PageRenderer) -> list[Route]:
    """Append pretty-URL routes to an existing Starlette application.

    Args:
        app: The Starlette application.
        prettifier: The prettifier whose patterns to serve.
        render: Page renderer, see :func:`build_starlette_routes`.

    Returns:
        The routes that were added.
    """
    routes = build_starlette_routes(prettifier, render)
    app.router.routes.extend(routes)
    return routes

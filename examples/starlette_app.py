"""Example Starlette application serving pretty URLs.

Run with::

    uvicorn examples.starlette_app:app --reload
"""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route as StarletteRoute

from url_prettifier import PrettyUrlPattern, Route, UrlPrettifier
from url_prettifier.integrations.starlette import register_pretty_urls

# In-memory "database"
articles_db: dict[int, dict] = {
    1: {"id": 1, "title": "Hello, world"},
    2: {"id": 2, "title": "Pretty URLs"},
}

prettifier = UrlPrettifier(
    [
        Route("home", "/"),
        Route(
            "article",
            lambda params: f"/articles/{params['id']}-{params.get('slug', 'article')}",
            [
                "/articles/:id-:slug",
                PrettyUrlPattern("/articles/latest", default_params={"id": "2", "slug": "latest"}),
            ],
        ),
    ]
)


async def render(request: Request, page: str, params: dict) -> HTMLResponse:
    """Render a page with links built by the prettifier."""
    if page == "home":
        items = []
        for article in articles_db.values():
            link = prettifier.link_page("article", {"id": article["id"], "slug": "read"})
            items.append(f'<li><a href="{link.as_}" data-href="{link.href}">{article["title"]}</a></li>')
        return HTMLResponse(f"<ul>{''.join(items)}</ul>")

    article = articles_db.get(int(params["id"]))
    if article is None:
        return HTMLResponse("<h1>Not found</h1>", status_code=404)
    return HTMLResponse(f"<h1>{article['title']}</h1>")


async def links(request: Request) -> JSONResponse:
    """Show the href/as pair for every article."""
    return JSONResponse([prettifier.link_page("article", {"id": i}).to_dict() for i in articles_db])


app = Starlette(routes=[StarletteRoute("/links", links)])
register_pretty_urls(app, prettifier, render)

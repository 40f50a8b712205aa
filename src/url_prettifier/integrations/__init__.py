"""Integrations with web frameworks."""

from __future__ import annotations

from url_prettifier.integrations.starlette import (
    build_starlette_routes,
    register_pretty_urls,
    starlette_path,
)

__all__ = [
    "build_starlette_routes",
    "register_pretty_urls",
    "starlette_path",
]

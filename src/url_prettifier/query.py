"""Query string serializers for page hrefs."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import urlencode

QueryStringSerializer = Callable[[Mapping[str, Any]], str]


def params_to_query_string(params: Mapping[str, Any]) -> str:
    """Serialize params as ``?key=value&...`` in insertion order.

    Values are converted with ``str`` and left unescaped.

    Args:
        params: The page parameters.

    Returns:
        The query string, or an empty string when there are no params.

    Examples:
        >>> params_to_query_string({"id": 1, "tab": "comments"})
        '?id=1&tab=comments'
        >>> params_to_query_string({})
        ''
    """
    if not params:
        return ""
    return "?" + "&".join(f"{key}={value}" for key, value in params.items())


def urlencoded_query_string(params: Mapping[str, Any]) -> str:
    """Serialize params as a percent-encoded query string.

    Examples:
        >>> urlencoded_query_string({"q": "a b&c"})
        '?q=a+b%26c'
    """
    if not params:
        return ""
    return "?" + urlencode({key: str(value) for key, value in params.items()})


SERIALIZERS: dict[str, QueryStringSerializer] = {
    "plain": params_to_query_string,
    "urlencoded": urlencoded_query_string,
}


def get_serializer(name: str) -> QueryStringSerializer:
    """Look up a built-in serializer by its configuration name.

    Raises:
        ValueError: If no serializer is registered under that name.
    """
    if not isinstance(name, str):
        msg = f"query_string must be a string, got {name!r}"
        raise ValueError(msg)

    try:
        return SERIALIZERS[name]
    except KeyError:
        msg = f"Unknown query_string serializer: {name!r} (expected one of {sorted(SERIALIZERS)})"
        raise ValueError(msg) from None

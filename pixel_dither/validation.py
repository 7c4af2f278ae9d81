from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping
from urllib.parse import urlsplit

from .errors import InvalidInputError

ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class DitherRequest:
    url: str


def _url_values(args: Mapping[str, Any]) -> List[Any]:
    getlist = getattr(args, "getlist", None)
    if callable(getlist):
        return list(getlist("url"))
    return [args["url"]] if "url" in args else []


def parse_dither_request(args: Mapping[str, Any]) -> DitherRequest:
    """Build a ``DitherRequest`` from query arguments.

    Exactly one non-empty ``url`` value with an http(s) scheme and a host is
    accepted; anything else raises ``InvalidInputError``.
    """

    values = _url_values(args)
    if len(values) != 1:
        raise InvalidInputError(f"expected one url parameter, got {len(values)}")

    url = values[0]
    if not isinstance(url, str) or not url.strip():
        raise InvalidInputError("url parameter is empty or not a string")

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidInputError(f"unparseable url: {url!r}") from exc
    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.netloc:
        raise InvalidInputError(f"url must be absolute http(s): {url!r}")

    return DitherRequest(url=url)

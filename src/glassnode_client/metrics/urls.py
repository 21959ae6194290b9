"""Endpoint URL composition."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote, unquote, urlencode, urlsplit, urlunsplit

from ..core.errors import GlassnodeValidationError
from .validators import ensure_required


def join_path_segments(*segments: str) -> str:
    """Join raw segments with exactly one ``/`` between them.

    Empty pieces and surplus separators are dropped and every piece is
    percent-encoded, so ``?`` or ``#`` inside a name stays in the path.
    """

    parts: list[str] = []
    for segment in segments:
        parts.extend(quote(piece, safe="") for piece in segment.split("/") if piece)
    return "/".join(parts)


def _ensure_path_segment(value: str, *, name: str) -> str:
    ensure_required(value, name=name)
    if not value.strip("/"):
        raise GlassnodeValidationError(f"{name} required")
    return value


def encode_query(params: Mapping[str, str]) -> str:
    return urlencode(sorted(params.items()))


def compose_url(
    base_url: str,
    metrics_prefix: str,
    category: str,
    metric: str,
    params: Mapping[str, str],
) -> str:
    _ensure_path_segment(category, name="category")
    _ensure_path_segment(metric, name="metric")

    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc:
        raise GlassnodeValidationError(f"base url must be absolute: {base_url!r}")

    # The base path arrives already escaped.
    path = "/" + join_path_segments(unquote(parts.path), metrics_prefix, category, metric)
    return urlunsplit((parts.scheme, parts.netloc, path, encode_query(params), ""))


__all__ = [
    "join_path_segments",
    "encode_query",
    "compose_url",
]

"""Request parameter builder for metric endpoints."""

from __future__ import annotations

from ..core.errors import GlassnodeValidationError
from .requests import MetricRequest
from .validators import (
    API_KEY_PARAM,
    ASSET_PARAM,
    FREQUENCY_PARAM,
    SINCE_PARAM,
    UNTIL_PARAM,
    ensure_no_format_override,
    ensure_required,
)


def build_query_params(api_key: str, request: MetricRequest) -> dict[str, str]:
    """Merge overrides and structured fields into one query parameter set.

    Overrides are applied first so structured fields replace colliding keys.
    An override may supply ``a`` only when ``request.asset`` is empty.
    Category and metric are path segments and are checked by ``compose_url``.
    """

    params: dict[str, str] = dict(request.overrides)

    params[API_KEY_PARAM] = ensure_required(api_key, name="api key")

    if request.asset:
        params[ASSET_PARAM] = request.asset
    if not params.get(ASSET_PARAM):
        raise GlassnodeValidationError("asset required")

    if request.since != 0:
        params[SINCE_PARAM] = str(request.since)
    if request.until != 0:
        params[UNTIL_PARAM] = str(request.until)
    if request.frequency:
        params[FREQUENCY_PARAM] = request.frequency

    ensure_no_format_override(params)
    return params


__all__ = [
    "build_query_params",
]

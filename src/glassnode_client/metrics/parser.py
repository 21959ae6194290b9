"""Classify and decode metric payloads into typed series.

The API does not tag which record shape an endpoint returns, so the body is
trial-decoded in a fixed order:

1. as ``TimeValue`` records (``{"t": int, "v": number}``). A non-empty result
   whose first value is non-zero is accepted as conclusive;
2. otherwise as ``TimeOptions`` records (``{"t": int, "o": {str: number}}``).

An absent ``v`` decodes to ``0.0``, so a series whose first value really is
``0.0`` cannot be told apart from an options payload and is only accepted if
it also decodes as options. An empty array decodes as an empty
``TimeValueSeries``.
"""

from __future__ import annotations

import json
import math

from ..core.errors import GlassnodeParseError
from .models import ParsedSeries, TimeOptions, TimeOptionsSeries, TimeValue, TimeValueSeries

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class SchemaMismatchError(ValueError):
    """Payload does not fit the record shape being decoded."""


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def load_json(raw: bytes | str) -> object:
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise GlassnodeParseError("response body is not valid JSON", detail=str(exc)) from exc


def _as_records(payload: object) -> list[dict[str, object]]:
    if not isinstance(payload, list):
        raise SchemaMismatchError(f"expected array, got {type(payload).__name__}")
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise SchemaMismatchError(f"[{index}]: expected object, got {type(item).__name__}")
    return payload


def _as_time(item: dict[str, object], *, index: int) -> int:
    if "t" not in item:
        raise SchemaMismatchError(f"[{index}].t: missing")
    value = item["t"]
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaMismatchError(f"[{index}].t: expected integer, got {type(value).__name__}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise SchemaMismatchError(f"[{index}].t: out of int64 range")
    return value


def _as_number(value: object, *, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaMismatchError(f"{where}: expected number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise SchemaMismatchError(f"{where}: number out of float64 range") from exc
    if not math.isfinite(number):
        raise SchemaMismatchError(f"{where}: number out of float64 range")
    return number


def decode_time_values(payload: object) -> tuple[TimeValue, ...]:
    points: list[TimeValue] = []
    for index, item in enumerate(_as_records(payload)):
        raw_value = item.get("v")
        value = 0.0 if raw_value is None else _as_number(raw_value, where=f"[{index}].v")
        points.append(TimeValue(time=_as_time(item, index=index), value=value))
    return tuple(points)


def decode_time_options(payload: object) -> tuple[TimeOptions, ...]:
    records: list[TimeOptions] = []
    for index, item in enumerate(_as_records(payload)):
        time = _as_time(item, index=index)
        raw_options = item.get("o")
        if not isinstance(raw_options, dict):
            raise SchemaMismatchError(
                f"[{index}].o: expected object, got {type(raw_options).__name__}"
            )
        options = {
            str(key): _as_number(value, where=f"[{index}].o.{key}")
            for key, value in raw_options.items()
        }
        records.append(TimeOptions(time=time, options=options))
    return tuple(records)


def classify_payload(payload: object) -> ParsedSeries:
    """Classify an already-decoded JSON value."""

    try:
        points = decode_time_values(payload)
    except SchemaMismatchError as exc:
        time_value_error = str(exc)
    else:
        if not points or points[0].value != 0.0:
            return TimeValueSeries(points=points)
        time_value_error = "first value is zero; shape inconclusive"

    try:
        records = decode_time_options(payload)
    except SchemaMismatchError as exc:
        raise GlassnodeParseError(
            "response matches neither known schema",
            detail=f"time_value: {time_value_error}; time_options: {exc}",
        ) from exc
    return TimeOptionsSeries(records=records)


def classify_response(raw: bytes | str) -> ParsedSeries:
    """Decode a raw response body into ``TimeValueSeries`` or ``TimeOptionsSeries``."""

    return classify_payload(load_json(raw))


__all__ = [
    "SchemaMismatchError",
    "load_json",
    "decode_time_values",
    "decode_time_options",
    "classify_payload",
    "classify_response",
]

from __future__ import annotations

import pytest

from glassnode_client.core.errors import GlassnodeParseError
from glassnode_client.metrics.models import (
    TimeOptions,
    TimeOptionsSeries,
    TimeValue,
    TimeValueSeries,
)
from glassnode_client.metrics.parser import classify_response
from tests.shared.payloads import make_time_options_body, make_time_value_body


def test_classify_single_time_value_record():
    result = classify_response(b'[{"t":1586217600,"v":0.042}]')
    assert result == TimeValueSeries(points=(TimeValue(time=1586217600, value=0.042),))
    assert result.kind == "time_value"


def test_classify_single_time_options_record():
    result = classify_response(b'[{"t":1604361600,"o":{"ma9":8.43e22}}]')
    assert result == TimeOptionsSeries(
        records=(TimeOptions(time=1604361600, options={"ma9": 8.43e22}),)
    )
    assert result.kind == "time_options"


def test_classify_time_value_fixture(fixture_loader):
    result = classify_response(fixture_loader("sopr.json"))
    assert isinstance(result, TimeValueSeries)
    assert len(result.points) == 4
    assert result.points[0].time == 1586217600
    assert result.points[0].value >= 0.042


def test_classify_time_options_fixture(fixture_loader):
    result = classify_response(fixture_loader("difficulty_ribbon.json"))
    assert isinstance(result, TimeOptionsSeries)
    assert result.records[0].time == 1604361600
    assert set(result.records[0].options) == {
        "ma9", "ma14", "ma25", "ma40", "ma60", "ma90", "ma128", "ma200",
    }
    assert result.records[0].options["ma9"] > 100


def test_classify_time_value_body_round_trips():
    points = [(1, 1.5), (2, 0.0), (3, -2.25)]
    result = classify_response(make_time_value_body(points))
    assert result == TimeValueSeries(points=[TimeValue(time=t, value=v) for t, v in points])


def test_classify_time_options_body_round_trips():
    records = [(1, {"a": 1.0, "b": 0.0}), (2, {})]
    result = classify_response(make_time_options_body(records))
    assert result == TimeOptionsSeries(
        records=[TimeOptions(time=t, options=o) for t, o in records]
    )


def test_classify_empty_array_is_empty_time_value_series():
    result = classify_response(b"[]")
    assert result == TimeValueSeries(points=())
    assert len(result) == 0


def test_classify_accepts_integer_values_as_floats():
    result = classify_response(b'[{"t":1,"v":3}]')
    assert isinstance(result, TimeValueSeries)
    assert result.points[0].value == 3.0
    assert isinstance(result.points[0].value, float)


def test_classify_accepts_str_input():
    result = classify_response('[{"t":1,"v":2.5}]')
    assert isinstance(result, TimeValueSeries)


def test_leading_zero_value_falls_through_and_fails_without_options():
    # A genuine leading 0.0 cannot be told apart from a missing "v".
    with pytest.raises(GlassnodeParseError, match="neither known schema") as exc_info:
        classify_response(b'[{"t":1,"v":0.0},{"t":2,"v":1.0}]')
    assert "first value is zero" in exc_info.value.detail


@pytest.mark.parametrize(
    "body",
    [
        b'[{"x":1}]',
        b'{"t":1,"v":1.0}',
        b'[1, 2, 3]',
        b'[{"t":"1","v":1.0}]',
        b'[{"t":1.5,"v":1.0}]',
        b'[{"t":1,"v":"1.0"}]',
        b'[{"t":1,"v":true}]',
        b'[{"t":1,"o":{"ma9":"big"}}]',
        b'[{"t":1,"o":[1,2]}]',
        b'[{"t":1,"o":{"ma9":1e400}}]',
    ],
    ids=[
        "unknown-fields",
        "object-root",
        "scalar-items",
        "string-time",
        "float-time",
        "string-value",
        "bool-value",
        "string-option",
        "list-options",
        "overflow-option",
    ],
)
def test_classify_rejects_unknown_shapes(body):
    with pytest.raises(GlassnodeParseError, match="response matches neither known schema") as exc_info:
        classify_response(body)
    assert "time_value:" in exc_info.value.detail
    assert "time_options:" in exc_info.value.detail


@pytest.mark.parametrize("body", [b"", b"not json", b"[NaN]", b'[{"t":1,"v":Infinity}]'])
def test_classify_rejects_invalid_json(body):
    with pytest.raises(GlassnodeParseError, match="not valid JSON") as exc_info:
        classify_response(body)
    assert exc_info.value.detail

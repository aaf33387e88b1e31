# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os

import pytest

from stylediff.log import StyleFilterError
from stylediff.validation import (
    validate_style, validate_filter, validate_function, validate_light,
    parse_filter, format_filter,
)
from stylediff.validation.common import is_color, validate_value
from stylediff.validation.filters import Comparison, Membership, Existence, Combinator


def paths(errors):
    return [e.path for e in errors]


def messages(errors):
    return [e.message for e in errors]


# Filters

@pytest.mark.parametrize("f", [
    ["==", "class", "street"],
    ["!=", "$type", "Point"],
    [">=", "rank", 3],
    ["in", "class", "street", "main", None, True],
    ["!in", "$type", "Point", "LineString"],
    ["has", "name"],
    ["!has", "name"],
    ["all"],
    ["any", ["==", "a", 1], ["none", ["has", "b"], ["<", "c", 2]]],
])
def test_valid_filters(f, reference):
    assert validate_filter(f, reference) == []


def test_filter_not_an_array(reference):
    errors = validate_filter({"==": 1}, reference)
    assert messages(errors) == ["array expected, object found"]


def test_filter_empty(reference):
    errors = validate_filter([], reference)
    assert messages(errors) == ["filter array must have at least 1 element"]


def test_filter_unknown_operator(reference):
    errors = validate_filter(["~=", "a", 1], reference)
    assert paths(errors) == ["filter[0]"]


def test_filter_comparison_arity(reference):
    errors = validate_filter(["==", "a"], reference)
    assert messages(errors) == ['filter array for operator "==" must have 3 elements']


def test_filter_order_operator_with_type(reference):
    errors = validate_filter(["<", "$type", "Point"], reference)
    assert messages(errors) == ['"$type" cannot be use with operator "<"']


def test_filter_has_arity(reference):
    errors = validate_filter(["has", "a", "b"], reference)
    assert '"has" filter must have exactly 1 operand' in messages(errors)


def test_filter_constants_rejected(reference):
    errors = validate_filter(["==", "@key", "@value"], reference)
    assert messages(errors) == [
        "filter key cannot be a constant", "filter value cannot be a constant"]
    assert paths(errors) == ["filter[1]", "filter[2]"]


def test_filter_bad_key_and_value_types(reference):
    errors = validate_filter(["in", 1, [1], {"a": 1}], reference)
    assert paths(errors) == ["filter[1]", "filter[2]", "filter[3]"]


def test_filter_unknown_geometry_type(reference):
    errors = validate_filter(["in", "$type", "Point", "Circle"], reference)
    assert paths(errors) == ["filter[3]"]


def test_filter_nested_errors_are_all_reported(reference):
    errors = validate_filter(
        ["all", ["==", "a"], ["any", ["has"], ["?", "b", 1]]], reference, "layers[0].filter")
    assert paths(errors) == [
        "layers[0].filter[1]", "layers[0].filter[2][1]", "layers[0].filter[2][2][0]"]


def test_parse_filter():
    tree = parse_filter(["all", ["==", "class", "street"], ["in", "rank", 1, 2], ["!has", "name"]])
    assert tree == Combinator("all", (
        Comparison("==", "class", "street"),
        Membership("in", "rank", (1, 2)),
        Existence("!has", "name"),
    ))


@pytest.mark.parametrize("f", [[], "x", ["=="], ["==", "a"], ["has", "a", 1], ["~", "a", 1]])
def test_parse_filter_errors(f):
    with pytest.raises(StyleFilterError):
        parse_filter(f)


def test_format_filter():
    assert format_filter(parse_filter(["==", "class", "street"])) == 'class == "street"'
    assert format_filter(parse_filter(["!in", "rank", 1, 2])) == "rank not in [1, 2]"
    assert format_filter(parse_filter(
        ["any", ["has", "a"], ["all", ["<", "b", 1], ["!has", "c"]]]
    )) == "has a or (b < 1 and not has c)"
    assert format_filter(parse_filter(["none", ["has", "a"], ["has", "b"]])) == "not (has a or has b)"
    assert format_filter(parse_filter(["all"])) == "true"
    assert format_filter(parse_filter(["any"])) == "false"


# Values and functions

def test_is_color():
    for c in ("#fff", "#A0C8F0", "#a0c8f080", "rgb(1, 2, 3)", "rgba(1,2,3,0.5)",
              "hsl(120, 50%, 50%)", "red", "Transparent"):
        assert is_color(c), c
    for c in ("#ffff0", "fff", "rgb(1, 2)", "not a color", 3, None):
        assert not is_color(c), c


def test_is_color_css_named_colors(reference):
    for c in ("darkgray", "LightBlue", "rebeccapurple", "papayawhip", "yellowgreen"):
        assert is_color(c), c
    assert not is_color("darkgrey2")
    assert validate_light({"color": "lightsteelblue"}, reference) == []


def test_validate_value(reference):
    assert validate_value([1, 2], reference.paint["fill-translate"], "p") == []
    assert messages(validate_value([1], reference.paint["fill-translate"], "p")) == [
        "array length 2 expected, length 1 found"]
    assert paths(validate_value([1, "2"], reference.paint["fill-translate"], "p")) == ["p[1]"]
    assert validate_value(True, reference.paint["fill-antialias"], "p") == []
    assert validate_value(1, reference.paint["fill-antialias"], "p") != []
    assert validate_value(-1, reference.paint["fill-opacity"], "p") != []


def test_validate_function_domain_range(reference):
    spec = reference.paint["line-width"]
    f = {"type": "exponential", "base": 1.5, "domain": [1, 10], "range": [1, 4]}
    assert validate_function(f, spec, reference.function_types, "f") == []

    errors = validate_function({"domain": [1, 10], "range": [1]}, spec, reference.function_types, "f")
    assert messages(errors) == ["domain and range must have equal number of elements"]

    errors = validate_function({"range": [1]}, spec, reference.function_types, "f")
    assert messages(errors) == ['missing required property "domain"']

    errors = validate_function(
        {"type": "exponential", "domain": [1, 0], "range": [1, 2], "colour": 1},
        spec, reference.function_types, "f")
    assert paths(errors) == ["f.colour"]

    errors = validate_function(
        {"type": "exponential", "domain": [1, 0], "range": [1, -2]},
        spec, reference.function_types, "f")
    assert paths(errors) == ["f.domain", "f.range[1]"]


def test_validate_function_interval(reference):
    spec = reference.layout["text-transform"]
    f = {"type": "interval", "domain": [3], "range": ["uppercase", "lowercase"]}
    assert validate_function(f, spec, reference.function_types, "f") == []

    errors = validate_function(
        {"type": "interval", "domain": [3], "range": ["uppercase"]},
        spec, reference.function_types, "f")
    assert messages(errors) == ["range must have one more element than domain"]

    errors = validate_function(
        {"type": "exponential", "domain": [3], "range": ["none"]},
        spec, reference.function_types, "f")
    assert paths(errors) == ["f.type"]


def test_validate_function_stops(reference):
    spec = reference.paint["line-width"]
    assert validate_function({"stops": [[0, 1], [10, 2]]}, spec, reference.function_types, "f") == []
    errors = validate_function({"stops": [[0, 1], ["z", -1], [1]]}, spec, reference.function_types, "f")
    assert paths(errors) == ["f.stops[1][0]", "f.stops[1][1]", "f.stops[2]"]


# Light

def test_validate_light(reference):
    light = {
        "anchor": "map", "position": [1, 90, 30], "color": "white", "intensity": 0.5,
        "color-transition": {"duration": 300, "delay": 0},
    }
    assert validate_light(light, reference) == []


def test_validate_light_errors(reference):
    light = {
        "anchor": "north", "intensity": 3, "glow": 1,
        "anchor-transition": {"duration": 1},
        "color-transition": {"duration": -1, "speed": 2},
    }
    assert sorted(paths(validate_light(light, reference))) == sorted([
        "light.anchor", "light.intensity", "light.glow", "light.anchor-transition",
        "light.color-transition.duration", "light.color-transition.speed",
    ])
    assert messages(validate_light([], reference)) == ["object expected, array found"]


# Whole styles

def test_validate_style_file(filespath, reference):
    with open(os.path.join(filespath, "style-v8.json")) as f:
        style = json.load(f)
    assert validate_style(style, reference) == []


def test_validate_invalid_style_file(filespath, reference):
    with open(os.path.join(filespath, "style-invalid.json")) as f:
        style = json.load(f)
    assert paths(validate_style(style, reference)) == [
        "light.anchor",
        "light.brightness",
        "layers[0].filter",
        "layers[0].paint.fill-color",
        "layers[0].paint.fill-opacity",
        "layers[1].layout.line-cap",
        "layers[1].layout.line-sparkle",
        "layers[1].paint.line-width.domain",
    ]


def test_validate_style_constants_and_transitions(reference):
    style = {
        "version": 8,
        "constants": {"@water": "#00f", "@bad": "nope"},
        "layers": [{
            "id": "a",
            "paint": {
                "fill-color": "@water",
                "fill-outline-color": "@bad",
                "fill-pattern": "@missing",
                "fill-opacity-transition": {"duration": 0},
                "fill-antialias-transition": {"duration": 0},
            },
        }],
    }
    errors = validate_style(style, reference)
    assert paths(errors) == [
        "layers[0].paint.fill-outline-color",
        "layers[0].paint.fill-pattern",
        "layers[0].paint.fill-antialias-transition",
    ]
    assert messages(errors)[1] == 'constant "@missing" not found'


def test_validate_style_shapes(reference):
    assert paths(validate_style([], reference)) == [""]
    assert paths(validate_style({"layers": {}}, reference)) == ["layers"]
    assert paths(validate_style({"layers": [1, {"id": "a", "paint": []}]}, reference)) == [
        "layers[0]", "layers[1].paint"]

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..reference import DISCRETE_FUNCTIONS
from .common import ValidationError, json_type, is_number, validate_enum, validate_value

__all__ = ["validate_function", "is_function"]


FUNCTION_KEYS = ("type", "domain", "range", "base", "property", "stops")


def is_function(value):
    return isinstance(value, dict)


def validate_stops(value, spec, path):
    "Check a version 8 function defined by [input, output] stops."
    stops = value["stops"]
    if json_type(stops) != "array":
        return [ValidationError(path + ".stops", "array expected, %s found" % json_type(stops))]
    if not stops:
        return [ValidationError(path + ".stops", "array must have at least one stop")]

    errors = []
    for i, stop in enumerate(stops):
        stop_path = "%s.stops[%d]" % (path, i)
        if json_type(stop) != "array" or len(stop) != 2:
            errors.append(ValidationError(stop_path, "array length 2 expected"))
            continue
        if not is_number(stop[0]):
            errors.append(ValidationError(
                stop_path + "[0]", "number expected, %s found" % json_type(stop[0])))
        errors.extend(validate_value(stop[1], spec, stop_path + "[1]"))
    return errors


def validate_function(value, spec, function_types, path):
    """Check a property function against the PropertySpec of its property.

    Returns a list of ValidationErrors.
    """
    errors = []
    for key in value:
        if key not in FUNCTION_KEYS:
            errors.append(ValidationError("%s.%s" % (path, key), 'unknown property "%s"' % key))

    if "stops" in value:
        return errors + validate_stops(value, spec, path)

    function_type = value.get("type", "exponential")
    errors.extend(validate_enum(function_type, function_types, path + ".type"))

    # Discrete properties can not interpolate between values
    if spec.function in DISCRETE_FUNCTIONS and function_type == "exponential":
        errors.append(ValidationError(
            path + ".type",
            'function type must be "categorical" or "interval" for this style property'))

    for key in ("domain", "range"):
        if key not in value:
            errors.append(ValidationError(path, 'missing required property "%s"' % key))
        elif json_type(value[key]) != "array":
            errors.append(ValidationError(
                "%s.%s" % (path, key), "array expected, %s found" % json_type(value[key])))
    if "base" in value and not is_number(value["base"]):
        errors.append(ValidationError(
            path + ".base", "number expected, %s found" % json_type(value["base"])))
    if errors:
        return errors

    domain = value["domain"]
    range_ = value["range"]
    if function_type != "interval" and len(range_) != len(domain):
        errors.append(ValidationError(path, "domain and range must have equal number of elements"))
    elif function_type == "interval" and len(range_) != len(domain) + 1:
        errors.append(ValidationError(path, "range must have one more element than domain"))

    if function_type in ("exponential", "interval"):
        for i in range(1, len(domain)):
            if is_number(domain[i]) and is_number(domain[i - 1]) and domain[i] < domain[i - 1]:
                errors.append(ValidationError(
                    path + ".domain", "domain elements must be in ascending order"))

    for i, item in enumerate(range_):
        errors.extend(validate_value(item, spec, "%s.range[%d]" % (path, i)))

    return errors

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re

from .common import ValidationError, json_type, validate_value

__all__ = ["validate_light", "validate_transition"]


_transition_key = re.compile(r"^(.*)-transition$")


def validate_transition(value, reference, path):
    if json_type(value) != "object":
        return [ValidationError(path, "object expected, %s found" % json_type(value))]
    errors = []
    for key, item in value.items():
        item_path = "%s.%s" % (path, key)
        if key not in reference.transition:
            errors.append(ValidationError(item_path, 'unknown property "%s"' % key))
        else:
            errors.extend(validate_value(item, reference.transition[key], item_path))
    return errors


def validate_light(light, reference, path="light"):
    """Check the light of a style, returning a list of ValidationErrors.

    A key "<property>-transition" is accepted for light properties
    supporting transitions.
    """
    if json_type(light) != "object":
        return [ValidationError(path, "object expected, %s found" % json_type(light))]

    errors = []
    for key, value in light.items():
        key_path = "%s.%s" % (path, key)
        match = _transition_key.match(key)
        if match and match.group(1) in reference.light and reference.light[match.group(1)].transition:
            errors.extend(validate_transition(value, reference, key_path))
        elif key in reference.light:
            errors.extend(validate_value(value, reference.light[key], key_path))
        else:
            errors.append(ValidationError(key_path, 'unknown property "%s"' % key))
    return errors

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..operations import Missing

__all__ = ["json_equal", "lookup", "strip_ignored", "is_mapping"]


# Keys carrying editor data only, never part of a comparison
IGNORED_KEYS = ("metadata",)


def is_mapping(x):
    return isinstance(x, dict)


def is_sequence(x):
    return isinstance(x, (list, tuple))


def lookup(obj, key):
    """Return obj[key], or Missing if obj is not a mapping or lacks key.

    Style documents are compared best-effort, so a document of the wrong
    shape is treated as if the key was absent.
    """
    if is_mapping(obj):
        return obj.get(key, Missing)
    return Missing


def strip_ignored(obj, ignored=IGNORED_KEYS):
    "Return a shallow copy of a mapping without the ignored keys."
    if not is_mapping(obj):
        return obj
    return {k: v for k, v in obj.items() if k not in ignored}


def json_equal(a, b):
    """Deep equality of json-like values.

    Mapping key order is irrelevant, sequence order is significant.
    Unlike ==, booleans never equal numbers, so True and 1 differ.
    Numbers are compared exactly, 1 and 1.0 are equal.
    """
    if a is b:
        return True

    # bool is a subclass of int, keep json types apart
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if is_mapping(a):
        if not is_mapping(b) or len(a) != len(b):
            return False
        for key, avalue in a.items():
            if key not in b:
                return False
            if not json_equal(avalue, b[key]):
                return False
        return True

    if is_sequence(a):
        if not is_sequence(b) or len(a) != len(b):
            return False
        return all(json_equal(x, y) for x, y in zip(a, b))

    if is_mapping(b) or is_sequence(b):
        return False

    return a == b

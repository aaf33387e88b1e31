# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The style reference: the properties a style version defines.

A StyleReference is an immutable lookup built once from a reference
document and passed explicitly to the migrations and validators.
"""

from collections import namedtuple
from functools import lru_cache
import io
import json
import os
from types import MappingProxyType

__all__ = ["PropertySpec", "StyleReference", "load_reference"]


PropertySpec = namedtuple("PropertySpec", [
    "name", "group", "type", "function", "transition",
    "default", "units", "values", "value", "length", "minimum", "maximum",
])

# Function kinds producing a step output rather than an interpolated one
DISCRETE_FUNCTIONS = ("piecewise-constant", "discrete")

_here = os.path.dirname(os.path.abspath(__file__))


def property_spec(name, group, spec):
    values = spec.get("values")
    return PropertySpec(
        name=name,
        group=group,
        type=spec.get("type"),
        function=spec.get("function"),
        transition=bool(spec.get("transition", False)),
        default=spec.get("default"),
        units=spec.get("units"),
        values=tuple(values) if values is not None else None,
        value=spec.get("value"),
        length=spec.get("length"),
        minimum=spec.get("minimum"),
        maximum=spec.get("maximum"),
    )


def _enum_values(reference, key):
    return tuple(reference.get(key, {}).get("values", ()))


class StyleReference(object):
    """Read-only lookup of the properties defined by a style reference.

    `reference` is the reference document: a mapping with the lists of
    group names under "layout" and "paint", and one mapping of property
    name to property description per group.
    """

    def __init__(self, reference):
        self._version = reference.get("$version")

        layout = {}
        paint = {}
        for kind, table in (("layout", layout), ("paint", paint)):
            for group in reference.get(kind, ()):
                for name, spec in reference.get(group, {}).items():
                    # Properties shared by several layer types, like
                    # visibility, are described by their first group
                    if name not in table:
                        table[name] = property_spec(name, group, spec)
        self._layout = MappingProxyType(layout)
        self._paint = MappingProxyType(paint)

        self._light = MappingProxyType({
            name: property_spec(name, "light", spec)
            for name, spec in reference.get("light", {}).items()
        })
        self._transition = MappingProxyType({
            name: property_spec(name, "transition", spec)
            for name, spec in reference.get("transition", {}).items()
        })

        self._filter_operators = _enum_values(reference, "filter_operator")
        self._geometry_types = _enum_values(reference, "geometry_type")
        self._function_types = _enum_values(reference, "function_type")

    @property
    def version(self):
        return self._version

    @property
    def layout(self):
        return self._layout

    @property
    def paint(self):
        return self._paint

    @property
    def light(self):
        return self._light

    @property
    def transition(self):
        return self._transition

    @property
    def filter_operators(self):
        return self._filter_operators

    @property
    def geometry_types(self):
        return self._geometry_types

    @property
    def function_types(self):
        return self._function_types

    def property(self, name):
        "Return the PropertySpec for a layout or paint property, or None."
        if name in self._layout:
            return self._layout[name]
        return self._paint.get(name)

    def is_layout(self, name):
        return name in self._layout

    def is_paint(self, name):
        return name in self._paint

    def layer_type(self, name):
        "Return the layer type a property belongs to, e.g. 'line' for line-width."
        spec = self.property(name)
        if spec is None:
            return None
        return spec.group.split("_", 1)[1]

    def is_discrete(self, name):
        "Whether functions of the property step between values instead of interpolating."
        spec = self.property(name)
        return spec is not None and spec.function in DISCRETE_FUNCTIONS

    def __repr__(self):
        return "<StyleReference v%s: %d layout, %d paint properties>" % (
            self._version, len(self._layout), len(self._paint))


def reference_path(version):
    return os.path.join(_here, "v%d.json" % version)


@lru_cache(maxsize=None)
def load_reference(version=8):
    """Load the bundled style reference for a style version.

    Raises ValueError if no reference is bundled for the version.
    """
    path = reference_path(version)
    if not os.path.exists(path):
        raise ValueError("No style reference bundled for version %r." % (version,))
    with io.open(path, encoding="utf8") as f:
        return StyleReference(json.load(f))

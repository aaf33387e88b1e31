# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diffing.comparing import is_mapping, is_sequence
from .diffing.layers import PAINT_CLASS_PREFIX

__all__ = ["declass_style"]


def declass_layer(layer, klass):
    """Return a copy of layer with paint class klass merged into its paint.

    A class the layer doesn't define merges nothing.
    """
    paint = {}
    if is_mapping(layer.get("paint")):
        paint.update(layer["paint"])
    overlay = layer.get(PAINT_CLASS_PREFIX + klass)
    if is_mapping(overlay):
        paint.update(overlay)

    newlayer = dict(layer)
    newlayer["paint"] = paint
    return newlayer


def declass_style(style, classes):
    """Returns a new style with the given paint classes merged into each
    layer's main paint definition.

    Classes are applied in order, so later classes win on conflicting
    properties. The paint class blocks are left in place. The input
    style is not modified, nested values are shared with it.
    """
    newstyle = dict(style)
    layers = style.get("layers")
    if not is_sequence(layers):
        return newstyle

    newlayers = []
    for layer in layers:
        if is_mapping(layer):
            for klass in classes:
                layer = declass_layer(layer, klass)
        newlayers.append(layer)
    newstyle["layers"] = newlayers
    return newstyle

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .styles import diff_styles
from .layers import diff_layers

__all__ = ["diff_styles", "diff_layers"]

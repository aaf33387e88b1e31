# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff_styles
from .declass import declass_style
from .migrations import migrate, migrate_v9
from .reference import load_reference, StyleReference
from .validation import validate_style


__all__ = [
    "__version__",
    "diff_styles",
    "declass_style",
    "migrate", "migrate_v9",
    "load_reference", "StyleReference",
    "validate_style",
    ]

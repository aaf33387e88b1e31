# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Migrations of styles between style versions.

Each migration upgrades a style by exactly one version. `migrate` chains
them until the style reaches the requested version.
"""

import copy

from ..log import StyleMigrationError, info
from ..reference import load_reference
from .v9 import migrate_v9

__all__ = ["migrate", "migrate_v9", "migrations", "LATEST_VERSION"]


LATEST_VERSION = 9

# Version migrated from -> migration producing the next version
migrations = {
    8: migrate_v9,
}


def migrate(style, reference=None, target=LATEST_VERSION):
    """Return a copy of style migrated to the target version.

    `reference` is the StyleReference passed to every migration step,
    by default the bundled reference of the version being migrated from.

    Raises StyleMigrationError if there is no path to the target version.
    """
    version = style.get("version")
    if not isinstance(version, int) or isinstance(version, bool):
        raise StyleMigrationError("Style version must be an integer, not %r." % (version,))
    if version > target:
        raise StyleMigrationError(
            "Can not migrate a version %d style down to version %d." % (version, target))

    if version == target:
        return copy.deepcopy(style)

    while version < target:
        step = migrations.get(version)
        if step is None:
            raise StyleMigrationError(
                "No migration from style version %d to version %d." % (version, version + 1))
        info("Migrating style from version %d to %d", version, version + 1)
        style = step(style, reference if reference is not None else load_reference(version))
        version = style["version"]

    return style

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Integer, Bool, List, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .migrations import LATEST_VERSION


CONFIG_BASENAME = 'stylediff_config'


class StylediffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def config_path():
    "Directories searched for config files, in descending priority order."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, StylediffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(StylediffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Printing(Global):

    use_color = Bool(
        True,
        help="Whether to use ANSI color code escapes for text output.",
    ).tag(config=True)

    output_json = Bool(
        False,
        help="Print results as JSON instead of text.",
    ).tag(config=True)


class _Classes(StylediffConfigurable):

    classes = List(
        Unicode(),
        default_value=[],
        help="Paint classes to merge into the main paint of each layer, in order.",
    ).tag(config=True)


class Diff(_Printing, _Classes):

    migrate = Bool(
        False,
        help="Migrate both styles to the latest version before diffing.",
    ).tag(config=True)


class Declass(Global, _Classes):
    pass


class Migrate(Global):

    target = Integer(
        LATEST_VERSION,
        help="The style version to migrate to.",
    ).tag(config=True)


class Validate(_Printing):

    reference_version = Integer(
        8,
        help="Version of the bundled style reference to validate against.",
    ).tag(config=True)


entrypoint_configurables = {
    'stylediff-diff': Diff,
    'stylediff-declass': Declass,
    'stylediff-migrate': Migrate,
    'stylediff-validate': Validate,
}

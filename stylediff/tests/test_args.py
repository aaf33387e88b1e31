import json
import logging

import pytest
from traitlets import Enum, Unicode

from stylediff.args import ConfigBackedParser, LogLevelAction, modify_config_for_print
from stylediff.config import (
    entrypoint_configurables, build_config, recursive_update, Global, Diff,
)
from stylediff import stylediffapp


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)

    name = Unicode('default').tag(config=True)


class ChildConfig(FixtureConfig):
    pass


@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = ChildConfig
    yield
    del entrypoint_configurables['test-prog']


def _parser():
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )
    parser.add_argument('--name')
    return parser


def test_config_parser(entrypoint_config, isolated_config, reset_log):
    parser = _parser()

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'
    assert logging.getLogger('stylediff').level == logging.WARN

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert logging.getLogger('stylediff').level == logging.ERROR


def test_config_inherit(entrypoint_config, isolated_config, reset_log):
    isolated_config.join('stylediff_config.json').write_text(
        json.dumps({
            'FixtureConfig': {'name': 'from-parent'},
        }),
        encoding='utf-8'
    )
    parsed = _parser().parse_args([])
    assert parsed.name == 'from-parent'


def test_config_child_overrides_parent(entrypoint_config, isolated_config, reset_log):
    isolated_config.join('stylediff_config.json').write_text(
        json.dumps({
            'FixtureConfig': {'name': 'from-parent'},
            'ChildConfig': {'name': 'from-child'},
        }),
        encoding='utf-8'
    )
    parsed = _parser().parse_args([])
    assert parsed.name == 'from-child'

    # Command line wins over config
    parsed = _parser().parse_args(['--name', 'cli'])
    assert parsed.name == 'cli'


def test_diff_app_config(isolated_config, reset_log):
    isolated_config.join('stylediff_config.json').write_text(
        json.dumps({
            'Diff': {'use_color': False, 'classes': ['night'], 'migrate': True},
        }),
        encoding='utf-8'
    )
    args = stylediffapp._build_arg_parser().parse_args(['a.json', 'b.json'])
    assert args.use_color is False
    assert args.classes == ['night']
    assert args.migrate is True
    assert args.output_json is False


def test_diff_app_defaults(isolated_config, reset_log):
    args = stylediffapp._build_arg_parser().parse_args(
        ['a.json', 'b.json', '-c', 'night', '--class', 'dim', '--no-color'])
    assert args.classes == ['night', 'dim']
    assert args.use_color is False
    assert args.out is None


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('no-such-prog')


def test_build_config_defaults(isolated_config):
    config = build_config('stylediff-diff')
    assert config == {
        'log_level': 'INFO',
        'use_color': True,
        'output_json': False,
        'classes': [],
        'migrate': False,
    }
    assert isinstance(Diff(), Global)


def test_recursive_update():
    target = {'a': 1, 'b': {'c': 2, 'd': 3}}
    recursive_update(target, {'a': None, 'b': {'c': 4}, 'e': {}}, False)
    assert target == {'b': {'c': 4, 'd': 3}}

    target = {'a': 1}
    recursive_update(target, {'a': None}, True)
    assert target == {'a': None}


def test_modify_config_for_print():
    assert modify_config_for_print({'a': [1], 'b': {}, 'c': {'d': 'x'}}) == {
        'a': '[1]', 'b': '{}', 'c': {'d': '"x"'}}


def test_config_help_action(isolated_config, reset_log, capsys):
    with pytest.raises(SystemExit) as e:
        stylediffapp._build_arg_parser().parse_args(['--config'])
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert 'Diff:' in err
    assert 'use_color: true' in err

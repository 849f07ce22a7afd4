# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_docpatch_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_docpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_docpatch_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


def print_config(name, config, out=None):
    "Print a config section as indented 'key: value' lines."
    out = out or sys.stderr
    print('%s:' % name, file=out)
    for k, v in sorted(modify_config_for_print(config).items()):
        print('  %s: %s' % (k, v), file=out)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        print_config(header, config)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all docpatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_output_args(parser):
    """Adds optional arguments controlling json output.
    """
    parser.add_argument(
        '--indent',
        default=2,
        type=int,
        help="indentation of json output. Default is 2.")
    parser.add_argument(
        '--compact',
        dest='indent',
        action='store_const',
        const=None,
        help="write json output on a single line.")
    parser.add_argument(
        '--sort-keys',
        dest='sort_keys',
        action='store_true',
        default=False,
        help="sort object members by key in json output.")
    parser.add_argument(
        '--ensure-ascii',
        dest='ensure_ascii',
        action='store_true',
        default=False,
        help="escape all non-ASCII characters in json output.")


filename_help = {
    "document": "The json document filename.",
    "patch":    "The patch filename, a json list of patch operations.",
    }


def add_filename_args(parser, names):
    """Add the document and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])

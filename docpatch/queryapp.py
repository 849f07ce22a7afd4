# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_output_args)
from .errors import PatchError
from .paths import canonicalize
from .query import query_paths, query_values
from .utils import EXPLICIT_MISSING_FILE, read_json, setup_std_streams


_description = "List the pointers matched by a path or query in a json document."


def main_query(args):
    document_filename = args.document

    if not os.path.exists(document_filename) and document_filename != EXPLICIT_MISSING_FILE:
        print("Missing file {}".format(document_filename))
        return 1

    doc = read_json(document_filename, on_null='empty')

    try:
        if args.values:
            for pointer, value in query_values(args.query, doc):
                text = json.dumps(value, sort_keys=args.sort_keys,
                                  ensure_ascii=args.ensure_ascii)
                print("{}\t{}".format(pointer, text))
        else:
            for path in query_paths(args.query, doc):
                print(canonicalize(path))
    except PatchError as e:
        log.error("Could not evaluate %r: %s", args.query, e)
        return 1
    return 0


def _build_arg_parser():
    """Creates an argument parser for the docpatch-query command."""
    parser = ConfigBackedParser(
        prog='docpatch-query',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document"])
    parser.add_argument(
        'query',
        help="a pointer ('/a/0') or a query ('$/a/*').")
    add_output_args(parser)
    parser.add_argument(
        '--values',
        action='store_true',
        default=False,
        help="print the json value at each existing match after its pointer.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_query(arguments)


if __name__ == "__main__":
    sys.exit(main())

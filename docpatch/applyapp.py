# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_output_args)
from .errors import PatchError
from .patch_format import to_patch_entries
from .patching import apply_patches
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a json patch to a json document."


def main_apply(args):
    document_filename = args.document
    patch_filename = args.patch
    output_filename = args.output

    for fn in (document_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_json(document_filename, on_null='empty')
    operations = to_patch_entries(read_json(patch_filename, on_null='list'))

    try:
        after = apply_patches(before, operations)
    except PatchError as e:
        log.error("Could not apply patch %s: %s", patch_filename, e)
        return 1

    write_json(after, output_filename or sys.stdout,
               indent=args.indent, sort_keys=args.sort_keys,
               ensure_ascii=args.ensure_ascii)
    return 0


def _build_arg_parser():
    """Creates an argument parser for the docpatch-apply command."""
    parser = ConfigBackedParser(
        prog='docpatch-apply',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document", "patch"])
    add_output_args(parser)
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_apply(arguments)


if __name__ == "__main__":
    sys.exit(main())

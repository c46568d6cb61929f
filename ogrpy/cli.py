"""
Command-line interface for ogrpy.

Usage:
    ogrpy <COMMAND>

Commands:
    version     Show the ogrpy library version.
    enumerate   Print the rulers of a given length, order or maximum length, one per line.
    id          Decode ruler ids, or encode the marks of a ruler into its id.
"""

import argparse
import logging
import sys

from ogrpy import __version__
import ogrpy as og
from ogrpy.exceptions import OGRpyException, InvalidParameterError


def command_version(args):
    print(f"ogrpy version: {__version__}")


def _select_rulers(args):
    if args.length is not None:
        if args.order is None:
            if args.golomb:
                raise InvalidParameterError("--golomb needs --order")
            return og.enumerate_rulers_with_length(args.length)
        if args.depth is not None:
            return og.enumerate_golomb_rulers_depth_with_length(args.order, args.length, args.depth)
        if args.golomb:
            if args.pruned:
                return og.enumerate_golomb_rulers_pruned_with_length(args.order, args.length)
            return og.enumerate_golomb_rulers_with_length(args.order, args.length)
        return og.enumerate_pruned_rulers(args.order, args.length)

    if args.max_length is None:
        raise InvalidParameterError("Give either --length or --max-length")
    if args.order is None:
        if args.golomb:
            raise InvalidParameterError("--golomb needs --order")
        return og.enumerate_rulers(args.max_length)
    if args.depth is not None:
        return og.enumerate_golomb_rulers_depth(args.order, args.max_length, args.depth)
    if args.golomb:
        if args.pruned:
            return og.enumerate_golomb_rulers_pruned(args.order, args.max_length)
        return og.enumerate_golomb_rulers(args.order, args.max_length)
    if args.pruned:
        rulers = []
        for length in range(2, args.max_length + 1):
            rulers += og.enumerate_pruned_rulers(args.order, length)
        return rulers
    return og.enumerate_rulers_with_order(args.order, args.max_length)


def command_enumerate(args):
    rulers = _select_rulers(args)
    for r in rulers:
        if args.ids:
            idx = r.to_id()
            print(f"[{'-' if idx is None else idx}] {r}")
        else:
            print(r)
    if args.count:
        print(f"{len(rulers)} rulers")


def command_id(args):
    if args.marks:
        ruler = og.Ruler(args.marks)
        print(ruler.to_id(strict=True))
    for idx in args.decode:
        print(f"[{idx}] {og.Ruler.from_id(idx)}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="ogrpy command line interface")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ogrpy version
    version_parser = subparsers.add_parser("version", help="Show version information on ogrpy")
    version_parser.set_defaults(func=command_version)

    # ogrpy enumerate
    enum_parser = subparsers.add_parser("enumerate", help="Enumerate rulers")
    enum_parser.add_argument("--length", type=int, help="Exact length of the rulers")
    enum_parser.add_argument("--max-length", type=int, help="Maximum length of the rulers")
    enum_parser.add_argument("--order", type=int, help="Number of marks, including 0")
    enum_parser.add_argument("--golomb", action="store_true", help="Only Golomb rulers")
    enum_parser.add_argument("--pruned", action="store_true", help="Only visit rulers with the right order")
    enum_parser.add_argument("--depth", type=int, help="Rulers passing the Golomb check at this depth")
    enum_parser.add_argument("--ids", action="store_true", help="Print the id of every ruler")
    enum_parser.add_argument("--count", action="store_true", help="Print the number of rulers at the end")
    enum_parser.set_defaults(func=command_enumerate)

    # ogrpy id
    id_parser = subparsers.add_parser("id", help="Convert between rulers and their ids")
    id_parser.add_argument("decode", type=int, nargs="*", help="Ids to decode")
    id_parser.add_argument("--marks", type=int, nargs="+", help="Marks of a ruler to encode, without the leading 0")
    id_parser.set_defaults(func=command_id)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

    try:
        args.func(args)
    except OGRpyException as e:
        print(f"ogrpy: error: {e}", file=sys.stderr)
        return 1
    return 0

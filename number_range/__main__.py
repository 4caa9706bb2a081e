import logging
import sys

import numpy as np

from number_range.argparser import argparser
from number_range.compressor import compress
from number_range.exceptions import InvalidArgumentsException, ParseError
from number_range.options import NumberRangeOptions
from number_range.parser import parse
from number_range.utils import TRACE, set_options

LOGLEVELS = [logging.WARNING, logging.DEBUG, TRACE]


def main(argv=None):
    args = argparser.parse_args(argv)
    set_options(loglevel=LOGLEVELS[min(args.verbose, len(LOGLEVELS) - 1)])

    try:
        options = NumberRangeOptions(list_sep=args.list_sep,
            range_sep=args.range_sep, group_sep=args.group_sep,
            trim_whitespace=args.trim_whitespace, decimal_sep=args.decimal_sep,
            dtype=args.dtype)
    except InvalidArgumentsException as e:
        argparser.error(str(e))

    try:
        if args.command == "expand":
            expand(args, options)
        else:
            print(compress_values(args, options))
    except (ParseError, InvalidArgumentsException) as e:
        argparser.error(str(e))
    return 0


def expand(args, options):
    kind = options.number_type
    for value in parse(args.notation, options):
        print(kind.format(value, decimal_sep=options.decimal_sep))


def compress_values(args, options):
    # each value may itself be a notation, so ``compress 5 1:3`` works and
    # ``compress 5,1:3,2`` normalizes a notation
    texts = args.values or sys.stdin.read().split()
    values = [value for text in texts for value in parse(text, options)]
    array = np.array(values, dtype=options.dtype)
    return compress(array, args.step_hint, options, grouped=args.grouped,
        min_run=args.min_run)


if __name__ == "__main__":
    sys.exit(main())

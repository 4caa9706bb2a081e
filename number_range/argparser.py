import argparse

from number_range.exceptions import ParseError
from number_range.options import DEFAULT_OPTIONS
from number_range.parser import parse


def range_type(options=None):
    """
    A function to pass as the ``type`` of an :mod:`argparse` argument, which
    parses the argument as a number range and returns its numbers as a list.

    Examples
    --------
    >>> parser = argparse.ArgumentParser()
    >>> _ = parser.add_argument("--ports", type=range_type())
    >>> parser.parse_args(["--ports", "80,8000:8002"]).ports
    [80, 8000, 8001, 8002]
    """
    options = options or DEFAULT_OPTIONS
    kind = options.number_type

    def number_range(notation):
        try:
            return [kind.to_python(n) for n in parse(notation, options)]
        except ParseError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    return number_range


DTYPES = ["int8", "int16", "int32", "int64", "uint8", "uint16", "uint32",
    "uint64", "float32", "float64"]

# shared by both subcommands
options_parser = argparse.ArgumentParser(add_help=False)
options_parser.add_argument("--list-sep", default=",",
                    help="separator between items. Defaults to %(default)s")
options_parser.add_argument("--range-sep", default=":",
                    help="separator between the start, step, and end of a range. "
                         "Defaults to %(default)s")
options_parser.add_argument("--group-sep", default=None,
                    help="digit grouping character, removed before parsing numbers")
options_parser.add_argument("--decimal-sep", default=".",
                    help="decimal point of floating point numbers. Defaults to %(default)s")
options_parser.add_argument("-w", "--trim-whitespace", action="store_true",
                    help="remove whitespace from numbers before parsing them")
options_parser.add_argument("-t", "--dtype", default="int64", choices=DTYPES,
                    help="the number type to parse into. Defaults to %(default)s")
options_parser.add_argument("-v", "--verbose", action="count", default=0,
                    help="log what is parsed. Pass twice to log every item")

argparser = argparse.ArgumentParser(prog="number_range",
    description="Expands number range notation (like 1,3:10,14) into the "
        "numbers it covers, or compresses numbers into number range notation.")
subparsers = argparser.add_subparsers(dest="command", required=True)

expand_parser = subparsers.add_parser("expand", parents=[options_parser],
    help="print the numbers of a notation, one per line")
expand_parser.add_argument("notation", help="the notation to expand, like 1,3:10,14")

compress_parser = subparsers.add_parser("compress", parents=[options_parser],
    help="print the shortest notation covering the given numbers")
compress_parser.add_argument("values", nargs="*",
                    help="numbers (or notations) to compress. Read one per line from "
                         "stdin if none are given")
compress_parser.add_argument("-s", "--step-hint", type=float, default=None,
                    help="also compress runs of numbers which are this far apart")
compress_parser.add_argument("-m", "--min-run", type=int, default=3,
                    help="minimum length of a run of consecutive numbers to compress. "
                         "Defaults to %(default)s")
compress_parser.add_argument("-g", "--grouped", action="store_true",
                    help="group digits with --group-sep")

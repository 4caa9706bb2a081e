import logging

from number_range.argparser import range_type
from number_range.compressor import compress, compress_numbers
from number_range.exceptions import (
    AmbiguousSeparators,
    DescendingUnsigned,
    EmptyListItem,
    InvalidArgumentsException,
    InvalidSign,
    MalformedRange,
    NumberFormatError,
    NumberRangeException,
    ParseError,
    ZeroStep,
)
from number_range.numeric import (
    FloatingPoint,
    NumberType,
    SignedInteger,
    UnsignedInteger,
    number_type,
)
from number_range.options import NumberRangeOptions
from number_range.parser import NumberRange, Range, Single, format_numbers, parse
from number_range.utils import TRACE, ColoredFormatter, set_options
from number_range.version import __version__

logging.addLevelName(TRACE, "TRACE")
formatter = ColoredFormatter(
    "[%(name)s][%(levelname)s]  %(message)s  (%(filename)s:%(lineno)s)"
)
handler_stream = logging.StreamHandler()
handler_stream.setFormatter(formatter)
logging.getLogger("number_range").addHandler(handler_stream)

# don't expose ColoredFormatter to consumers
del ColoredFormatter

__all__ = [
    # core
    "parse",
    "compress",
    "compress_numbers",
    "format_numbers",
    "set_options",
    # ranges
    "NumberRange",
    "Single",
    "Range",
    # options
    "NumberRangeOptions",
    # number types
    "number_type",
    "NumberType",
    "SignedInteger",
    "UnsignedInteger",
    "FloatingPoint",
    # argparse
    "range_type",
    # utils
    "TRACE",
    # exceptions
    "NumberRangeException",
    "InvalidArgumentsException",
    "AmbiguousSeparators",
    "ParseError",
    "MalformedRange",
    "InvalidSign",
    "ZeroStep",
    "DescendingUnsigned",
    "NumberFormatError",
    "EmptyListItem",
    # version
    "__version__",
]

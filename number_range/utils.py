import logging
from logging import Formatter
from copy import copy

from number_range.exceptions import InvalidArgumentsException


TRACE = 5

def set_options(*, loglevel=None):
    """
    Set global options for number_range.

    Parameters
    ----------
    loglevel: int
        What level to log at. We follow standard python logging levels, with
        an added level of TRACE with a value of 5 (lower than debug, which is
        10). The value is passed directly to the setLevel function of the
        ``number_range`` root logger. WARNING by default.
    """
    if loglevel is not None:
        logging.getLogger("number_range").setLevel(loglevel)


def check_separator(name, sep):
    """
    Raises if ``sep`` is not a single character. ``None`` is allowed and
    means the separator is disabled.
    """
    if sep is None:
        return
    if not isinstance(sep, str) or len(sep) != 1:
        raise InvalidArgumentsException(f"{name} must be a single character, "
            f"got {sep!r}")


class ColoredFormatter(Formatter):
    """
    A subclass of :class:`logging.Formatter` that uses ANSI escape codes
    to color different parts of the :class:`logging.LogRecord` when printed to
    the console.

    Notes
    -----
    Adapted from https://stackoverflow.com/a/46482050.
    """

    COLOR_PREFIX = '\033['
    COLOR_SUFFIX = '\033[0m'
    COLOR_MAPPING = {
        "TRACE"    : 90, # bright black
        "DEBUG"    : 94, # bright blue
        "INFO"     : 95, # bright magenta
        "WARNING"  : 31, # red
        "ERROR"    : 91, # bright red
        "CRITICAL" : 41, # white on red bg

        "NAME"     : 32, # green
        "MESSAGE"  : 93, # bright yellow
        "FILENAME" : 92, # bright green
        "LINENO"   : 91  # bright red
    }

    def __init__(self, pattern):
        Formatter.__init__(self, pattern)
        self.colored_log = "{prefix}{{color}}m{{msg}}{suffix}".format(
                    prefix=self.COLOR_PREFIX, suffix=self.COLOR_SUFFIX)

    def _color(self, key, msg):
        color = self.COLOR_MAPPING.get(key, 37) # default to white
        return self.colored_log.format(color=color, msg=msg)

    def format(self, record):
        # c as in colored, not as in copy
        c_record = copy(record)
        # format the message with its args before coloring it, or a
        # ``%s`` in the message would end up wrapped in escape codes
        c_record.msg = self._color("MESSAGE", record.getMessage())
        c_record.args = ()

        c_record.levelname = self._color(record.levelname, record.levelname)
        c_record.name = self._color("NAME", record.name)
        c_record.filename = self._color("FILENAME", record.filename)
        c_record.lineno = self._color("LINENO", record.lineno)

        return Formatter.format(self, c_record)

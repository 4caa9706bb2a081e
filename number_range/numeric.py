import math
import re

import numpy as np

from number_range.exceptions import (InvalidArgumentsException, InvalidSign,
    NumberFormatError)

# ascii digits only; ``\d`` would also match other scripts' numerals
_RE_INTEGER = re.compile(r"[+-]?[0-9]+")
_RE_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class NumberType:
    """
    The operations the parser and compressor need from a number type: parsing
    from and formatting to digit strings, casting to the numpy scalar type,
    and walking an arithmetic sequence between two bounds.

    Use :func:`~.number_type` to get the right subclass for a dtype.

    Parameters
    ----------
    dtype: :class:`numpy.dtype`
        The dtype this number type represents.
    """
    signed = True

    def __init__(self, dtype):
        self.dtype = dtype

    def parse(self, text):
        """
        Parses ``text`` (already stripped of group separators) into a python
        number that fits in :attr:`dtype`.
        """
        raise NotImplementedError()

    def to_python(self, value):
        raise NotImplementedError()

    def expand(self, start, step, end):
        """
        Lazily yields ``start, start + step, ...`` up to and including the
        last value which does not go past ``end``. ``end`` itself is only
        yielded if the step lands on it exactly.
        """
        raise NotImplementedError()

    def cast(self, value):
        return self.dtype.type(value)

    def format(self, value, group_sep=None, decimal_sep="."):
        """
        The digit string of ``value``, with a leading ``-`` if negative.

        Parameters
        ----------
        value: number
            The value to format.
        group_sep: str
            If passed, digits are grouped by thousands and the groups joined
            with this character. No grouping is done otherwise.
        decimal_sep: str
            The character to write in place of the decimal point. Has no
            effect on integers.
        """
        value = self.to_python(value)
        text = f"{value:,}" if group_sep else str(value)
        # translate both at once so a group separator of "." and a decimal
        # separator of "," don't clobber each other
        return text.translate({ord(","): group_sep, ord("."): decimal_sep})

    def _format_error(self, text, reason="is not a valid"):
        return NumberFormatError(f"{text!r} {reason} {self.dtype.name} number")

    def __eq__(self, other):
        if not isinstance(other, NumberType):
            return NotImplemented
        return type(self) is type(other) and self.dtype == other.dtype

    def __hash__(self):
        return hash((type(self), self.dtype))

    def __repr__(self):
        return f"{type(self).__name__}({self.dtype.name})"


class Integer(NumberType):
    def __init__(self, dtype):
        super().__init__(dtype)
        info = np.iinfo(dtype)
        self.min = int(info.min)
        self.max = int(info.max)

    def parse(self, text):
        if not _RE_INTEGER.fullmatch(text):
            raise self._format_error(text)
        value = int(text)
        if not self.min <= value <= self.max:
            raise self._format_error(text, reason="is out of range for a")
        return value

    def to_python(self, value):
        return int(value)

    def expand(self, start, step, end):
        # walk in python ints so ``end + step`` can't overflow the dtype
        start, step, end = int(start), int(step), int(end)
        stop = end + 1 if step > 0 else end - 1
        for value in range(start, stop, step):
            yield self.cast(value)


class SignedInteger(Integer):
    signed = True


class UnsignedInteger(Integer):
    signed = False

    def parse(self, text):
        if text.startswith("-"):
            raise InvalidSign(f"{text!r} is negative, which is not allowed "
                f"for the unsigned type {self.dtype.name}")
        return super().parse(text)


class FloatingPoint(NumberType):
    """
    Notes
    -----
    Values in a range are computed as ``start + i * step`` rather than by
    repeated addition, but a step which isn't exactly representable (like
    ``0.1``) can still miss ``end`` by a rounding error.
    """
    signed = True

    def parse(self, text):
        if not _RE_FLOAT.fullmatch(text):
            raise self._format_error(text)
        value = float(text)
        with np.errstate(over="ignore"):
            if not math.isfinite(self.cast(value)):
                raise self._format_error(text, reason="is out of range for a")
        return value

    def to_python(self, value):
        return float(value)

    def expand(self, start, step, end):
        start, step, end = float(start), float(step), float(end)
        i = 0
        value = start
        while (value <= end) if step > 0 else (value >= end):
            yield self.cast(value)
            i += 1
            value = start + i * step


def number_type(dtype):
    """
    The :class:`~.NumberType` for ``dtype``.

    Parameters
    ----------
    dtype: :class:`numpy.dtype` or type or str
        Anything :class:`numpy.dtype` accepts, such as ``int``, ``float``,
        ``np.uint16`` or ``"int32"``. A :class:`~.NumberType` is returned
        unchanged.

    Raises
    ------
    InvalidArgumentsException
        If ``dtype`` is not a signed integer, unsigned integer or floating
        point type.

    Examples
    --------
    >>> number_type(np.uint8)
    UnsignedInteger(uint8)
    >>> number_type(float)
    FloatingPoint(float64)
    """
    if isinstance(dtype, NumberType):
        return dtype
    try:
        dtype = np.dtype(dtype)
    except TypeError as e:
        raise InvalidArgumentsException(f"{dtype!r} is not a number type") \
            from e

    if dtype.kind == "i":
        return SignedInteger(dtype)
    if dtype.kind == "u":
        return UnsignedInteger(dtype)
    if dtype.kind == "f":
        return FloatingPoint(dtype)
    raise InvalidArgumentsException(f"Unsupported number type {dtype.name}. "
        "Expected a signed integer, unsigned integer, or floating point type")

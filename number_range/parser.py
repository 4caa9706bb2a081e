import logging
from typing import Any, Iterator, List, NamedTuple, Optional, Union

from number_range.exceptions import (DescendingUnsigned, EmptyListItem,
    MalformedRange, ParseError, ZeroStep)
from number_range.options import DEFAULT_OPTIONS, NumberRangeOptions
from number_range.utils import TRACE


class Single(NamedTuple):
    """A single number in a :class:`~.NumberRange`."""
    value: Any

    def is_valid(self):
        return True

    def is_invalid(self):
        return not self.is_valid()


class Range(NamedTuple):
    """
    The numbers ``start, start + step, ...`` up to ``end`` (inclusive, if the
    step lands on it) in a :class:`~.NumberRange`.
    """
    start: Any
    step: Any
    end: Any

    def is_valid(self):
        """
        Whether ``step`` moves from ``start`` towards ``end``. Invalid ranges
        are skipped when iterating a :class:`~.NumberRange`.

        Examples
        --------
        >>> Range(3, 2, 6).is_valid()
        True
        >>> Range(4, 1, 2).is_valid()
        False
        """
        return ((self.start <= self.end and self.step > 0)
            or (self.start >= self.end and self.step < 0))

    def is_invalid(self):
        return not self.is_valid()


Number = Union[Single, Range]


class NumberRange:
    """
    A sequence of numbers represented by a notation string, such as
    ``"1,3:10,14"`` or ``"-10,3:10,14:2:20"``.

    Iterating over a :class:`~.NumberRange` computes its numbers lazily, so
    huge ranges like ``"1:1000000000"`` cost nothing until they are consumed.
    Each iteration starts over from the first number; there is no shared
    cursor.

    Parameters
    ----------
    numbers: list[:class:`~.Single` or :class:`~.Range`]
        The numbers and ranges, in order. Usually built by :func:`~.parse`,
        but can be passed by hand.
    options: :class:`~number_range.options.NumberRangeOptions`
        The separators and number type to use. Default options if ``None``.
    original: str
        The notation string ``numbers`` was parsed from, if any.

    Examples
    --------
    >>> rng = NumberRange([Single(1), Range(3, 2, 6), Range(-4, 1, -2)])
    >>> str(rng)
    '1,3:2:6,-4:-2'
    >>> [int(n) for n in rng]
    [1, 3, 5, -4, -3, -2]
    """

    def __init__(self, numbers=None, options=None, original=None):
        self.log = logging.getLogger(__name__ + ".NumberRange")
        self.numbers: List[Number] = list(numbers) if numbers else []
        self.options = options or DEFAULT_OPTIONS
        self.original = original

    @classmethod
    def from_values(cls, values, step_hint=None, options=None, *, min_run=3):
        """
        The shortest :class:`~.NumberRange` covering ``values``, with numbers
        in ascending order and duplicates removed.

        See :func:`~number_range.compressor.compress` for the meaning of the
        parameters.
        """
        # compressor imports this module
        from number_range.compressor import compress_numbers

        options = options or DEFAULT_OPTIONS
        numbers = compress_numbers(values, step_hint, options.dtype,
            min_run=min_run)
        return cls(numbers, options)

    def parse_str(self, notation):
        """
        A new :class:`~.NumberRange` parsed from ``notation`` with the options
        of this one.
        """
        return parse(notation, self.options)

    def __iter__(self) -> Iterator:
        number_type = self.options.number_type
        for number in self.numbers:
            if isinstance(number, Single):
                yield number_type.cast(number.value)
                continue
            # people can build invalid ranges by hand
            if number.is_invalid():
                self.log.debug("Skipping invalid range %s", number)
                continue
            yield from number_type.expand(*number)

    def __str__(self):
        return format_numbers(self.numbers, self.options)

    def __repr__(self):
        return f"NumberRange({str(self)!r})"


def format_numbers(numbers, options, number_type=None, group_sep=None):
    """
    The notation string for ``numbers``.

    Parameters
    ----------
    numbers: list[:class:`~.Single` or :class:`~.Range`]
        The numbers and ranges to format.
    options: :class:`~number_range.options.NumberRangeOptions`
        Which separators to use.
    number_type: :class:`~number_range.numeric.NumberType`
        How to format each number. ``options.number_type`` if ``None``.
    group_sep: str
        If passed, digits are grouped with this character.
    """
    number_type = number_type or options.number_type

    def fmt(value):
        return number_type.format(value, group_sep, options.decimal_sep)

    items = []
    for number in numbers:
        if isinstance(number, Single):
            items.append(fmt(number.value))
            continue
        start, step, end = number
        # a unit step in the direction of ``end`` is what parsing infers
        # when the step is left out
        if (step == 1 and start <= end) or (step == -1 and start > end):
            parts = [start, end]
        else:
            parts = [start, step, end]
        items.append(options.range_sep.join(fmt(part) for part in parts))
    return options.list_sep.join(items)


def parse(notation: str, options: Optional[NumberRangeOptions] = None) \
    -> NumberRange:
    """
    Parses ``notation`` into a :class:`~.NumberRange`.

    The notation is a list of items separated by ``options.list_sep``. Each
    item is a number, ``start:end`` (a step of 1, or -1 if ``end`` is smaller
    than ``start``), or ``start:step:end``, with ``options.range_sep`` in
    place of ``:``. The numbers come out in the order they are written, with
    no sorting or deduplication.

    Parameters
    ----------
    notation: str
        The notation to parse. The empty string is an empty range.
    options: :class:`~number_range.options.NumberRangeOptions`
        The separators and number type to use. Default options if ``None``.

    Returns
    -------
    :class:`~.NumberRange`
        The parsed numbers, computed lazily when iterated.

    Raises
    ------
    MalformedRange
        If an item has more than two range separators, a bound is missing
        and has no default, or the step points away from the end.
    InvalidSign
        If a number is negative for an unsigned number type.
    ZeroStep
        If a range has a step of zero.
    DescendingUnsigned
        If a range ends below its start for an unsigned number type.
    NumberFormatError
        If a number can't be parsed.
    EmptyListItem
        If an item is empty.

    Examples
    --------
    >>> list(map(int, parse("1,3:6,10:-2:6")))
    [1, 3, 4, 5, 6, 10, 8, 6]
    """
    log = logging.getLogger(__name__)
    options = options or DEFAULT_OPTIONS

    if _sanitize(notation, options) == "":
        log.debug("Parsed empty notation %r", notation)
        return NumberRange([], options, original=notation)

    numbers = []
    for item in notation.split(options.list_sep):
        try:
            number = _parse_item(item, options)
        except ParseError as e:
            raise type(e)(f"{e} (item {item!r} of {notation!r})") from e
        log.log(TRACE, "Parsed item %r as %s", item, number)
        numbers.append(number)

    log.debug("Parsed %d items from %r", len(numbers), notation)
    return NumberRange(numbers, options, original=notation)


def _sanitize(text, options):
    if options.group_sep is not None:
        text = text.replace(options.group_sep, "")
    if options.trim_whitespace:
        text = "".join(text.split())
    if options.dtype.kind == "f" and options.decimal_sep != ".":
        text = text.replace(options.decimal_sep, ".")
    return text


def _parse_item(item, options):
    if _sanitize(item, options) == "":
        raise EmptyListItem(f"Empty item between {options.list_sep!r} "
            "separators")

    parts = item.split(options.range_sep)
    if len(parts) > 3:
        raise MalformedRange(f"Too many range separators "
            f"({options.range_sep!r}) in {item!r}")

    number_type = options.number_type
    if len(parts) == 1:
        return Single(number_type.parse(_sanitize(item, options)))

    start = _parse_bound(parts[0], options.default_start, "start", item,
        options)
    step = None
    if len(parts) == 3:
        text = _sanitize(parts[1], options)
        # an empty step (``1::5``) is the same as leaving it out
        if text:
            step = number_type.parse(text)
    end = _parse_bound(parts[-1], options.default_end, "end", item, options)

    return _resolve_range(start, step, end, item, options)


def _parse_bound(text, default, which, item, options):
    text = _sanitize(text, options)
    if text:
        return options.number_type.parse(text)
    if default is None:
        raise MalformedRange(f"Missing range {which} in {item!r}, and no "
            f"default_{which} is set")
    return default


def _resolve_range(start, step, end, item, options):
    signed = options.number_type.signed

    if step is None:
        if start <= end:
            return Range(start, 1, end)
        if not signed:
            raise DescendingUnsigned(f"Range {item!r} goes down, which is "
                f"not possible for the unsigned type {options.dtype.name}")
        return Range(start, -1, end)

    if step == 0:
        raise ZeroStep(f"Range {item!r} has a step of zero")
    if start > end and not signed:
        raise DescendingUnsigned(f"Range {item!r} goes down, which is not "
            f"possible for the unsigned type {options.dtype.name}")
    if (step > 0 and start > end) or (step < 0 and start < end):
        raise MalformedRange(f"The step of range {item!r} points away from "
            "its end")
    return Range(start, step, end)

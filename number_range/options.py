from itertools import combinations

import numpy as np

from number_range.exceptions import (AmbiguousSeparators,
    InvalidArgumentsException)
from number_range.numeric import Integer, number_type
from number_range.utils import check_separator


class NumberRangeOptions:
    """
    The separators and number type used to read and write number ranges.

    Options are immutable. Each ``with_*`` method returns a new
    :class:`~.NumberRangeOptions` with a single option changed, so they can
    be chained:

    >>> NumberRangeOptions().with_range_sep("-").parse("1,4,6-8")
    NumberRange('1,4,6-8')

    Parameters
    ----------
    list_sep: str
        Separates the items of the notation. Default ``,``.
    range_sep: str
        Separates the start, step, and end of a range. Default ``:``.
    group_sep: str
        Digit grouping character (eg the ``,`` in ``1,200``), removed from
        every number before it is parsed. There is no check on the size of
        the groups. ``None`` (the default) disables grouping.
    trim_whitespace: bool
        Whether to remove whitespace from numbers before parsing them. This
        removes whitespace inside a number as well, so ``"1 400"`` is read as
        ``1400``. Default ``False``.
    decimal_sep: str
        The decimal point of floating point numbers. Default ``.``.
    default_start: number
        Used when the start of a range is left empty, as in ``:5``. If
        ``None`` (the default), an empty start is an error.
    default_end: number
        Used when the end of a range is left empty, as in ``5:``. If ``None``
        (the default), an empty end is an error.
    dtype: :class:`numpy.dtype` or type or str
        The number type to parse into. Default ``numpy.int64``.

    Raises
    ------
    AmbiguousSeparators
        If two of ``list_sep``, ``range_sep`` and ``group_sep`` are the same
        character, or (for floating point dtypes) either of them is the same
        as ``decimal_sep``.
    InvalidArgumentsException
        If a separator is not a single character, or a default does not fit
        in the dtype (negative for an unsigned dtype, out of its bounds, or
        not a whole number for an integer dtype).

    Notes
    -----
    Since every intermediate object is validated, swapping two separators
    with chained ``with_*`` calls fails halfway through. Use
    :meth:`~.replace` to change several options at once.
    """
    _FIELDS = ("list_sep", "range_sep", "group_sep", "trim_whitespace",
        "decimal_sep", "default_start", "default_end", "dtype")
    __slots__ = _FIELDS + ("number_type",)

    def __init__(self, list_sep=",", range_sep=":", group_sep=None,
        trim_whitespace=False, decimal_sep=".", default_start=None,
        default_end=None, dtype=np.int64
    ):
        for name, sep in [("list_sep", list_sep), ("range_sep", range_sep),
            ("group_sep", group_sep), ("decimal_sep", decimal_sep)]:
            check_separator(name, sep)
        if list_sep is None or range_sep is None or decimal_sep is None:
            raise InvalidArgumentsException("Only group_sep can be None")

        kind = number_type(dtype)
        object.__setattr__(self, "number_type", kind)
        fields = {
            "list_sep": list_sep,
            "range_sep": range_sep,
            "group_sep": group_sep,
            "trim_whitespace": bool(trim_whitespace),
            "decimal_sep": decimal_sep,
            "default_start": self._check_default("default_start",
                default_start),
            "default_end": self._check_default("default_end", default_end),
            "dtype": kind.dtype
        }
        for name, value in fields.items():
            object.__setattr__(self, name, value)

        self._check_ambiguity()

    def _check_default(self, name, value):
        if value is None:
            return None
        kind = self.number_type
        try:
            converted = kind.to_python(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidArgumentsException(f"{name} must be a "
                f"{kind.dtype.name} number, got {value!r}") from e
        if converted != value:
            raise InvalidArgumentsException(f"{name} {value!r} is not exactly "
                f"representable as a {kind.dtype.name} number")
        if converted < 0 and not kind.signed:
            raise InvalidArgumentsException(f"{name} can't be negative for "
                f"the unsigned type {kind.dtype.name}, got {converted}")
        if isinstance(kind, Integer) and not kind.min <= converted <= kind.max:
            raise InvalidArgumentsException(f"{name} is out of range for the "
                f"type {kind.dtype.name}, got {converted}")
        return converted

    def _check_ambiguity(self):
        seps = [("list_sep", self.list_sep), ("range_sep", self.range_sep)]
        if self.group_sep is not None:
            seps.append(("group_sep", self.group_sep))
        if self.dtype.kind == "f":
            seps.append(("decimal_sep", self.decimal_sep))

        for (name1, sep1), (name2, sep2) in combinations(seps, 2):
            if sep1 == sep2:
                raise AmbiguousSeparators(f"{name1} and {name2} are both "
                    f"{sep1!r}")

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable. Use "
            "the with_* methods or replace instead")

    def replace(self, **changes):
        """
        A copy of these options with ``changes`` applied. The result is
        validated as a whole, so this can swap separators in one step.

        >>> NumberRangeOptions().replace(list_sep=":", range_sep="-")
        NumberRangeOptions(list_sep=':', range_sep='-')
        """
        unknown = set(changes) - set(self._FIELDS)
        if unknown:
            raise InvalidArgumentsException(f"Unknown options "
                f"{', '.join(sorted(unknown))}")
        kwargs = {name: getattr(self, name) for name in self._FIELDS}
        kwargs.update(changes)
        return NumberRangeOptions(**kwargs)

    def with_list_sep(self, sep):
        return self.replace(list_sep=sep)

    def with_range_sep(self, sep):
        return self.replace(range_sep=sep)

    def with_group_sep(self, sep):
        return self.replace(group_sep=sep)

    def with_whitespace(self, flag):
        return self.replace(trim_whitespace=flag)

    def with_decimal_sep(self, sep):
        return self.replace(decimal_sep=sep)

    def with_default_start(self, value):
        return self.replace(default_start=value)

    def with_default_end(self, value):
        return self.replace(default_end=value)

    def with_dtype(self, dtype):
        return self.replace(dtype=dtype)

    def parse(self, notation):
        """
        Parses ``notation`` with these options. Shorthand for
        :func:`~number_range.parser.parse`.
        """
        # parser imports this module, so import it lazily
        from number_range.parser import parse
        return parse(notation, self)

    def _key(self):
        return tuple(getattr(self, name) for name in self._FIELDS)

    def __eq__(self, other):
        if not isinstance(other, NumberRangeOptions):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        changed = [f"{name}={getattr(self, name)!r}" for name in self._FIELDS
            if getattr(self, name) != getattr(DEFAULT_OPTIONS, name)]
        return f"NumberRangeOptions({', '.join(changed)})"


DEFAULT_OPTIONS = NumberRangeOptions()

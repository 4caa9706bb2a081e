import logging

import numpy as np

from number_range.exceptions import InvalidArgumentsException
from number_range.numeric import number_type
from number_range.options import DEFAULT_OPTIONS
from number_range.parser import Range, Single, format_numbers
from number_range.utils import TRACE


def compress(values, step_hint=None, options=None, *, grouped=False,
    min_run=3):
    """
    The shortest notation string covering ``values``.

    ``values`` are sorted and deduplicated first, so the result is the same
    for any order of the same set of numbers. Consecutive numbers are written
    as ``start:end`` when there are at least ``min_run`` of them; shorter runs
    are written out one by one, since ``1:2`` is no shorter than ``1,2``.

    Parameters
    ----------
    values: iterable or :class:`numpy.ndarray`
        The numbers to compress. Their number type is inferred by numpy
        (``np.asarray``), independent of ``options.dtype``.
    step_hint: number
        If passed, runs of numbers which are ``step_hint`` apart are also
        compressed, as ``start:step_hint:end``, when they are at least two
        long. Runs of consecutive numbers take precedence.
    options: :class:`~number_range.options.NumberRangeOptions`
        Which separators to use. Default options if ``None``.
    grouped: bool
        Whether to group digits with ``options.group_sep``. Default
        ``False``; grouping is never added unless asked for.
    min_run: int
        The minimum length of a run of consecutive numbers to compress.

    Returns
    -------
    str
        The notation. The empty string if ``values`` is empty.

    Raises
    ------
    InvalidArgumentsException
        If ``step_hint`` is not positive, ``min_run`` is less than two, or
        ``values`` are not numbers.

    Examples
    --------
    >>> compress([1, 3, 4, 5, 6, 7, 8, 9, 10, 14])
    '1,3:10,14'
    >>> compress([10, 1, 4, 7, 2], step_hint=3)
    '1,2,4:3:10'
    """
    log = logging.getLogger(__name__)
    options = options or DEFAULT_OPTIONS

    array = _as_array(values)
    kind = number_type(array.dtype)
    numbers = compress_numbers(array, step_hint, min_run=min_run)

    group_sep = options.group_sep if grouped else None
    notation = format_numbers(numbers, options, kind, group_sep)
    log.debug("Compressed %d values into %d items", array.size, len(numbers))
    return notation


def compress_numbers(values, step_hint=None, dtype=None, *, min_run=3):
    """
    The numbers and ranges (as :class:`~number_range.parser.Single` and
    :class:`~number_range.parser.Range`) which cover ``values`` most
    compactly, in ascending order.

    Parameters
    ----------
    values: iterable or :class:`numpy.ndarray`
        The numbers to compress.
    step_hint: number
        See :func:`~.compress`.
    dtype: :class:`numpy.dtype`
        Converts ``values`` to this type first if passed, otherwise the type
        is inferred.
    min_run: int
        See :func:`~.compress`.
    """
    if min_run < 2:
        raise InvalidArgumentsException(f"min_run must be at least 2, got "
            f"{min_run}")
    if step_hint is not None and not step_hint > 0:
        raise InvalidArgumentsException(f"step_hint must be positive, got "
            f"{step_hint}")
    # a hint of one adds nothing to the unit-step runs
    if step_hint == 1:
        step_hint = None

    array = _as_array(values, dtype)
    if array.size == 0:
        return []
    kind = number_type(array.dtype)
    # np.unique sorts as well
    array = np.unique(array)
    # sorted and unique, so every difference is positive (an overflow wraps
    # to a negative number, which never matches a step)
    diffs = np.diff(array)

    log = logging.getLogger(__name__)
    numbers = []
    for first, last, step in _runs(diffs, step_hint, min_run):
        start = kind.to_python(array[first])
        if step is None:
            numbers.append(Single(start))
        else:
            end = kind.to_python(array[last])
            numbers.append(Range(start, kind.to_python(step), end))
        log.log(TRACE, "Run %s", numbers[-1])
    return numbers


def _as_array(values, dtype=None):
    if isinstance(values, np.ndarray):
        array = values if dtype is None else values.astype(dtype)
    else:
        array = np.array(list(values), dtype=dtype)
    if array.size and array.dtype.kind not in "iuf":
        raise InvalidArgumentsException(f"Can't compress values of type "
            f"{array.dtype}")
    return array.ravel()


def _runs(diffs, step_hint, min_run):
    """
    Yields ``(first, last, step)`` index triples covering the sorted array
    ``diffs`` was computed from, greedily taking the longest run at each
    position. ``step`` is ``None`` for a single number.
    """
    n = len(diffs) + 1
    i = 0
    while i < n:
        last = _run_end(diffs, i, 1)
        if last - i + 1 >= min_run:
            yield i, last, 1
            i = last + 1
            continue

        if step_hint is not None:
            last = i
            # stop before a number that starts a run of consecutive numbers
            while (last < len(diffs) and diffs[last] == step_hint
                and _run_end(diffs, last + 1, 1) - last < min_run):
                last += 1
            if last > i:
                yield i, last, diffs[i]
                i = last + 1
                continue

        yield i, i, None
        i += 1


def _run_end(diffs, i, step):
    """
    The index of the last element of the run starting at ``i`` whose
    elements are ``step`` apart.
    """
    while i < len(diffs) and diffs[i] == step:
        i += 1
    return i

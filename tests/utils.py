import numpy as np

from number_range import NumberRangeOptions

# what precision we want to guarantee for float ranges
DELTA = 0.00001

UNSIGNED = NumberRangeOptions(dtype=np.uint64)
FLOAT = NumberRangeOptions(dtype=np.float64)
# thousands grouped with commas, items split by slashes, as in "1,200/1, 400"
GROUPED = NumberRangeOptions(list_sep="/", group_sep=",", trim_whitespace=True)


def values(rng):
    """The numbers of ``rng`` as python numbers, for easy comparison."""
    return [n.item() for n in rng]

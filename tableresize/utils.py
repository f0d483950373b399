"""Number helpers shared by the width model and the geometry adapter."""

import math
import re

from . import COLUMN_WIDTH_PRECISION

# Leading part of a string that can be read as a number, like "12.5" in
# "12.5px" or "25" in " 25%".
NUMBER_PREFIX = re.compile(
    r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)')


def parse_float(value):
    """Return ``value`` as a float, or ``nan`` if it can't be parsed.

    Strings are read up to the first character that can't be part of a
    number, so that ``'25%'`` gives ``25.0`` and ``'12px'`` gives ``12.0``.

    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        return math.nan
    match = NUMBER_PREFIX.match(value)
    if match is None:
        return math.nan
    return float(match.group(1).replace('Infinity', 'inf'))


def to_precision(value):
    """Round ``value`` to ``COLUMN_WIDTH_PRECISION`` decimal digits.

    Halves are rounded up. Values that can't be parsed give ``nan``.

    """
    multiplier = 10 ** COLUMN_WIDTH_PRECISION
    number = parse_float(value)
    if not math.isfinite(number):
        return number
    return math.floor(number * multiplier + 0.5) / multiplier


def clamp(number, minimum, maximum):
    """Clamp ``number`` between inclusive ``minimum`` and ``maximum`` bounds.

    The returned number is always rounded with :func:`to_precision`.

    """
    if number <= minimum:
        return to_precision(minimum)
    if number >= maximum:
        return to_precision(maximum)
    return to_precision(number)


def fill_array(length, value):
    """Return a list with ``length`` copies of ``value``."""
    return [value] * length


def sum_array(values):
    """Sum all the values that can be parsed to a float."""
    numbers = (parse_float(value) for value in values)
    return sum(number for number in numbers if not math.isnan(number))

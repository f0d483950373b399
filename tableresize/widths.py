"""Normalization of column widths.

Column widths are percentages of the table width. A column whose width has
not been set yet has an ``auto`` width, computed from the room left by the
other columns.

"""

from . import COLUMN_MIN_WIDTH_AS_PERCENTAGE
from .utils import parse_float, sum_array, to_precision


class Auto:
    """Width of a column that has not been set yet."""
    __slots__ = ()

    def __eq__(self, other):
        return isinstance(other, Auto)

    def __hash__(self):
        return hash('auto')

    def __repr__(self):
        return 'Auto()'

    def __str__(self):
        return 'auto'


class Fixed:
    """Width of a column, given as a percentage of the table width."""
    __slots__ = ('percentage',)

    def __init__(self, percentage):
        self.percentage = percentage

    def __eq__(self, other):
        return (
            isinstance(other, Fixed) and other.percentage == self.percentage)

    def __hash__(self):
        return hash(self.percentage)

    def __repr__(self):
        return f'Fixed({self.percentage!r})'

    def __str__(self):
        return f'{self.percentage:g}%'


AUTO = Auto()


def to_column_width(value):
    """Return ``value`` as :class:`Auto` or :class:`Fixed`.

    ``value`` can already be a column width, a number, or a string like
    ``'auto'``, ``' 25 '`` or ``'25%'``. Strings that can't be parsed give a
    ``Fixed`` width whose percentage is ``nan``.

    """
    if isinstance(value, (Auto, Fixed)):
        return value
    if isinstance(value, str) and value.strip() == 'auto':
        return AUTO
    return Fixed(parse_float(value))


def calculate_missing_column_widths(column_widths):
    """Replace ``auto`` widths with computed percentages.

    The room left by the initialized columns is shared equally between the
    uninitialized columns, with ``COLUMN_MIN_WIDTH_AS_PERCENTAGE`` as lower
    bound. When the bound is used, widths sum to more than 100% and are
    scaled back by :func:`normalize_column_widths`.

    """
    column_widths = [to_column_width(width) for width in column_widths]
    auto_count = column_widths.count(AUTO)
    if auto_count == 0:
        return [to_precision(width.percentage) for width in column_widths]

    initialized_width = sum_array(
        width.percentage for width in column_widths
        if isinstance(width, Fixed))
    auto_width = max(
        (100 - initialized_width) / auto_count,
        COLUMN_MIN_WIDTH_AS_PERCENTAGE)

    return [
        to_precision(auto_width if width == AUTO else width.percentage)
        for width in column_widths]


def normalize_column_widths(column_widths):
    """Return percentages for ``column_widths`` summing to 100.

    If the widths don't sum to 100, they are changed proportionally. The
    rounding error is then given to the last column.

    """
    column_widths = calculate_missing_column_widths(column_widths)
    if not column_widths:
        return column_widths

    total_width = sum_array(column_widths)
    if total_width == 100:
        return column_widths
    if not total_width:
        # Nothing to scale, share the table equally.
        column_widths = calculate_missing_column_widths(
            [AUTO] * len(column_widths))
        total_width = sum_array(column_widths)

    column_widths = [
        to_precision(width * 100 / total_width) for width in column_widths]
    column_widths[-1] = to_precision(
        column_widths[-1] + 100 - sum_array(column_widths))
    return column_widths

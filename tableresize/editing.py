"""Keep column widths in sync with table edits.

Nothing in this module changes the document by itself: functions return new
widths, written by :func:`apply_column_widths` or by the caller.

"""

import math

from . import COLUMN_RESIZE_DISTANCE_THRESHOLD
from .columns import get_column_index, get_number_of_columns
from .geometry import (
    get_column_min_width_as_percentage, get_dom_cell_outer_width,
    get_table_width_in_pixels)
from .locator import get_affected_tables
from .logger import LOGGER, PROGRESS_LOGGER
from .structure import TableUtils, get_span
from .utils import clamp, fill_array, sum_array, to_precision
from .widths import AUTO, Fixed, normalize_column_widths, to_column_width


def parse_column_widths(attribute):
    """Return the list of column widths stored in a ``columnWidths`` value.

    Invalid widths are replaced by ``auto`` widths.

    """
    if not attribute:
        return []
    column_widths = []
    for value in attribute.split(','):
        width = to_column_width(value)
        if isinstance(width, Fixed) and math.isnan(width.percentage):
            LOGGER.warning(
                'Ignored column width %r, invalid value.', value.strip())
            width = AUTO
        column_widths.append(width)
    return column_widths


def serialize_column_widths(column_widths):
    """Return the ``columnWidths`` value storing ``column_widths``."""
    return ','.join(str(to_column_width(width)) for width in column_widths)


def adjust_column_widths(column_widths, number_of_columns):
    """Return ``column_widths`` with exactly ``number_of_columns`` widths.

    Missing widths are ``auto``, extra widths are removed from the end.

    """
    column_widths = list(column_widths)
    if len(column_widths) < number_of_columns:
        column_widths.extend(
            fill_array(number_of_columns - len(column_widths), AUTO))
    else:
        del column_widths[number_of_columns:]
    return column_widths


def insert_column_widths(column_widths, index, count=1):
    """Return ``column_widths`` with ``count`` new columns at ``index``."""
    column_widths = list(column_widths)
    column_widths[index:index] = fill_array(count, AUTO)
    return column_widths


def remove_column_widths(column_widths, index, count=1):
    """Return ``column_widths`` without ``count`` columns from ``index``.

    The width of the removed columns is given to the column on their left,
    or to the new first column when the first columns are removed.

    """
    column_widths = [to_column_width(width) for width in column_widths]
    removed_widths = column_widths[index:index + count]
    del column_widths[index:index + count]
    if not column_widths:
        return column_widths

    removed_width = sum_array(
        width.percentage for width in removed_widths
        if isinstance(width, Fixed))
    target = max(min(index, len(column_widths)) - 1, 0)
    if removed_width and isinstance(column_widths[target], Fixed):
        column_widths[target] = Fixed(to_precision(
            column_widths[target].percentage + removed_width))
    return column_widths


def resize_column_widths(column_widths, left_index, delta, min_width):
    """Move the right edge of the ``left_index`` column by ``delta`` percent.

    The column on the right of the edge takes the remaining width. Columns
    keep at least ``min_width`` percent, unless they are already narrower.
    The right edge of the last column is the edge of the table and can't be
    moved.

    """
    column_widths = normalize_column_widths(column_widths)
    if not 0 <= left_index < len(column_widths) - 1:
        return column_widths

    left_width = column_widths[left_index]
    total_width = left_width + column_widths[left_index + 1]
    new_left_width = clamp(
        left_width + delta,
        min(min_width, left_width),
        max(total_width - min_width, left_width))
    column_widths[left_index] = new_left_width
    column_widths[left_index + 1] = to_precision(total_width - new_left_width)
    return column_widths


def measure_column_widths(table, context, table_utils):
    """Return the column widths of ``table`` measured on its rendering.

    Only cells spanning one column are measured. Columns without such cells
    get ``auto`` widths. Return ``None`` if the table is not rendered.

    """
    table_width = get_table_width_in_pixels(table, context)
    if not table_width:
        return None
    column_widths = fill_array(get_number_of_columns(table, table_utils), AUTO)
    column_index_map = table_utils.create_column_index_map(table)
    for cell, column_index in column_index_map.items():
        if column_widths[column_index] != AUTO:
            continue
        if get_span(cell, 'colspan') != 1:
            continue
        view_cell = context.mapper.to_view_element(cell)
        if view_cell is None:
            continue
        cell_width = get_dom_cell_outer_width(view_cell, context.geometry)
        if not math.isnan(cell_width):
            column_widths[column_index] = Fixed(cell_width * 100 / table_width)
    return normalize_column_widths(column_widths)


def get_column_widths_fixes(changes, document, table_utils=None):
    """Return new column widths for the tables affected by ``changes``.

    Widths of each affected table are adjusted to its number of columns and
    normalized. The returned dict only includes tables whose ``columnWidths``
    attribute has to change.

    """
    if table_utils is None:
        table_utils = TableUtils()
    fixes = {}
    for table in get_affected_tables(changes, document):
        attribute = table.get_attribute('columnWidths')
        column_widths = normalize_column_widths(adjust_column_widths(
            parse_column_widths(attribute),
            get_number_of_columns(table, table_utils)))
        if serialize_column_widths(column_widths) != attribute:
            fixes[table] = column_widths
    PROGRESS_LOGGER.info('Column widths fixed for %d tables', len(fixes))
    return fixes


def apply_column_widths(document, fixes):
    """Write the column widths of ``fixes`` in ``document``.

    ``fixes`` is a dict of tables and column widths, as returned by
    :func:`get_column_widths_fixes`.

    """
    for table, column_widths in fixes.items():
        document.set_attribute(
            table, 'columnWidths', serialize_column_widths(column_widths))


def commit_column_resize(table, cell, delta_in_pixels, context,
                         table_utils=None):
    """Return the column widths of ``table`` after dragging ``cell``’s edge.

    ``delta_in_pixels`` is the distance travelled by the right edge of the
    rendered cell. Return ``None`` when nothing has to change: the distance is
    below ``COLUMN_RESIZE_DISTANCE_THRESHOLD`` or the table is not rendered.

    """
    if abs(delta_in_pixels) < COLUMN_RESIZE_DISTANCE_THRESHOLD:
        return None
    if table_utils is None:
        table_utils = TableUtils()

    table_width = get_table_width_in_pixels(table, context)
    if not table_width:
        return None
    right_edge = get_column_index(
        cell, table_utils.create_column_index_map(table)).right_edge
    if right_edge is None:
        LOGGER.debug('%r is not a cell of %r.', cell, table)
        return None

    if table.has_attribute('columnWidths'):
        column_widths = adjust_column_widths(
            parse_column_widths(table.get_attribute('columnWidths')),
            get_number_of_columns(table, table_utils))
    else:
        column_widths = measure_column_widths(table, context, table_utils)
    return resize_column_widths(
        column_widths, right_edge, delta_in_pixels * 100 / table_width,
        get_column_min_width_as_percentage(table, context))

"""Column indexes of table cells."""

from collections import namedtuple

from .structure import get_span

ColumnIndex = namedtuple('ColumnIndex', 'left_edge, right_edge')


def get_column_index(cell, column_index_map):
    """Return the column indexes on the left and right edges of ``cell``.

    ``column_index_map`` must give the left column index of every cell in the
    table, as returned by :meth:`TableUtils.create_column_index_map`. Edges
    of cells missing from the map are ``None``.

    """
    left_edge = column_index_map.get(cell)
    if left_edge is None:
        return ColumnIndex(None, None)
    colspan = max(get_span(cell, 'colspan'), 1)
    return ColumnIndex(left_edge, left_edge + colspan - 1)


def get_number_of_columns(table, table_utils):
    """Return the total number of columns in ``table``."""
    return table_utils.get_columns(table)

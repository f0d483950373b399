"""Grid of table cells.

Because of colspan/rowspan works, the row index of a cell is implicitly the
index of its row, but its column index depends on the cells before it and
on the cells spanning from previous rows.

https://www.w3.org/TR/CSS21/tables.html#table-layout

"""


def get_span(cell, name):
    """Return the ``colspan`` or ``rowspan`` of ``cell``, 1 by default."""
    try:
        span = int(cell.get_attribute(name, 1))
    except (TypeError, ValueError):
        return 1
    return span if span >= 0 else 1


class TableUtils:
    """Give information about the grid of table cells."""

    def get_rows(self, table):
        """Return the number of rows in ``table``."""
        return sum(1 for row in table.children if row.is_element('tableRow'))

    def get_columns(self, table):
        """Return the number of columns in ``table``."""
        return self._assign_grid(table)[1]

    def create_column_index_map(self, table):
        """Return a dict giving the left column index of each cell."""
        return self._assign_grid(table)[0]

    def _assign_grid(self, table):
        column_index_map = {}
        grid_width = 0
        rows = [row for row in table.children if row.is_element('tableRow')]
        # Indexes: row number after the current one.
        # Values: set of cells already occupied by row-spanning cells.
        occupied_cells_by_row = [set() for row in rows]
        for row in rows:
            occupied_cells_in_this_row = occupied_cells_by_row.pop(0)
            # The list is now about rows after this one.
            grid_x = 0
            for cell in row.children:
                if not cell.is_element('tableCell'):
                    continue
                # Make sure that the first grid cell is free.
                while grid_x in occupied_cells_in_this_row:
                    grid_x += 1
                column_index_map[cell] = grid_x
                new_grid_x = grid_x + max(get_span(cell, 'colspan'), 1)
                rowspan = get_span(cell, 'rowspan')
                if rowspan != 1:
                    if rowspan == 0:
                        # All rows until the end of the table
                        spanned_rows = occupied_cells_by_row
                    else:
                        spanned_rows = occupied_cells_by_row[:rowspan - 1]
                    spanned_columns = range(grid_x, new_grid_x)
                    for occupied_cells in spanned_rows:
                        occupied_cells.update(spanned_columns)
                grid_x = new_grid_x
                grid_width = max(grid_width, grid_x)
            if occupied_cells_in_this_row:
                grid_width = max(
                    grid_width, max(occupied_cells_in_this_row) + 1)
        return column_index_map, grid_width

"""Find the tables whose column widths are affected by document changes."""

from .model import TABLE_ELEMENTS, is_inside


def get_reference_position(change):
    """Return the position anchoring ``change`` in a table, or ``None``.

    Only insertions of tables, rows and cells, removals of rows and cells,
    and attribute changes on tables, rows and cells have a reference
    position. Removed tables don't need new column widths.

    """
    if change.type == 'insert':
        if change.name in TABLE_ELEMENTS:
            return change.position
    elif change.type == 'remove':
        if change.name in ('tableRow', 'tableCell'):
            return change.position
    elif change.type == 'attribute':
        node = change.range.start.node_after
        if node is not None and node.name in TABLE_ELEMENTS:
            return change.range.start


def get_affected_tables(changes, document):
    """Return the tables with column widths affected by ``changes``.

    ``changes`` must hold all the changes of a transaction. Tables nested in
    an affected table are affected too. The returned dict is used as an
    ordered set, it may be empty. Tables that are not in ``document`` anymore
    are ignored.

    """
    affected_tables = {}

    for change in changes:
        position = get_reference_position(change)
        if position is None:
            continue

        node = position.node_after
        if node is not None and node.is_element('table'):
            table = node
        else:
            table = position.find_ancestor('table')
        if table is None or not is_inside(table, document.root):
            continue

        for node in document.create_range_on(table).get_items():
            if node.is_element('table') and node.has_attribute('columnWidths'):
                affected_tables[node] = None

    return affected_tables.keys()

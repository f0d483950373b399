"""Resize handles of rendered cells."""

from xml.etree import ElementTree

RESIZER_CLASS = 'table-column-resizer'


def has_class(element, name):
    return name in element.get('class', '').split()


def insert_column_resizer_element(cell):
    """Append a resizer element to the rendered ``cell``.

    Nothing is done if the cell already has one.

    """
    for child in cell:
        if has_class(child, RESIZER_CLASS):
            return
    ElementTree.SubElement(cell, 'div', {'class': RESIZER_CLASS})

"""Helpers for tests."""

import functools
import math
import sys

from tableresize.geometry import Geometry
from tableresize.logger import capture_logs
from tableresize.model import Element


def assert_no_logs(function):
    """Decorator that asserts that nothing is logged in a function."""
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with capture_logs() as logs:
            try:
                function(*args, **kwargs)
            except Exception:  # pragma: no cover
                if logs:
                    print(f'{len(logs)} errors logged:', file=sys.stderr)
                    for message in logs:
                        print(message, file=sys.stderr)
                raise
            else:
                if logs:  # pragma: no cover
                    for message in logs:
                        print(message, file=sys.stderr)
                    raise AssertionError(f'{len(logs)} errors logged')
    return wrapper


class FakeGeometry:
    """Geometry provider giving fixed measures to elements."""
    def __init__(self, measures=None):
        self.measures = dict(measures or {})
        self.measured = []

    def measure(self, element):
        self.measured.append(element)
        return self.measures.get(element, Geometry(math.nan, 0, 0, 0))


def build_table(rows, column_widths=None):
    """Return a model table.

    ``rows`` is a list of rows, each row being a list of cells. Cells are
    given as elements, or as integers giving their colspan.

    """
    attributes = {}
    if column_widths is not None:
        attributes['columnWidths'] = column_widths
    table = Element('table', attributes)
    for cells in rows:
        row = Element('tableRow')
        for cell in cells:
            if not isinstance(cell, Element):
                cell = Element(
                    'tableCell', {'colspan': cell} if cell != 1 else {})
            row.append(cell)
        table.append(row)
    return table

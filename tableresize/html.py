"""Tables of HTML documents.

HTML tables are converted into model tables. Their rendered elements are
the ElementTree elements of the parsed HTML: model elements are mapped to
them, so that they are measured and get resize handles.

Column widths are stored in the ``data-column-widths`` attribute of
``<table>`` elements.

"""

from pathlib import Path

import cssselect2
import html5lib

from .editing import (
    apply_column_widths, get_column_widths_fixes, serialize_column_widths)
from .geometry import Mapper, RenderingContext
from .logger import PROGRESS_LOGGER
from .markers import RESIZER_CLASS, has_class, insert_column_resizer_element
from .model import Document, Element, Insertion, Text
from .structure import TableUtils
from .utils import fill_array

COLUMN_WIDTHS_ATTRIBUTE = 'data-column-widths'


class HTMLTables:
    """Tables of an HTML document parsed by html5lib.

    Use **one** named argument: ``filename``, ``file_obj`` or ``string``.

    :type filename: str or pathlib.Path
    :param filename: A filename, relative to the current directory.
    :type file_obj: :term:`file object`
    :param file_obj: Any object with a ``read`` method.
    :param str string: A string of HTML source.
    :param str encoding: Force the source character encoding.

    """
    def __init__(self, filename=None, file_obj=None, string=None,
                 encoding=None, table_utils=None):
        PROGRESS_LOGGER.info(
            'Step 1 - Parsing HTML - %s',
            filename or getattr(file_obj, 'name', 'HTML string'))
        if filename is not None:
            source = Path(filename).read_bytes()
        elif file_obj is not None:
            source = file_obj.read()
        else:
            assert string is not None
            source = string
        kwargs = {'namespaceHTMLElements': False}
        if encoding is not None and not isinstance(source, str):
            kwargs['override_encoding'] = encoding
        self.etree_element = html5lib.parse(source, **kwargs)
        self.wrapper_element = cssselect2.ElementWrapper.from_html_root(
            self.etree_element)
        self.table_utils = TableUtils() if table_utils is None else table_utils
        self.document = Document()
        self.mapper = Mapper()

        PROGRESS_LOGGER.info('Step 2 - Building table models')
        nested_tables = {
            wrapper.etree_element
            for wrapper in self.wrapper_element.query_all('table table')}
        for wrapper in self.wrapper_element.query_all('table'):
            if wrapper.etree_element not in nested_tables:
                self.document.root.append(
                    self._build_table(wrapper.etree_element))

    @property
    def tables(self):
        """All the model tables, including nested tables."""
        return [
            node for node in self.document.root.descendants()
            if node.is_element('table')]

    def context(self, geometry=None):
        """Return a rendering context for the model tables."""
        return RenderingContext(self.mapper, geometry)

    def _build_table(self, etree_table):
        table = Element('table')
        self.mapper.bind(table, etree_table)
        column_widths = etree_table.get(COLUMN_WIDTHS_ATTRIBUTE)
        if column_widths is not None:
            table.attributes['columnWidths'] = column_widths
        for child in etree_table:
            if child.tag == 'tr':
                rows = [child]
            elif child.tag in ('thead', 'tbody', 'tfoot'):
                rows = [row for row in child if row.tag == 'tr']
            else:
                continue
            for etree_row in rows:
                table.append(self._build_row(etree_row))
        return table

    def _build_row(self, etree_row):
        row = Element('tableRow')
        self.mapper.bind(row, etree_row)
        for etree_cell in etree_row:
            if etree_cell.tag not in ('td', 'th'):
                continue
            cell = Element('tableCell')
            self.mapper.bind(cell, etree_cell)
            for name in ('colspan', 'rowspan'):
                value = etree_cell.get(name, '').strip()
                if value.isdigit() and int(value) != 1:
                    cell.attributes[name] = int(value)
            self._build_content(etree_cell, cell)
            row.append(cell)
        return row

    def _build_content(self, etree_element, cell):
        if etree_element.text and etree_element.text.strip():
            cell.append(Text(etree_element.text))
        for child in etree_element:
            if child.tag == 'table':
                cell.append(self._build_table(child))
            elif not has_class(child, RESIZER_CLASS):
                self._build_content(child, cell)
            if child.tail and child.tail.strip():
                cell.append(Text(child.tail))

    def initialize_column_widths(self):
        """Give ``auto`` column widths to tables without column widths."""
        for table in self.tables:
            if not table.has_attribute('columnWidths'):
                number_of_columns = self.table_utils.get_columns(table)
                self.document.set_attribute(
                    table, 'columnWidths',
                    ','.join(fill_array(number_of_columns, 'auto')))

    def normalize(self):
        """Normalize the column widths of all the tables.

        Return the dict of tables whose column widths have changed, with
        their new column widths.

        """
        PROGRESS_LOGGER.info('Step 3 - Normalizing column widths')
        changes = [
            Insertion('table', self.document.create_position_before(table), 1)
            for table in self.document.root.children]
        fixes = get_column_widths_fixes(
            changes, self.document, self.table_utils)
        apply_column_widths(self.document, fixes)
        self.write_column_widths(fixes)
        return fixes

    def write_column_widths(self, fixes):
        """Store the column widths of ``fixes`` in the HTML tables."""
        for table, column_widths in fixes.items():
            value = serialize_column_widths(column_widths)
            self.mapper.to_view_element(table).set(
                COLUMN_WIDTHS_ATTRIBUTE, value)

    def insert_resizers(self):
        """Add a resize handle to each HTML cell."""
        for table in self.tables:
            for row in table.children:
                for cell in row.children:
                    insert_column_resizer_element(
                        self.mapper.to_view_element(cell))

    def serialize(self):
        """Return the HTML document as a string."""
        return html5lib.serialize(
            self.etree_element, tree='etree', omit_optional_tags=False,
            quote_attr_values='always')

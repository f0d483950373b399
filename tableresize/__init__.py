"""Column width model for editable tables.

The public API is what is accessible from this "root" package without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

#: Number of decimal digits kept in column widths.
COLUMN_WIDTH_PRECISION = 2

#: Minimum column width given as percentage of the table width.
COLUMN_MIN_WIDTH_AS_PERCENTAGE = 5

#: Minimum column width given in pixels.
COLUMN_MIN_WIDTH_IN_PIXELS = 40

#: Minimum distance in pixels a resize handle must travel to change widths.
COLUMN_RESIZE_DISTANCE_THRESHOLD = 3

#: Default values for command-line options. See :func:`__main__.main` to
#: learn more about specific options.
#:
#: :param bool all_tables:
#:     Whether tables without column widths get ``auto`` widths first.
#: :param bool resizers:
#:     Whether resizer markers are inserted into every cell.
#: :param str encoding:
#:     Force the input character encoding.
DEFAULT_OPTIONS = {
    'all_tables': False,
    'resizers': False,
    'encoding': None,
}

__all__ = [
    'Auto', 'COLUMN_MIN_WIDTH_AS_PERCENTAGE', 'COLUMN_MIN_WIDTH_IN_PIXELS',
    'COLUMN_RESIZE_DISTANCE_THRESHOLD', 'COLUMN_WIDTH_PRECISION',
    'DEFAULT_OPTIONS', 'Document', 'Element', 'Fixed', 'HTMLTables',
    'LOGGER', 'TableUtils', 'VERSION', '__version__',
    'apply_column_widths', 'get_affected_tables', 'get_column_index',
    'get_column_widths_fixes', 'normalize_column_widths']


# Work around circular imports.
from .logger import LOGGER, PROGRESS_LOGGER  # noqa: I001, E402
from .widths import Auto, Fixed, normalize_column_widths  # noqa: E402
from .columns import get_column_index  # noqa: E402
from .locator import get_affected_tables  # noqa: E402
from .model import Document, Element  # noqa: E402
from .structure import TableUtils  # noqa: E402
from .editing import apply_column_widths, get_column_widths_fixes  # noqa: E402
from .html import HTMLTables  # noqa: E402

"""Pixel geometry of rendered tables.

Rendered elements are ElementTree elements. They are measured by a geometry
provider, an object with a ``measure(element)`` method returning a
:class:`Geometry`. :class:`StyleGeometry` measures elements from their
``style`` attribute, other providers can use real layout results.

Measures are only valid until the next layout and are never cached.

"""

import math
from collections import namedtuple

import tinycss2

from . import COLUMN_MIN_WIDTH_IN_PIXELS
from .logger import LOGGER

Geometry = namedtuple(
    'Geometry', 'width, padding_left, padding_right, border_width')

# How many CSS pixels is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 1. / 0.75,
    'pc': 16.,  # LENGTHS_TO_PIXELS['pt'] * 12
    'in': 96.,  # LENGTHS_TO_PIXELS['pt'] * 72
    'cm': 96. / 2.54,  # LENGTHS_TO_PIXELS['in'] / 2.54
    'mm': 96. / 25.4,  # LENGTHS_TO_PIXELS['in'] / 25.4
    'q': 96. / 25.4 / 4,  # LENGTHS_TO_PIXELS['mm'] / 4
}


def get_length(token):
    """Return the length in pixels of ``token``, or ``None``."""
    if token.type == 'number' and token.value == 0:
        return 0
    if token.type == 'dimension' and token.lower_unit in LENGTHS_TO_PIXELS:
        return token.value * LENGTHS_TO_PIXELS[token.lower_unit]


class StyleGeometry:
    """Measure elements from the declarations of their ``style`` attribute.

    Missing widths are ``nan``, missing paddings and borders are 0.

    """
    def measure(self, element):
        lengths = {}
        style = element.get('style')
        if style:
            for declaration in tinycss2.parse_blocks_contents(
                    style, skip_comments=True, skip_whitespace=True):
                if declaration.type == 'error':
                    LOGGER.warning(
                        'Ignored style of <%s>, %s.',
                        element.tag, declaration.message)
                elif declaration.type == 'declaration':
                    self._expand(element, declaration, lengths)
        return Geometry(
            lengths.get('width', math.nan),
            lengths.get('padding_left', 0),
            lengths.get('padding_right', 0),
            lengths.get('border_width', 0))

    def _expand(self, element, declaration, lengths):
        name = declaration.lower_name
        tokens = [
            token for token in declaration.value
            if token.type not in ('whitespace', 'comment')]
        if name == 'border':
            # Other tokens are the style and the color.
            tokens = [
                token for token in tokens if get_length(token) is not None]
            if not tokens:
                return
        elif name not in (
                'width', 'padding', 'padding-left', 'padding-right',
                'border-width'):
            return

        values = [get_length(token) for token in tokens]
        if not values or None in values:
            value = tinycss2.serialize(declaration.value).strip()
            if not any(token.type == 'ident' for token in tokens):
                LOGGER.warning(
                    'Ignored `%s: %s` on <%s>, unsupported value.',
                    name, value, element.tag)
            if name == 'width':
                lengths['width'] = math.nan
            return

        if name == 'padding':
            if len(values) > 4:
                return
            right = values[1] if len(values) > 1 else values[0]
            left = values[3] if len(values) == 4 else right
            lengths['padding_left'], lengths['padding_right'] = left, right
        elif name in ('border', 'border-width'):
            lengths['border_width'] = values[0]
        else:
            lengths[name.replace('-', '_')] = values[0]


class Mapper:
    """Map model elements to their rendered elements."""
    def __init__(self):
        self._view_elements = {}

    def bind(self, model_element, view_element):
        self._view_elements[model_element] = view_element

    def unbind(self, model_element):
        self._view_elements.pop(model_element, None)

    def to_view_element(self, model_element):
        return self._view_elements.get(model_element)


class RenderingContext:
    """Rendered elements of a document and the way to measure them."""
    def __init__(self, mapper, geometry=None):
        self.mapper = mapper
        self.geometry = StyleGeometry() if geometry is None else geometry


def get_child_view_element(view_table, tag):
    """Return the child of ``view_table`` called ``tag``, or ``None``."""
    for child in view_table:
        if child.tag == tag:
            return child


def get_table_width_in_pixels(table, context):
    """Return the width in pixels of the rendered ``table``.

    The width is the width of its ``<tbody>`` element, or of its ``<thead>``
    element for tables without body. Return ``None`` if the table is not
    rendered.

    """
    view_table = context.mapper.to_view_element(table)
    if view_table is not None and view_table.tag != 'table':
        # Table in a wrapper like <figure>.
        view_table = get_child_view_element(view_table, 'table')
    if view_table is None:
        LOGGER.debug('No rendered element for %r.', table)
        return None

    reference_element = get_child_view_element(view_table, 'tbody')
    if reference_element is None:
        reference_element = get_child_view_element(view_table, 'thead')
    if reference_element is None:
        LOGGER.debug('No rendered row group for %r.', table)
        return None
    return get_element_width_in_pixels(reference_element, context.geometry)


def get_element_width_in_pixels(element, geometry):
    """Return the width in pixels of the rendered ``element``."""
    return float(geometry.measure(element).width)


def get_dom_cell_outer_width(cell, geometry):
    """Return the horizontal space in pixels taken by the rendered ``cell``.

    This space includes width, left and right paddings, and border width.

    """
    measure = geometry.measure(cell)
    return float(
        measure.width + measure.padding_left + measure.padding_right +
        measure.border_width)


def get_column_min_width_as_percentage(table, context):
    """Return the minimum column width of ``table`` as percentage.

    The minimum width is ``COLUMN_MIN_WIDTH_IN_PIXELS``, converted with the
    current width of the rendered table. Return ``None`` if the table is not
    rendered.

    """
    table_width = get_table_width_in_pixels(table, context)
    if not table_width:
        return None
    return COLUMN_MIN_WIDTH_IN_PIXELS * 100 / table_width

"""Test the pixel geometry of rendered tables."""

import math
from xml.etree import ElementTree

import pytest

from tableresize.geometry import (
    Geometry, Mapper, RenderingContext, StyleGeometry,
    get_column_min_width_as_percentage, get_dom_cell_outer_width,
    get_element_width_in_pixels, get_table_width_in_pixels)
from tableresize.html import HTMLTables
from tableresize.model import Element

from .testing_utils import FakeGeometry, assert_no_logs, capture_logs


def element(style=None, tag='td'):
    return ElementTree.Element(tag, {} if style is None else {'style': style})


@assert_no_logs
@pytest.mark.parametrize('style, geometry', (
    ('width: 100px', (100, 0, 0, 0)),
    ('width: 75pt; padding: 1px', (100, 1, 1, 0)),
    ('width: 1in; padding: 1px 2px', (96, 2, 2, 0)),
    ('width: 0; padding: 1px 2px 3px', (0, 2, 2, 0)),
    ('padding: 1px 2px 3px 4px; width: 10px', (10, 4, 2, 0)),
    ('padding-left: 3px; padding-right: 5px', (math.nan, 3, 5, 0)),
    ('padding: 1px; padding-left: 3px', (math.nan, 3, 1, 0)),
    ('border: 2px solid red', (math.nan, 0, 0, 2)),
    ('border: solid 1px; border-width: 3px 4px', (math.nan, 0, 0, 3)),
    ('border: none; color: red; width: auto', (math.nan, 0, 0, 0)),
    ('width: 10px; width: auto', (math.nan, 0, 0, 0)),
    ('/* comment */ width: 5px /* comment */', (5, 0, 0, 0)),
))
def test_style_geometry(style, geometry):
    measure = StyleGeometry().measure(element(style))
    for value, expected in zip(measure, geometry):
        if math.isnan(expected):
            assert math.isnan(value)
        else:
            assert value == pytest.approx(expected)


@assert_no_logs
def test_style_geometry_no_style():
    width, *others = StyleGeometry().measure(element())
    assert math.isnan(width)
    assert others == [0, 0, 0]


def test_style_geometry_unsupported_unit():
    with capture_logs() as logs:
        measure = StyleGeometry().measure(element('width: 3em; padding: 2px'))
    assert math.isnan(measure.width)
    assert measure.padding_left == 2
    message, = logs
    assert message == (
        'WARNING: Ignored `width: 3em` on <td>, unsupported value.')


def test_style_geometry_invalid_declaration():
    with capture_logs() as logs:
        measure = StyleGeometry().measure(element('width: 20px; 12px: red'))
    assert len(logs) == 1
    assert logs[0].startswith('WARNING: Ignored style of <td>')
    assert measure.width == 20


@assert_no_logs
def test_element_width():
    td = element('width: 42.5px')
    assert get_element_width_in_pixels(td, StyleGeometry()) == 42.5
    geometry = FakeGeometry({td: Geometry(12, 1, 1, 1)})
    assert get_element_width_in_pixels(td, geometry) == 12
    assert geometry.measured == [td]


@assert_no_logs
def test_cell_outer_width():
    td = element('width: 100px; padding: 2px 4px; border: 1px solid')
    assert get_dom_cell_outer_width(td, StyleGeometry()) == 109
    geometry = FakeGeometry({td: Geometry(50, 3, 5, 2)})
    assert get_dom_cell_outer_width(td, geometry) == 60


@assert_no_logs
def test_table_width():
    tables = HTMLTables(string='''
      <table><tbody style="width: 500px"><tr><td>a</td></tr></tbody></table>
    ''')
    table, = tables.tables
    context = tables.context()
    assert get_table_width_in_pixels(table, context) == 500
    assert get_column_min_width_as_percentage(table, context) == 8


@assert_no_logs
def test_table_width_head_only():
    tables = HTMLTables(string='''
      <table><thead style="width: 200px"><tr><th>a</th></tr></thead></table>
    ''')
    table, = tables.tables
    context = tables.context()
    assert get_table_width_in_pixels(table, context) == 200
    assert get_column_min_width_as_percentage(table, context) == 20


@assert_no_logs
def test_table_width_changes():
    tables = HTMLTables(string='''
      <table><tbody style="width: 400px"><tr><td>a</td></tr></tbody></table>
    ''')
    table, = tables.tables
    context = tables.context()
    assert get_column_min_width_as_percentage(table, context) == 10
    tables.mapper.to_view_element(table)[0].set('style', 'width: 800px')
    assert get_column_min_width_as_percentage(table, context) == 5


@assert_no_logs
def test_table_width_in_figure():
    figure = ElementTree.fromstring(
        '<figure><table><thead /><tbody /></table></figure>')
    thead, tbody = figure[0]
    table = Element('table')
    mapper = Mapper()
    mapper.bind(table, figure)
    geometry = FakeGeometry({
        thead: Geometry(100, 0, 0, 0), tbody: Geometry(300, 0, 0, 0)})
    context = RenderingContext(mapper, geometry)
    assert get_table_width_in_pixels(table, context) == 300
    assert get_column_min_width_as_percentage(table, context) == (
        pytest.approx(40 * 100 / 300))


def test_table_width_not_rendered():
    table = Element('table')
    context = RenderingContext(Mapper(), FakeGeometry())
    with capture_logs() as logs:
        assert get_table_width_in_pixels(table, context) is None
        assert get_column_min_width_as_percentage(table, context) is None
    assert logs == ['DEBUG: No rendered element for <Element table>.'] * 2


def test_table_width_without_row_group():
    mapper = Mapper()
    table = Element('table')
    mapper.bind(table, ElementTree.Element('table'))
    context = RenderingContext(mapper, FakeGeometry())
    with capture_logs() as logs:
        assert get_table_width_in_pixels(table, context) is None
    assert logs == ['DEBUG: No rendered row group for <Element table>.']


def test_mapper_unbind():
    table = Element('table')
    view_table = ElementTree.Element('table')
    mapper = Mapper()
    mapper.bind(table, view_table)
    assert mapper.to_view_element(table) is view_table
    mapper.unbind(table)
    mapper.unbind(table)
    assert mapper.to_view_element(table) is None


def test_zero_table_width():
    tables = HTMLTables(string='''
      <table><tbody style="width: 0"><tr><td>a</td></tr></tbody></table>
    ''')
    table, = tables.tables
    assert get_column_min_width_as_percentage(table, tables.context()) is None

"""Configuration for TableResize tests."""

import pytest

from tableresize.model import Document
from tableresize.structure import TableUtils


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def table_utils():
    return TableUtils()

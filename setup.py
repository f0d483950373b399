#!/usr/bin/env python

"""
    TableResize
    ===========

    TableResize keeps the column widths of editable tables normalized.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError(
        'TableResize does not support Python 2.x. '
        'Please use Python 3.')

setup()

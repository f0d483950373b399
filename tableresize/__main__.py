"""Command-line interface to TableResize."""

import argparse
import logging
import sys

from . import DEFAULT_OPTIONS, LOGGER, __version__
from .logger import FORMAT
from .html import HTMLTables

PARSER = argparse.ArgumentParser(
    prog='tableresize', description='Normalize column widths of HTML tables.')
PARSER.add_argument(
    'input', help='filename of the HTML input, or - for stdin')
PARSER.add_argument(
    'output', help='filename where output is written, or - for stdout')
PARSER.add_argument(
    '-e', '--encoding', help='force the input character encoding')
PARSER.add_argument(
    '-a', '--all', action='store_true', dest='all_tables',
    help='give column widths to tables without column widths')
PARSER.add_argument(
    '-r', '--resizers', action='store_true',
    help='add resize handles to table cells')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show warnings and information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'TableResize version {__version__}',
    help='print TableResize’s version number and exit')
PARSER.set_defaults(**DEFAULT_OPTIONS)


def main(argv=None, stdout=None, stdin=None, HTMLTables=HTMLTables):  # noqa: N803
    """The ``tableresize`` program takes two arguments:

    .. code-block:: sh

        tableresize [options] <input> <output>

    """
    args = PARSER.parse_args(argv)

    # Default to logging to stderr.
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)
    elif args.verbose:
        LOGGER.setLevel(logging.INFO)
    if not args.quiet:
        handler = logging.StreamHandler()
        if args.debug:
            # Add extra information when debug logging
            handler.setFormatter(
                logging.Formatter(
                    '%(levelname)s: %(filename)s:%(lineno)d '
                    '(%(funcName)s): %(message)s'))
        else:
            handler.setFormatter(logging.Formatter(FORMAT))
        LOGGER.addHandler(handler)

    try:
        if args.input == '-':
            tables = HTMLTables(
                file_obj=stdin or sys.stdin.buffer, encoding=args.encoding)
        else:
            tables = HTMLTables(filename=args.input, encoding=args.encoding)

        if args.all_tables:
            tables.initialize_column_widths()
        tables.normalize()
        if args.resizers:
            tables.insert_resizers()
        output = tables.serialize().encode()
    finally:
        if not args.quiet:
            LOGGER.removeHandler(handler)

    if args.output == '-':
        (stdout or sys.stdout.buffer).write(output)
    else:
        with open(args.output, 'wb') as fd:
            fd.write(output)


if __name__ == '__main__':  # pragma: no cover
    main()

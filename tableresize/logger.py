"""Logging setup.

Nothing in TableResize raises for unusable widths or missing renderings:
these cases are logged and replaced by fallback values.

- warnings are used in ``LOGGER`` for column widths and CSS declarations
  that are ignored;
- debug messages are used in ``LOGGER`` when a model element has no
  rendered counterpart and no width can be measured;
- infos are used in ``PROGRESS_LOGGER`` to advertise processing steps.

"""

import contextlib
import logging

LOGGER = logging.getLogger('tableresize')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())

PROGRESS_LOGGER = logging.getLogger('tableresize.progress')

FORMAT = '%(levelname)s: %(message)s'


class MessagesHandler(logging.Handler):
    """A logging handler keeping formatted messages, progress excepted."""
    def __init__(self, level=logging.NOTSET):
        super().__init__(level)
        self.messages = []
        self.setFormatter(logging.Formatter(FORMAT))
        self.addFilter(
            lambda record: not record.name.startswith(PROGRESS_LOGGER.name))

    def emit(self, record):
        self.messages.append(self.format(record))


@contextlib.contextmanager
def capture_logs(level=logging.DEBUG):
    """Capture the messages of ``LOGGER`` logged at ``level`` or higher.

    The context manager returns the list of captured messages.

    """
    handler = MessagesHandler(level)
    previous_handlers, previous_level = LOGGER.handlers, LOGGER.level
    LOGGER.handlers = [handler]
    LOGGER.setLevel(logging.DEBUG)
    try:
        yield handler.messages
    finally:
        LOGGER.handlers = previous_handlers
        LOGGER.setLevel(previous_level)

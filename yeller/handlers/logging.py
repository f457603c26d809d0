"""
yeller.handlers.logging
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from __future__ import absolute_import
from __future__ import print_function

import logging
import sys
import threading
import traceback

from yeller.base import Client
from yeller.utils.stacks import capture_stack

# Attributes every LogRecord carries; anything else was passed via ``extra``
RESERVED = frozenset((
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName',
    'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'message', 'asctime', 'taskName',
))


class YellerHandler(logging.Handler, object):
    """
    Sends log records to Yeller. The exception attached to a record
    (``logger.exception(...)``) is reported when there is one, otherwise
    the formatted message.

    >>> handler = YellerHandler(client)
    >>> logging.getLogger().addHandler(handler)
    """

    def __init__(self, client=None, level=logging.ERROR, **kwargs):
        if client is None:
            client = Client(**kwargs)
        elif not isinstance(client, Client):
            raise ValueError(
                'The first argument to %s must be a Client instance, got %r instead.' % (
                    self.__class__.__name__,
                    client,
                ))
        self.client = client
        # set while this thread is inside _emit
        self._local = threading.local()

        logging.Handler.__init__(self, level=level)

    def can_record(self, record):
        return not record.name.startswith('yeller')

    def emit(self, record):
        try:
            self.format(record)

            # Avoid typical config issues by overriding loggers behavior
            if not self.can_record(record):
                print(record.getMessage(), file=sys.stderr)
                return

            # records logged while sending one (urllib3 warnings, say) are
            # not sent themselves
            if getattr(self._local, 'emitting', False):
                print(record.getMessage(), file=sys.stderr)
                return

            self._local.emitting = True
            try:
                return self._emit(record)
            finally:
                self._local.emitting = False
        except Exception:
            print("Top level Yeller exception caught - failed creating log record", file=sys.stderr)
            print(record.msg, file=sys.stderr)
            print(traceback.format_exc(), file=sys.stderr)

    def get_custom_data(self, record):
        custom_data = {
            'logger': record.name,
            'level': record.levelname,
        }
        for k, v in vars(record).items():
            if k in RESERVED or k.startswith('_'):
                continue
            custom_data[k] = v
        return custom_data

    def _emit(self, record):
        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
        else:
            error = record.getMessage()

        stack = capture_stack(skip_modules=('logging',),
                              max_depth=self.client.max_stack_depth)

        return self.client.notify(
            error, custom_data=self.get_custom_data(record), stack=stack)

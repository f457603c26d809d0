"""
yeller.errors
~~~~~~~~~~~~~

Error handlers are told about notifications that could not be delivered.
Their return value is ignored by the client.

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import sys

__all__ = ('ErrorHandler', 'LogErrorHandler', 'SilentErrorHandler',
           'stderr_error_handler')


class ErrorHandler(object):
    """
    All error handlers need to subclass this class and implement both
    callbacks.
    """

    def handle_io_error(self, error):
        """
        Called with the last :class:`~yeller.exceptions.TransportError`
        once every collector failed.
        """
        raise NotImplementedError

    def handle_auth_error(self, error):
        """
        Called with an :class:`~yeller.exceptions.AuthError` when a
        collector rejects the API key.
        """
        raise NotImplementedError


class LogErrorHandler(ErrorHandler):
    """
    Writes delivery failures to ``logger`` (``yeller.errors`` by default).
    """

    def __init__(self, logger=None):
        if logger is None:
            logger = logging.getLogger('yeller.errors')
        self.logger = logger

    def handle_io_error(self, error):
        self.logger.error('Unable to reach any Yeller collector: %s', error)

    def handle_auth_error(self, error):
        self.logger.error('%s', error)


class SilentErrorHandler(ErrorHandler):
    "Drops delivery failures into an empty void"

    def handle_io_error(self, error):
        return None

    def handle_auth_error(self, error):
        return None


def stderr_error_handler():
    """
    Returns a :class:`LogErrorHandler` printing to ``sys.stderr``.
    """
    logger = logging.getLogger('yeller.stderr')
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('yeller %(asctime)s %(message)s'))
        logger.addHandler(handler)
        logger.propagate = False
    return LogErrorHandler(logger)

"""
yeller.conf
~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import os

__all__ = ('load', 'setup_logging')

EXCLUDE_LOGGER_DEFAULTS = (
    'yeller',
    'yeller.errors',
)


def load(environ=None):
    """
    Reads client options from ``YELLER_API_KEY``, ``YELLER_ENVIRONMENT``
    and ``YELLER_HOSTNAMES`` (comma separated). Unset variables are left
    out of the result.

    >>> import yeller

    >>> options = yeller.load()
    >>> client = yeller.Client(**options)
    """
    if environ is None:
        environ = os.environ

    options = {}
    if environ.get('YELLER_API_KEY'):
        options['api_key'] = environ['YELLER_API_KEY']
    if environ.get('YELLER_ENVIRONMENT'):
        options['environment'] = environ['YELLER_ENVIRONMENT']
    if environ.get('YELLER_HOSTNAMES'):
        hostnames = [h.strip() for h in environ['YELLER_HOSTNAMES'].split(',')]
        options['hostnames'] = [h for h in hostnames if h]
    return options


def setup_logging(handler, exclude=EXCLUDE_LOGGER_DEFAULTS):
    """
    Configures logging to pipe to Yeller.

    - ``exclude`` is a list of loggers that shouldn't go to Yeller.

    >>> from yeller.handlers.logging import YellerHandler
    >>> client = Client(...)
    >>> setup_logging(YellerHandler(client))

    Returns a boolean based on if logging was configured or not.
    """
    logger = logging.getLogger()
    if handler.__class__ in map(type, logger.handlers):
        return False

    logger.addHandler(handler)

    # Add StreamHandler to yeller's default so you can catch missed exceptions
    for logger_name in exclude:
        logger = logging.getLogger(logger_name)
        logger.propagate = False
        if not logger.handlers:
            logger.addHandler(logging.StreamHandler())

    return True

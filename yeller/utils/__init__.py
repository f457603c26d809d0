"""
yeller.utils
~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import logging
import socket

logger = logging.getLogger('yeller.errors')


def get_hostname():
    """
    Returns the local hostname, or an empty string when it cannot be
    resolved.
    """
    try:
        return socket.gethostname()
    except OSError:
        logger.debug('Unable to resolve the local hostname', exc_info=True)
        return ''


def to_message(error):
    """
    Turns whatever was handed to ``notify`` into the notification message.

    >>> to_message(ValueError('bad input'))
    'bad input'
    >>> to_message('something broke')
    'something broke'
    """
    if isinstance(error, BaseException):
        return str(error) or error.__class__.__name__
    if isinstance(error, str):
        return error
    return str(error)

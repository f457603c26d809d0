"""
yeller.transport.base
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from yeller.conf import defaults
from yeller.exceptions import AuthError, TransportError


class Transport(object):
    """
    All transport implementations need to subclass this class

    You must implement a send method which delivers ``data`` to ``url`` or
    raises :class:`~yeller.exceptions.TransportError` (and
    :class:`~yeller.exceptions.AuthError` on a 401). Please see
    RequestsHTTPTransport for an example.
    """

    def __init__(self, timeout=defaults.TIMEOUT,
                 read_timeout=defaults.READ_TIMEOUT):
        if isinstance(timeout, str):
            timeout = float(timeout)
        if isinstance(read_timeout, str):
            read_timeout = float(read_timeout)

        self.timeout = timeout
        self.read_timeout = read_timeout

    def send(self, url, data, headers):
        """
        You need to override this to do something with the actual
        data. Usually - this is sending to a collector
        """
        raise NotImplementedError

    def check_response(self, status_code, reason=''):
        """
        Turns an HTTP status into success (2xx), an ``AuthError`` (401) or
        a ``TransportError`` (anything else).
        """
        if status_code == 401:
            raise AuthError()
        if status_code < 200 or status_code > 299:
            raise TransportError(
                'Received a non 200 HTTP Code: %s %s' % (status_code, reason or ''),
                code=status_code)

    def close(self):
        pass

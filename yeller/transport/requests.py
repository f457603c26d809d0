"""
yeller.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import requests

from yeller.conf import defaults
from yeller.exceptions import TransportError
from yeller.transport.base import Transport


class RequestsHTTPTransport(Transport):
    """
    Posts notifications with a single ``requests.Session``, so connections
    to the collectors are pooled between calls.
    """

    def __init__(self, timeout=defaults.TIMEOUT,
                 read_timeout=defaults.READ_TIMEOUT):
        super(RequestsHTTPTransport, self).__init__(
            timeout=timeout, read_timeout=read_timeout)
        self.session = requests.Session()

    def send(self, url, data, headers):
        try:
            response = self.session.post(
                url, data=data, headers=headers,
                timeout=(self.timeout, self.read_timeout))
        except requests.RequestException as e:
            raise TransportError('Unable to reach %s: %s' % (url, e))

        self.check_response(response.status_code, response.reason)
        return response

    def close(self):
        self.session.close()

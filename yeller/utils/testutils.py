"""
yeller.utils.testutils
~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from unittest import TestCase as BaseTestCase

import yeller
from yeller.exceptions import TransportError
from yeller.transport.base import Transport


class TestCase(BaseTestCase):
    pass


class InMemoryClient(yeller.Client):
    """
    Keeps the decoded notifications in ``events`` instead of sending them.
    """
    def __init__(self, api_key='test-api-key', **kwargs):
        self.events = []
        super(InMemoryClient, self).__init__(api_key, **kwargs)

    def send_encoded(self, message, cancel=None):
        self.events.append(self.decode(message))


class RecordingTransport(Transport):
    """
    Records the URLs it is asked to post to. ``responses`` maps a hostname
    to the exception raised for it; hosts not listed succeed.
    """
    def __init__(self, responses=None, **kwargs):
        super(RecordingTransport, self).__init__(**kwargs)
        self.responses = responses or {}
        self.calls = []

    def send(self, url, data, headers):
        self.calls.append((url, data, headers))
        hostname = url.split('://', 1)[-1].split('/', 1)[0]
        error = self.responses.get(hostname)
        if error is None:
            return
        if isinstance(error, int):
            self.check_response(error)
        if isinstance(error, Exception):
            raise error

    @property
    def hostnames(self):
        return [url.split('://', 1)[-1].split('/', 1)[0] for url, _, _ in self.calls]


class FailingTransport(RecordingTransport):
    "Fails every attempt with a connection error"
    def send(self, url, data, headers):
        super(FailingTransport, self).send(url, data, headers)
        raise TransportError('Unable to reach %s: connection refused' % (url,))

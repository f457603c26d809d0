"""
yeller.transport
~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from yeller.transport.base import Transport  # NOQA
from yeller.transport.requests import RequestsHTTPTransport  # NOQA

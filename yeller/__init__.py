"""
yeller
~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'start', 'notify', 'get_client', 'load')

VERSION = '0.1.0'

from yeller.base import *  # NOQA
from yeller.conf import *  # NOQA

"""
yeller.conf.defaults
~~~~~~~~~~~~~~~~~~~~

Represents the default values for all Yeller settings.

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import os
import os.path

# The package directory. Frames from files below it never show up in a
# reported stacktrace.
ROOT = os.path.normpath(os.path.join(os.path.dirname(__file__), os.pardir))

# Collectors used when no hostnames are configured
HOSTNAMES = (
    'collector1.yellerapp.com',
    'collector2.yellerapp.com',
    'collector3.yellerapp.com',
    'collector4.yellerapp.com',
    'collector5.yellerapp.com',
)

ENVIRONMENT = 'production'

SCHEME = 'http'

# Seconds to wait for a connection before moving on to the next collector
TIMEOUT = 1

# Seconds to wait for the collector's response once connected
READ_TIMEOUT = 10

# The maximum number of frames walked when capturing a stacktrace.
MAX_STACK_DEPTH = 256

# Placeholder for a function name the interpreter cannot resolve
UNKNOWN_FUNCTION = '???'

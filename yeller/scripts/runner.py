"""
yeller.scripts.runner
~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from __future__ import absolute_import
from __future__ import print_function

import logging
import os
import sys
from optparse import OptionParser

from yeller import Client
from yeller.errors import stderr_error_handler
from yeller.utils import json


def store_json(option, opt_str, value, parser):
    try:
        value = json.loads(value)
    except ValueError:
        print("Invalid JSON was used for option %s.  Received: %s" % (opt_str, value))
        sys.exit(1)
    setattr(parser.values, option.dest, value)


def get_loadavg():
    if hasattr(os, 'getloadavg'):
        return os.getloadavg()
    return None


def get_uid():
    try:
        import pwd
    except ImportError:
        return None
    return pwd.getpwuid(os.geteuid())[0]


def send_test_message(client, options):
    print("Client configuration:")
    for k in ('api_key', 'environment', 'hostnames', 'version'):
        print('  %-15s: %s' % (k, getattr(client, k)))
    print()

    if not client.is_enabled():
        print('Error: Client reports as being disabled!')
        return False

    custom_data = options.get('data') or {}
    custom_data.setdefault('user', get_uid())
    custom_data.setdefault('loadavg', get_loadavg())

    print('Sending a test notification...')

    error = client.notify(
        'This is a test notification generated using ``yeller test``',
        custom_data=custom_data,
        location='yeller.scripts.runner',
    )

    if error is not None:
        print('error! %s' % (error,))
        return False

    print('success!')
    return True


def main(argv=None):
    root = logging.getLogger('yeller.errors')
    root.setLevel(logging.DEBUG)

    parser = OptionParser(usage='%prog test [API_KEY] [options]')
    parser.add_option("--environment", dest="environment", default=None)
    parser.add_option("--data", action="callback", callback=store_json,
        type="string", nargs=1, dest="data")
    (opts, args) = parser.parse_args(argv)

    if not args or args[0] != 'test':
        parser.print_usage()
        sys.exit(1)

    api_key = ' '.join(args[1:]) or os.environ.get('YELLER_API_KEY')
    if not api_key:
        print("Error: No configuration detected!")
        print("You must either pass an API key to the command, or set the YELLER_API_KEY environment variable.")
        sys.exit(1)

    client = Client(api_key, opts.environment,
                    error_handler=stderr_error_handler())
    if not send_test_message(client, opts.__dict__):
        sys.exit(1)

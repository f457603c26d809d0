"""
yeller.events
~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

from yeller.conf import defaults
from yeller.utils import get_hostname, to_message
from yeller.utils.stacks import StackFrame, capture_stack  # NOQA

__all__ = ('ErrorNotification', 'StackFrame', 'build_notification')


class ErrorNotification(object):
    """
    An error event as it is sent to the collectors.

    ``custom_data`` belongs to the caller and is sent as is; it is never
    copied or modified here.
    """
    type = 'error'

    def __init__(self, message, stacktrace, host, environment,
                 client_version, custom_data=None, url=None, location=None):
        self.message = message
        self.stacktrace = list(stacktrace)
        self.host = host
        self.environment = environment
        self.client_version = client_version
        if custom_data is None:
            custom_data = {}
        self.custom_data = custom_data
        self.url = url
        self.location = location

    def __repr__(self):
        return '<%s: %r>' % (self.__class__.__name__, self.message)

    def to_dict(self):
        return {
            'type': self.type,
            'message': self.message,
            'stacktrace': self.stacktrace,
            'url': self.url or '',
            'host': self.host,
            'application-environment': self.environment,
            'custom-data': self.custom_data,
            'location': self.location or '',
            'client-version': self.client_version,
        }


def build_notification(error, environment, version, custom_data=None,
                       url=None, location=None, stack=None,
                       max_depth=defaults.MAX_STACK_DEPTH):
    """
    Builds an :class:`ErrorNotification` for ``error``.

    ``error`` may be an exception, a string or any other object. Unless
    ``stack`` is given, the stack of the caller is captured (frames from
    this library are left out). The hostname is looked up on every call.

    >>> notification = build_notification(
    >>>     ValueError('bad input'), 'production', 'yeller-python: 0.1.0',
    >>>     {'user_id': 42})
    """
    if stack is None:
        stack = capture_stack(skip_frames=1, max_depth=max_depth)

    return ErrorNotification(
        message=to_message(error),
        stacktrace=stack,
        host=get_hostname(),
        environment=environment,
        client_version=version,
        custom_data=custom_data,
        url=url,
        location=location,
    )

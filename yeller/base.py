"""
yeller.base
~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from __future__ import absolute_import

import contextlib
import logging
import random
import threading

from urllib.parse import quote as urllib_quote

import yeller
from yeller.conf import defaults, load
from yeller.errors import LogErrorHandler
from yeller.events import build_notification
from yeller.exceptions import (
    AuthError, NotifyCancelled, SerializationError, TransportError)
from yeller.transport.base import Transport
from yeller.transport.requests import RequestsHTTPTransport
from yeller.utils import json
from yeller.utils.stacks import capture_stack

__all__ = ('Client', 'start', 'notify', 'get_client')

CLIENT_VERSION = 'yeller-python: %s' % (yeller.VERSION,)

# process-wide client, see ``start``
Yeller = None


class Client(object):
    """
    Sends error notifications to Yeller, trying each collector in turn
    until one accepts the notification.

    Will read default configuration from the environment variables
    ``YELLER_API_KEY``, ``YELLER_ENVIRONMENT`` and ``YELLER_HOSTNAMES`` if
    available.

    >>> from yeller import Client

    >>> client = Client('my-api-key', 'production')

    >>> # Report an exception
    >>> try:
    >>>     1/0
    >>> except ZeroDivisionError as e:
    >>>     client.notify(e, custom_data={'user_id': 42})

    The collector that the last attempt ended on is remembered between
    calls. A client may be shared between threads: reads and writes of the
    cursor are guarded by a lock, which is never held during a request, and
    the transport's connection pool is thread safe.

    ``transport`` may be a :class:`~yeller.transport.base.Transport` subclass
    (built with the ``timeout`` and ``read_timeout`` options) or an instance.
    """
    logger = logging.getLogger('yeller')

    def __init__(self, api_key=None, environment=None, error_handler=None,
                 hostnames=None, **options):
        o = options

        self.configure_logging()

        cls = self.__class__
        self.logger = logging.getLogger(
            '%s.%s' % (cls.__module__, cls.__name__))
        self.error_logger = logging.getLogger('yeller.errors')

        env_config = load()
        if api_key is None and env_config.get('api_key'):
            self.logger.debug(
                "Configuring Yeller from environment variable 'YELLER_API_KEY'")
            api_key = env_config['api_key']
        if environment is None:
            environment = env_config.get('environment', defaults.ENVIRONMENT)
        if hostnames is None:
            hostnames = env_config.get('hostnames') or defaults.HOSTNAMES

        if isinstance(hostnames, str):
            hostnames = [hostnames]
        hostnames = tuple(hostnames)
        if not hostnames:
            raise ValueError('At least one collector hostname is required')

        self.api_key = api_key
        self.environment = environment
        self.version = CLIENT_VERSION
        self.hostnames = hostnames
        self.scheme = o.get('scheme') or defaults.SCHEME
        self.max_stack_depth = int(
            o.get('max_stack_depth') or defaults.MAX_STACK_DEPTH)
        self.propagate_auth_errors = bool(o.get('propagate_auth_errors', False))

        if error_handler is None:
            error_handler = LogErrorHandler(self.error_logger)
        self.error_handler = error_handler

        transport = o.get('transport') or RequestsHTTPTransport
        if not isinstance(transport, Transport):
            transport = transport(
                timeout=o.get('timeout', defaults.TIMEOUT),
                read_timeout=o.get('read_timeout', defaults.READ_TIMEOUT),
            )
        self.transport = transport

        self._lock = threading.Lock()
        # A locally scoped random source, so the global one is left alone
        self._host_index = random.Random().randrange(len(self.hostnames))

        if not self.is_enabled():
            self.logger.info(
                'Yeller is not configured (no API key was given). '
                'Notifications will be dropped.')

    def configure_logging(self):
        # yeller.errors and the client loggers propagate here
        logger = logging.getLogger('yeller')
        if logger.handlers:
            return
        logger.addHandler(logging.StreamHandler())
        logger.setLevel(logging.INFO)

    def is_enabled(self):
        """
        Return a boolean describing whether the client should attempt to send
        notifications.
        """
        return bool(self.api_key)

    @property
    def hostname(self):
        "The collector the next attempt goes to."
        with self._lock:
            return self.hostnames[self._host_index]

    def get_url(self, hostname):
        return '%s://%s/%s' % (
            self.scheme, hostname, urllib_quote(self.api_key, safe=''))

    def build_notification(self, error, custom_data=None, url=None,
                           location=None, stack=None):
        return build_notification(
            error, self.environment, self.version, custom_data=custom_data,
            url=url, location=location, stack=stack,
            max_depth=self.max_stack_depth)

    def notify(self, error, custom_data=None, url=None, location=None,
               cancel=None, stack=None):
        """
        Reports ``error`` (an exception, a message or any other value) to
        Yeller.

        >>> client.notify(exc, custom_data={'order': order.id})

        Returns ``None`` once a collector accepted the notification (or the
        client is disabled). Otherwise the exception describing the failure
        is returned, not raised. A ``SerializationError`` is raised when
        ``custom_data`` cannot be encoded.

        :param custom_data: a JSON serializable dict sent as ``custom-data``
        :param url: the URL being served when the error happened
        :param location: a free form description of where it happened
        :param cancel: a ``threading.Event``; once set no further attempt
                       is started
        :param stack: a list of :class:`~yeller.events.StackFrame` to send
                      instead of the captured stack
        """
        if not self.is_enabled():
            return None

        notification = self.build_notification(
            error, custom_data=custom_data, url=url, location=location,
            stack=stack)

        return self.send(notification, cancel=cancel)

    @contextlib.contextmanager
    def notify_exceptions(self, custom_data=None, **kwargs):
        """
        Reports any exception raised in the block and re-raises it.

        >>> with client.notify_exceptions({'job': job.id}):
        >>>     job.run()
        """
        try:
            yield self
        except Exception as e:
            # start the trace at the with block, not in contextlib
            stack = capture_stack(skip_modules=('contextlib',),
                                  max_depth=self.max_stack_depth)
            self.notify(e, custom_data=custom_data, stack=stack, **kwargs)
            raise

    def send(self, notification, cancel=None):
        """
        Serializes the notification and passes the payload onto
        ``send_encoded``.
        """
        message = self.encode(notification)

        return self.send_encoded(message, cancel=cancel)

    def encode(self, notification):
        """
        Serializes ``notification`` into bytes.
        """
        if hasattr(notification, 'to_dict'):
            notification = notification.to_dict()
        try:
            return json.dumps(notification).encode('utf8')
        except (TypeError, ValueError) as e:
            raise SerializationError('Unable to encode notification: %s' % (e,))

    def decode(self, data):
        """
        Unserializes ``data``.
        """
        return json.loads(data.decode('utf8'))

    def send_encoded(self, message, cancel=None):
        """
        Given an already serialized notification, tries the collectors one
        after another, starting with the current one, until one accepts it.

        Every collector is tried at most once. A 401 stops the loop at
        once since all collectors share the API key.
        """
        headers = {
            'User-Agent': self.version,
            'Content-Type': 'application/json',
        }

        error = self._try_hostnames(message, headers, cancel)

        if isinstance(error, AuthError):
            self._handle_auth_error(error)
            if not self.propagate_auth_errors:
                return None
        elif isinstance(error, TransportError):
            self._handle_io_error(error)
        return error

    def _try_hostnames(self, message, headers, cancel):
        # The lock only guards the cursor; requests go out without it, so a
        # notify issued while one is in flight (from another thread, or from
        # a log handler on this one) is never blocked.
        with self._lock:
            start = self._host_index

        error = None
        count = len(self.hostnames)
        for offset in range(count):
            if cancel is not None and cancel.is_set():
                return NotifyCancelled('Notification cancelled')

            index = (start + offset) % count
            hostname = self.hostnames[index]
            self.logger.debug(
                'Sending notification of length %d to %s',
                len(message), hostname)
            try:
                self.transport.send(self.get_url(hostname), message, headers)
            except AuthError as e:
                self._set_host_index(index)
                return e
            except TransportError as e:
                self.logger.debug('Delivery to %s failed: %s', hostname, e)
                error = e
                self._set_host_index((index + 1) % count)
            else:
                self._set_host_index(index)
                return None
        return error

    def _set_host_index(self, index):
        with self._lock:
            self._host_index = index

    def _handle_io_error(self, error):
        try:
            self.error_handler.handle_io_error(error)
        except Exception:
            self.error_logger.error(
                'Error handler failed handling %r', error, exc_info=True)

    def _handle_auth_error(self, error):
        try:
            self.error_handler.handle_auth_error(error)
        except Exception:
            self.error_logger.error(
                'Error handler failed handling %r', error, exc_info=True)

    def close(self):
        """
        Releases the transport's connections.
        """
        self.transport.close()


def start(api_key, environment=defaults.ENVIRONMENT, **options):
    """
    Creates the process-wide client used by :func:`notify`.

    >>> import yeller
    >>> yeller.start('my-api-key', 'staging')
    """
    global Yeller

    Yeller = Client(api_key, environment, **options)
    return Yeller


def get_client():
    return Yeller


def notify(error, custom_data=None, **kwargs):
    """
    Reports ``error`` through the client created by :func:`start`.
    """
    if Yeller is None:
        raise RuntimeError('yeller.start() must be called before yeller.notify()')
    return Yeller.notify(error, custom_data=custom_data, **kwargs)

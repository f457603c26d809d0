"""
yeller.exceptions
~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""


class YellerError(Exception):
    def __init__(self, message, code=0):
        super(YellerError, self).__init__(message)
        self.code = code
        self.message = message

    def __str__(self):
        if self.code:
            return "%s: %s" % (self.message, self.code)
        return self.message


class SerializationError(YellerError):
    """
    Raised when a notification cannot be encoded. Nothing has been sent
    and no error handler is invoked.
    """


class TransportError(YellerError):
    """
    A single delivery attempt failed: the collector could not be reached,
    timed out, or answered with a non 2xx status other than 401.
    """


class AuthError(YellerError):
    """
    The collector rejected the API key.
    """

    def __init__(self, message=None, code=401):
        if message is None:
            message = ('Could not authenticate yeller client. Check your API '
                       'key and that your subscription is active')
        super(AuthError, self).__init__(message, code=code)


class NotifyCancelled(YellerError):
    """
    The caller's cancel signal was set before the next attempt started.
    """

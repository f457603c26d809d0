"""
yeller.utils.json
~~~~~~~~~~~~~~~~~

:copyright: (c) 2014 by the Yeller Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from __future__ import absolute_import

import datetime
import decimal
import uuid
import json


def _encode_datetime(o):
    # naive values are taken to be UTC already
    if o.tzinfo is not None and o.utcoffset() is not None:
        o = o.astimezone(datetime.timezone.utc)
    return o.strftime('%Y-%m-%dT%H:%M:%SZ')


class BetterJSONEncoder(json.JSONEncoder):
    """
    Encodes the handful of common non-JSON types callers put into
    ``custom-data``. Anything else is a ``TypeError``; values are never
    silently replaced by their ``repr``.
    """
    # checked in order with isinstance; datetime must come before date
    ENCODER_BY_TYPE = (
        (uuid.UUID, lambda o: o.hex),
        (datetime.datetime, _encode_datetime),
        (datetime.date, lambda o: o.isoformat()),
        (decimal.Decimal, str),
        (set, list),
        (frozenset, list),
        (bytes, lambda o: o.decode('utf-8', errors='replace')),
    )

    def default(self, obj):
        for type_, encoder in self.ENCODER_BY_TYPE:
            if isinstance(obj, type_):
                return encoder(obj)
        return super(BetterJSONEncoder, self).default(obj)


def dumps(value, **kwargs):
    # NaN and Infinity are not JSON; refuse them instead of sending them
    kwargs.setdefault('allow_nan', False)
    return json.dumps(value, cls=BetterJSONEncoder, **kwargs)


def loads(value, **kwargs):
    return json.loads(value, **kwargs)

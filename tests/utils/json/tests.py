# -*- coding: utf-8 -*-

import datetime
import uuid
from decimal import Decimal

import pytest

from yeller.utils import json
from yeller.utils.testutils import TestCase


class JSONTest(TestCase):
    def test_uuid(self):
        res = uuid.uuid4()
        assert json.dumps(res) == '"%s"' % res.hex

    def test_datetime(self):
        res = datetime.datetime(day=1, month=1, year=2011, hour=1, minute=1, second=1)
        assert json.dumps(res) == '"2011-01-01T01:01:01Z"'

    def test_date(self):
        assert json.dumps(datetime.date(2014, 3, 2)) == '"2014-03-02"'

    def test_set(self):
        res = set(['foo', 'bar'])
        assert json.dumps(res) in ('["foo", "bar"]', '["bar", "foo"]')

    def test_frozenset(self):
        res = frozenset(['foo', 'bar'])
        assert json.dumps(res) in ('["foo", "bar"]', '["bar", "foo"]')

    def test_bytes(self):
        assert json.dumps(b'caf\xc3\xa9') == '"caf\\u00e9"'

    def test_decimal(self):
        d = {'decimal': Decimal('123.45')}
        assert json.dumps(d) == '{"decimal": "123.45"}'

    def test_unknown_type(self):

        class Unknown(object):
            def __repr__(self):
                return 'Unknown object'

        with pytest.raises(TypeError):
            json.dumps(Unknown())

    def test_non_string_keys(self):
        with pytest.raises(TypeError):
            json.dumps({(1, 2): 'tuple_key'})

    def test_loads(self):
        assert json.loads('{"custom-data": {}}') == {'custom-data': {}}

    def test_aware_datetime_is_converted_to_utc(self):
        tz = datetime.timezone(datetime.timedelta(hours=2))
        res = datetime.datetime(2011, 1, 1, 1, 1, 1, tzinfo=tz)
        assert json.dumps(res) == '"2010-12-31T23:01:01Z"'

    def test_datetime_subclass(self):

        class Timestamp(datetime.datetime):
            pass

        res = Timestamp(2011, 1, 1, 1, 1, 1)
        assert json.dumps(res) == '"2011-01-01T01:01:01Z"'

    def test_date_subclass(self):

        class Day(datetime.date):
            pass

        assert json.dumps(Day(2014, 3, 2)) == '"2014-03-02"'

    def test_nan_is_refused(self):
        with pytest.raises(ValueError):
            json.dumps({'ratio': float('nan')})

    def test_infinity_is_refused(self):
        for value in (float('inf'), float('-inf')):
            with pytest.raises(ValueError):
                json.dumps([value])

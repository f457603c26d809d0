# -*- coding: utf-8 -*-
from __future__ import absolute_import

import mock

from yeller.utils import get_hostname, to_message
from yeller.utils.testutils import TestCase


class ToMessageTest(TestCase):
    def test_exception(self):
        assert to_message(ValueError('bad input')) == 'bad input'

    def test_exception_without_args(self):
        assert to_message(ZeroDivisionError()) == 'ZeroDivisionError'

    def test_string(self):
        assert to_message('something broke') == 'something broke'

    def test_other(self):
        assert to_message(['a', 1]) == "['a', 1]"
        assert to_message(None) == 'None'


class GetHostnameTest(TestCase):
    @mock.patch('yeller.utils.socket.gethostname')
    def test_hostname(self, gethostname):
        gethostname.return_value = 'web-1'
        assert get_hostname() == 'web-1'

    @mock.patch('yeller.utils.socket.gethostname')
    def test_failure(self, gethostname):
        gethostname.side_effect = OSError('nope')
        assert get_hostname() == ''

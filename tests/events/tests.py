# -*- coding: utf-8 -*-
from __future__ import absolute_import

import mock

from yeller.events import ErrorNotification, StackFrame, build_notification
from yeller.utils import json
from yeller.utils.testutils import TestCase

VERSION = 'yeller-python: 0.1.0'


class ErrorNotificationTest(TestCase):
    def make(self, **kwargs):
        params = dict(
            message='boom',
            stacktrace=[StackFrame('/srv/app/views.py', '12', 'app.views.index')],
            host='web-1',
            environment='production',
            client_version=VERSION,
        )
        params.update(kwargs)
        return ErrorNotification(**params)

    def test_wire_shape(self):
        payload = json.loads(json.dumps(self.make().to_dict()))
        assert payload == {
            'type': 'error',
            'message': 'boom',
            'stacktrace': [['/srv/app/views.py', '12', 'app.views.index']],
            'url': '',
            'host': 'web-1',
            'application-environment': 'production',
            'custom-data': {},
            'location': '',
            'client-version': VERSION,
        }

    def test_stack_frame_is_an_array(self):
        frame = StackFrame('/srv/app/views.py', '12', 'app.views.index')
        assert json.dumps(frame) == '["/srv/app/views.py", "12", "app.views.index"]'

    def test_custom_data_defaults_to_empty_mapping(self):
        encoded = json.dumps(self.make(custom_data=None).to_dict())
        assert '"custom-data": {}' in encoded

    def test_custom_data_is_not_copied(self):
        custom_data = {'user_id': 1}
        notification = self.make(custom_data=custom_data)
        assert notification.to_dict()['custom-data'] is custom_data
        json.dumps(notification.to_dict())
        assert custom_data == {'user_id': 1}

    def test_url_and_location(self):
        payload = self.make(url='http://example.com/checkout',
                            location='CheckoutController').to_dict()
        assert payload['url'] == 'http://example.com/checkout'
        assert payload['location'] == 'CheckoutController'


class BuildNotificationTest(TestCase):
    def test_exception(self):
        notification = build_notification(
            ValueError('bad input'), 'production', VERSION, {'a': 1})
        assert notification.message == 'bad input'
        assert notification.environment == 'production'
        assert notification.client_version == VERSION
        assert notification.custom_data == {'a': 1}
        assert notification.type == 'error'

    def test_exception_without_message(self):
        notification = build_notification(KeyboardInterrupt(), 'production', VERSION)
        assert notification.message == 'KeyboardInterrupt'

    def test_string(self):
        notification = build_notification('something broke', 'production', VERSION)
        assert notification.message == 'something broke'

    def test_other_values(self):
        notification = build_notification(42, 'production', VERSION)
        assert notification.message == '42'

    def test_captures_callers_stack(self):
        notification = build_notification('boom', 'production', VERSION)
        first = notification.stacktrace[0]
        assert first.filename == __file__
        assert first.function_name.endswith('test_captures_callers_stack')

    def test_explicit_stack(self):
        stack = [StackFrame('/srv/app.py', '1', 'main')]
        notification = build_notification('boom', 'production', VERSION, stack=stack)
        assert notification.stacktrace == stack

    def test_max_depth(self):
        notification = build_notification('boom', 'production', VERSION, max_depth=2)
        assert len(notification.stacktrace) <= 2

    @mock.patch('yeller.utils.socket.gethostname')
    def test_hostname_is_looked_up_each_time(self, gethostname):
        gethostname.side_effect = ['web-1', 'web-2']
        first = build_notification('boom', 'production', VERSION)
        second = build_notification('boom', 'production', VERSION)
        assert first.host == 'web-1'
        assert second.host == 'web-2'

    @mock.patch('yeller.utils.socket.gethostname')
    def test_unresolvable_hostname(self, gethostname):
        gethostname.side_effect = OSError('no hostname')
        notification = build_notification('boom', 'production', VERSION)
        assert notification.host == ''

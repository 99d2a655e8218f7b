#       Licensed to the Apache Software Foundation (ASF) under one
#       or more contributor license agreements.  See the NOTICE file
#       distributed with this work for additional information
#       regarding copyright ownership.  The ASF licenses this file
#       to you under the Apache License, Version 2.0 (the
#       "License"); you may not use this file except in compliance
#       with the License.  You may obtain a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#       Unless required by applicable law or agreed to in writing,
#       software distributed under the License is distributed on an
#       "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
#       KIND, either express or implied.  See the License for the
#       specific language governing permissions and limitations
#       under the License.

from akismetclient.client import AkismetClient
from akismetclient.testing import RecordingTransportFactory


class MockPatchTestCase:
    patches = []

    def setup_method(self, method):
        self._patch_instances = [patch_fn(self) for patch_fn in self.patches]
        for patch_instance in self._patch_instances:
            patch_instance.__enter__()

    def teardown_method(self, method):
        for patch_instance in self._patch_instances:
            patch_instance.__exit__(None, None, None)


class ClientTestCase(MockPatchTestCase):
    environ = {}

    def setup_method(self, method):
        super().setup_method(method)
        self.transport = RecordingTransportFactory()
        self.client = self.make_client(self.environ)

    def make_client(self, environ, **kw):
        client = AkismetClient('http://example.com', 'testKey', environ=environ, **kw)
        client.set_transport_factory(self.transport)
        return client

    def sent_body(self):
        return self.transport.last_call['request'].split('\r\n\r\n', 1)[1]

    def sent_fields(self):
        return dict(pair.split('=', 1) for pair in self.sent_body().split('&') if pair)

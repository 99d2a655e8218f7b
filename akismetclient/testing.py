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

"""Test doubles for code that uses :class:`akismetclient.client.AkismetClient`."""

from akismetclient.transport import DEFAULT_RESPONSE_LENGTH, Transport


class RecordingTransport(Transport):

    def __init__(self, response, factory):
        self.response = response
        self.factory = factory

    def send(self, host, port, request, response_length=DEFAULT_RESPONSE_LENGTH):
        self.factory.record_call(host, port, request, response_length)
        return self.response


class RecordingTransportFactory:
    """
    Pass an instance to ``AkismetClient.set_transport_factory``. Each request
    gets the next queued response, or the default one once the queue is
    empty, and is recorded in :attr:`calls`.
    """

    def __init__(self, response=''):
        self.default_response = response
        self.responses = []
        self.calls = []

    def __call__(self):
        response = self.responses.pop(0) if self.responses else self.default_response
        return RecordingTransport(response, self)

    def set_response(self, response):
        self.default_response = response
        self.responses = []

    def queue_responses(self, responses):
        self.responses = list(responses)

    def record_call(self, host, port, request, response_length):
        self.calls.append(dict(host=host, port=port, request=request, response_length=response_length))

    @property
    def last_call(self):
        if not self.calls:
            raise IndexError('No calls have been recorded')
        return self.calls[-1]

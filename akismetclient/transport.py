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

import logging
import socket
from functools import partial

from paste.deploy.converters import asint

from akismetclient.exceptions import TransportError

log = logging.getLogger(__name__)

DEFAULT_RESPONSE_LENGTH = 1160
DEFAULT_TIMEOUT = 3


class Transport:
    """
    Defines the interface used by :class:`akismetclient.client.AkismetClient`
    to talk to the service.

    Any object with a matching ``send`` method will do, test doubles included
    (see :mod:`akismetclient.testing`).
    """

    def send(self, host, port, request, response_length=DEFAULT_RESPONSE_LENGTH):
        """
        Send the complete HTTP ``request`` text to ``host``:``port`` and return
        at most ``response_length`` bytes of the raw response text.

        :raises TransportError: if a connection cannot be made
        """
        raise NotImplementedError('send')

    @classmethod
    def get(cls, config, entry_points=None):
        """
        Return a zero-argument callable producing transports, based on
        ``config``.
        """
        method = config.get('akismet.transport')
        if not method:
            timeout = asint(config.get('akismet.timeout', DEFAULT_TIMEOUT))
            return partial(SocketTransport, timeout=timeout)
        if not entry_points or method not in entry_points:
            raise KeyError(f'akismet.transport: no transport entry point named {method!r}')
        return entry_points[method]


class SocketTransport(Transport):
    """Plain TCP implementation; one connection per request."""

    def __init__(self, timeout=DEFAULT_TIMEOUT):
        self.timeout = timeout
        self.response = ''
        self.error_number = 0
        self.error_string = ''

    def send(self, host, port, request, response_length=DEFAULT_RESPONSE_LENGTH):
        try:
            conn = socket.create_connection((host, port), timeout=self.timeout)
        except OSError as e:
            self.error_number = e.errno or 0
            self.error_string = e.strerror or str(e)
            raise TransportError(host, port, self.error_number, self.error_string) from e

        chunks = []
        received = 0
        try:
            conn.sendall(request.encode('utf-8'))
            while received < response_length:
                chunk = conn.recv(response_length - received)
                if not chunk:
                    break
                chunks.append(chunk)
                received += len(chunk)
        except OSError as e:
            log.warning('Reading from %s:%s failed, response truncated after %s chunks: %s',
                        host, port, len(chunks), e)
        finally:
            conn.close()

        self.response = b''.join(chunks)[:response_length].decode('utf-8', 'replace')
        return self.response

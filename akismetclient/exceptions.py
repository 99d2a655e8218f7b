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


class AkismetError(Exception):
    pass


class TransportError(AkismetError):
    """The remote host could not be reached."""

    def __init__(self, host, port, errno=None, strerror=None):
        self.host = host
        self.port = port
        self.errno = errno
        self.strerror = strerror
        super().__init__(
            f'Error connecting to host: {host}:{port} Error number: {errno} Error message: {strerror}')


class ServiceError(AkismetError):
    pass


class InvalidKeyError(ServiceError):

    def __init__(self, api_key=None):
        self.api_key = api_key
        super().__init__(
            'The Akismet API key passed to the client is invalid. '
            'Please obtain a valid one from https://akismet.com/account/')

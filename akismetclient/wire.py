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

from urllib.parse import quote_plus

from akismetclient.environ import is_scalar
from akismetclient.version import __version__

USER_AGENT = f'AkismetClient/{__version__} | Akismet/1.11'
CRLF = '\r\n'


def encode_value(value):
    if value is None:
        return ''
    if isinstance(value, bool):
        return '1' if value else ''
    if not isinstance(value, (str, bytes)):
        value = str(value)
    return quote_plus(value)


def encode_form(data):
    """Form-encode the scalar values of ``data``, each followed by ``&``."""
    return ''.join(f'{key}={encode_value(value)}&'
                   for key, value in data.items() if is_scalar(value))


def build_request(host, path, body):
    headers = [
        f'POST {path} HTTP/1.0',
        f'Host: {host}',
        'Content-Type: application/x-www-form-urlencoded; charset=utf-8',
        f'Content-Length: {len(body.encode("utf-8"))}',
        f'User-Agent: {USER_AGENT}',
    ]
    return CRLF.join(headers) + CRLF + CRLF + body


def parse_response(response):
    """Split a raw response into ``(headers, body)``; body is stripped."""
    headers, _, body = response.partition(CRLF + CRLF)
    return headers, body.strip()

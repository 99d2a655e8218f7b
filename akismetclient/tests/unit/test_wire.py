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

from akismetclient.version import __version__
from akismetclient.wire import build_request, encode_form, encode_value, parse_response


def test_encode_value():
    assert encode_value('alice@example.com') == 'alice%40example.com'
    assert encode_value('a b&c=d') == 'a+b%26c%3Dd'
    assert encode_value(None) == ''
    assert encode_value(True) == '1'
    assert encode_value(False) == ''
    assert encode_value(42) == '42'
    assert encode_value(b'raw') == 'raw'


def test_encode_form():
    data = {'blog': 'http://example.com', 'comment_content': 'hello', 'nested': ['x'], 'user_ip': ''}
    assert encode_form(data) == 'blog=http%3A%2F%2Fexample.com&comment_content=hello&user_ip=&'
    assert encode_form({}) == ''


def test_build_request():
    request = build_request('testKey.rest.akismet.com', '/1.1/comment-check', 'comment_content=h%C3%A5&')
    assert request == (
        'POST /1.1/comment-check HTTP/1.0\r\n'
        'Host: testKey.rest.akismet.com\r\n'
        'Content-Type: application/x-www-form-urlencoded; charset=utf-8\r\n'
        'Content-Length: 24\r\n'
        f'User-Agent: AkismetClient/{__version__} | Akismet/1.11\r\n'
        '\r\n'
        'comment_content=h%C3%A5&'
    )


def test_parse_response():
    headers, body = parse_response('HTTP/1.0 200 OK\r\nContent-Type: text/plain\r\n\r\n true\r\n')
    assert headers == 'HTTP/1.0 200 OK\r\nContent-Type: text/plain'
    assert body == 'true'


def test_parse_response_splits_on_first_delimiter():
    headers, body = parse_response('HTTP/1.0 200 OK\r\n\r\nfirst\r\n\r\nsecond')
    assert body == 'first\r\n\r\nsecond'


def test_parse_response_without_body():
    assert parse_response('HTTP/1.0 500 Internal Server Error') == ('HTTP/1.0 500 Internal Server Error', '')
    assert parse_response('') == ('', '')


def test_request_then_response():
    request = build_request('rest.akismet.com', '/1.1/verify-key', 'key=k&blog=b')
    response = request.split('\r\n\r\n', 1)[0] + '\r\n\r\n\r\n valid \r\n'
    assert parse_response(response)[1] == 'valid'

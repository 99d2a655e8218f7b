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

"""Ambient request context (a WSGI/CGI environ) handling."""

import logging

log = logging.getLogger(__name__)


# never sent across the wire
IGNORED_KEYS = frozenset([
    'HTTP_COOKIE',
    'HTTP_X_FORWARDED_FOR',
    'HTTP_X_FORWARDED_HOST',
    'HTTP_MAX_FORWARDS',
    'HTTP_X_FORWARDED_SERVER',
    'REDIRECT_STATUS',
    'SERVER_PORT',
    'PATH',
    'DOCUMENT_ROOT',
    'SERVER_ADMIN',
    'QUERY_STRING',
    'PHP_SELF',
    'SCRIPT_NAME',
])

SCALAR_TYPES = (str, bytes, int, float, bool, type(None))


def resolve_user_ip(environ, server_addr=None):
    """Return the address of the client that made the request in ``environ``.

    ``REMOTE_ADDR`` is used unless it is missing or equal to the server's own
    address (``server_addr``, else ``environ['SERVER_ADDR']``). In that case
    the request came through a local proxy and ``X-Forwarded-For`` is used
    instead. That header is supplied by the client and can be forged; it is
    only trusted here for compatibility with such proxy setups.
    """
    if server_addr is None:
        server_addr = environ.get('SERVER_ADDR')
    remote_addr = environ.get('REMOTE_ADDR')
    if remote_addr is not None and remote_addr != server_addr:
        return remote_addr
    forwarded_for = environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded_for is not None:
        log.warning('Taking user_ip from X-Forwarded-For (%s), REMOTE_ADDR is %s', forwarded_for, remote_addr)
    return forwarded_for or ''


def environ_str(value):
    """Undo the latin-1 decoding WSGI applies to header values.

    Strings that are already proper text, or whose bytes are not UTF-8, are
    returned as is.
    """
    if not isinstance(value, str):
        return value
    try:
        return value.encode('latin-1').decode('utf-8')
    except UnicodeError:
        return value


def is_scalar(value):
    return isinstance(value, SCALAR_TYPES)


def filter_environ(environ, user_ip):
    """Yield the ``(key, value)`` pairs of ``environ`` that may be sent.

    Keys in :data:`IGNORED_KEYS` and non-scalar values are dropped.
    ``REMOTE_ADDR`` is replaced with ``user_ip`` so the two never disagree.
    """
    for key, value in environ.items():
        if key in IGNORED_KEYS or not is_scalar(value):
            continue
        if key == 'REMOTE_ADDR':
            value = user_ip
        else:
            value = environ_str(value)
        yield key, value


def merge_environ(comment, environ):
    """Return a new dict of ``comment`` plus the sendable parts of ``environ``.

    Values already in ``comment`` take precedence.
    """
    data = dict(comment)
    for key, value in filter_environ(environ, comment.get('user_ip', '')):
        data.setdefault(key, value)
    return data

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

from paste.deploy.converters import asint

from akismetclient.environ import environ_str, merge_environ, resolve_user_ip
from akismetclient.exceptions import InvalidKeyError
from akismetclient.transport import DEFAULT_RESPONSE_LENGTH, SocketTransport, Transport
from akismetclient.wire import build_request, encode_form, parse_response

log = logging.getLogger(__name__)

DEFAULT_SERVER = 'rest.akismet.com'
DEFAULT_PORT = 80
DEFAULT_VERSION = '1.1'


class AkismetClient:

    """Client for the Akismet comment spam service.

    Usage::

        client = AkismetClient('http://www.example.com/blog/', 'aoeu1aoue', environ=request.environ)
        client.set_comment_author(name)
        client.set_comment_author_email(email)
        client.set_comment_content(text)
        client.set_permalink('http://www.example.com/blog/alex/someurl/')
        if client.is_comment_spam():
            ...

    ``environ`` is the WSGI environ (or any mapping of CGI-style variables) of
    the request that submitted the comment. Its user agent, referrer and
    remote address seed the comment, and the rest of it, minus
    :data:`akismetclient.environ.IGNORED_KEYS`, is sent along with every
    comment check and spam/ham report.
    """

    def __init__(self, blog_url, api_key, environ=None, server_addr=None):
        self.blog_url = blog_url
        self.api_key = api_key
        self.environ = dict(environ or {})
        self.api_port = DEFAULT_PORT
        self.akismet_server = DEFAULT_SERVER
        self.akismet_version = DEFAULT_VERSION
        self.transport_factory = SocketTransport

        self.comment = {'blog': blog_url}
        if 'HTTP_USER_AGENT' in self.environ:
            self.comment['user_agent'] = environ_str(self.environ['HTTP_USER_AGENT'])
        if 'HTTP_REFERER' in self.environ:
            self.comment['referrer'] = environ_str(self.environ['HTTP_REFERER'])
        self.comment['user_ip'] = resolve_user_ip(self.environ, server_addr)

    @classmethod
    def from_config(cls, config, environ=None, entry_points=None):
        """
        Return a client configured from the ``akismet.*`` settings in ``config``.

        :rtype: AkismetClient
        """
        blog_url = config.get('akismet.blog_url') or config.get('base_url')
        if not blog_url:
            raise KeyError('akismet.blog_url')
        client = cls(blog_url, config['akismet.key'], environ=environ)
        client.set_api_port(asint(config.get('akismet.port', DEFAULT_PORT)))
        client.set_akismet_server(config.get('akismet.server', DEFAULT_SERVER))
        client.set_akismet_version(config.get('akismet.version', DEFAULT_VERSION))
        client.set_transport_factory(Transport.get(config, entry_points))
        return client

    @property
    def api_host(self):
        return f'{self.api_key}.{self.akismet_server}'

    def path(self, method):
        return f'/{self.akismet_version}/{method}'

    def is_key_valid(self):
        """Return True if the API key is accepted by the service."""
        body = f'key={self.api_key}&blog={self.blog_url}'
        headers, response = self.send_request(body, self.akismet_server, self.path('verify-key'))
        return response == 'valid'

    def is_comment_spam(self):
        """Return True if the service classifies the current comment as spam.

        :raises InvalidKeyError: if the service rejects the API key
        """
        headers, response = self.send_request(self.query_string(), self.api_host, self.path('comment-check'))
        if response == 'invalid' and not self.is_key_valid():
            raise InvalidKeyError(self.api_key)
        return response == 'true'

    def submit_spam(self):
        """Report a comment that was missed as spam."""
        self.send_request(self.query_string(), self.api_host, self.path('submit-spam'))

    def submit_ham(self):
        """Report a comment that was wrongly classified as spam."""
        self.send_request(self.query_string(), self.api_host, self.path('submit-ham'))

    def query_string(self):
        return encode_form(merge_environ(self.comment, self.environ))

    def send_request(self, body, host, path):
        request = build_request(host, path, body)
        log.info('Akismet request: %s %s', host.replace(self.api_key, '...') if self.api_key else host, path)
        transport = self.transport_factory()
        response = transport.send(host, self.api_port, request, DEFAULT_RESPONSE_LENGTH)
        headers, body = parse_response(response)
        log.info('Akismet response: %s', body)
        return headers, body

    def set_user_ip(self, user_ip):
        self.comment['user_ip'] = user_ip

    def set_referrer(self, referrer):
        self.comment['referrer'] = referrer

    def set_permalink(self, permalink):
        self.comment['permalink'] = permalink

    def set_comment_type(self, comment_type):
        """May be blank, comment, trackback, pingback, or a made up value like
        "registration" or "wiki"."""
        self.comment['comment_type'] = comment_type

    def set_comment_author(self, author):
        self.comment['comment_author'] = author

    def set_comment_author_email(self, email):
        self.comment['comment_author_email'] = email

    def set_comment_author_url(self, url):
        self.comment['comment_author_url'] = url

    def set_comment_content(self, content):
        self.comment['comment_content'] = content

    def set_comment_user_agent(self, user_agent):
        # for spam/ham reports made outside of the original request
        self.comment['user_agent'] = user_agent

    def set_api_port(self, port):
        self.api_port = port

    def set_akismet_server(self, server):
        self.akismet_server = server

    def set_akismet_version(self, version):
        self.akismet_version = version

    def set_transport_factory(self, factory):
        self.transport_factory = factory

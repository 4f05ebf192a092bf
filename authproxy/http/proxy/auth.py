# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       auth
       http
"""
import base64
import binascii
import secrets

from ..headers import httpHeaders
from ..parser import InboundRequest
from ..exception import ProxyAuthenticationFailed
from ...common.types import Credentials
from ...common.constants import COLON, WHITESPACE


BASIC_AUTH_SCHEME = b'Basic'


class AuthPlugin:
    """Performs proxy authentication.

    Every failure raises :exc:`ProxyAuthenticationFailed`, which
    answers the client with the same 407 challenge regardless of
    what exactly was wrong.
    """

    def __init__(self, credentials: Credentials) -> None:
        self.credentials = credentials

    def authenticate(self, request: InboundRequest) -> None:
        if not request.has_header(httpHeaders.PROXY_AUTHORIZATION):
            raise ProxyAuthenticationFailed('missing credentials')
        parts = request.header(httpHeaders.PROXY_AUTHORIZATION).split(WHITESPACE)
        if len(parts) != 2 or parts[0] != BASIC_AUTH_SCHEME:
            raise ProxyAuthenticationFailed('unsupported scheme')
        try:
            decoded = base64.b64decode(parts[1], validate=True)
        except binascii.Error as e:
            raise ProxyAuthenticationFailed('invalid base64') from e
        user, sep, password = decoded.partition(COLON)
        if not sep:
            raise ProxyAuthenticationFailed('malformed credentials')
        # Both fields are always compared, in constant time
        user_ok = secrets.compare_digest(user, self.credentials.user)
        password_ok = secrets.compare_digest(password, self.credentials.password)
        if not (user_ok and password_ok):
            raise ProxyAuthenticationFailed('invalid credentials')

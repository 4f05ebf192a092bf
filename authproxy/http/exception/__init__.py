# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .base import HttpProtocolException
from .http_request_malformed import HttpRequestMalformed
from .proxy_auth_failed import ProxyAuthenticationFailed
from .proxy_conn_failed import ProxyConnectionFailed


__all__ = [
    'HttpProtocolException',
    'HttpRequestMalformed',
    'ProxyAuthenticationFailed',
    'ProxyConnectionFailed',
]

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import NamedTuple


# Lower case, as stored by the request parser
HttpHeaders = NamedTuple(
    'HttpHeaders', [
        ('HOST', bytes),
        ('PROXY_AUTHORIZATION', bytes),
    ],
)

httpHeaders = HttpHeaders(
    b'host',
    b'proxy-authorization',
)

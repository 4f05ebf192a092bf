# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import NamedTuple


HttpMethods = NamedTuple(
    'HttpMethods', [
        ('CONNECT', bytes),
        ('DELETE', bytes),
        ('GET', bytes),
        ('HEAD', bytes),
        ('OPTIONS', bytes),
        ('PATCH', bytes),
        ('POST', bytes),
        ('PUT', bytes),
    ],
)

httpMethods = HttpMethods(
    b'CONNECT',
    b'DELETE',
    b'GET',
    b'HEAD',
    b'OPTIONS',
    b'PATCH',
    b'POST',
    b'PUT',
)

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Any

from .base import HttpProtocolException


class HttpRequestMalformed(HttpProtocolException):
    """Raised when the request line or headers cannot be read.

    Malformed input is never answered, the connection is
    simply dropped."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__(
            '%s %s' % (self.__class__.__name__, reason), **kwargs,
        )

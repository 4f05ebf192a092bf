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

from ..responses import PROXY_AUTH_FAILED_RESPONSE_PKT


class ProxyAuthenticationFailed(HttpProtocolException):
    """Exception raised when incoming request doesn't present
    valid Basic credentials.  Answered with a 407 challenge."""

    def __init__(self, reason: str = 'invalid credentials', **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__(
            '%s %s' % (self.__class__.__name__, reason), **kwargs,
        )

    def response(self) -> memoryview:
        return PROXY_AUTH_FAILED_RESPONSE_PKT

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


class ProxyConnectionFailed(HttpProtocolException):
    """Exception raised when unable to establish connection to upstream server.

    Client receives no status line, the connection is dropped."""

    def __init__(self, host: str, port: int, reason: str, **kwargs: Any):
        self.host: str = host
        self.port: int = port
        self.reason: str = reason
        super().__init__(
            '%s %s:%d %s' % (self.__class__.__name__, host, port, reason),
            **kwargs,
        )

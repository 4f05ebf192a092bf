# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .url import Url
from .codes import httpStatusCodes
from .parser import HttpParser, InboundRequest
from .handler import HttpProtocolHandler
from .headers import httpHeaders
from .methods import httpMethods
from .access_log import AccessLog, AccessLogEvent


__all__ = [
    'HttpProtocolHandler',
    'HttpParser',
    'InboundRequest',
    'AccessLog',
    'AccessLogEvent',
    'httpStatusCodes',
    'httpMethods',
    'httpHeaders',
    'Url',
]

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .auth import AuthPlugin
from .base import BaseRelay
from .tunnel import HttpsConnectTunnel
from .forward import HttpForwardRelay


__all__ = [
    'AuthPlugin',
    'BaseRelay',
    'HttpsConnectTunnel',
    'HttpForwardRelay',
]

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .proxy import Proxy, main, sleep_loop, entry_point
from .testing import TestCase


__all__ = [
    # Console script entry point, see setup.py
    'entry_point',
    # Embed authproxy within another program
    'main',
    # Unit testing against a running authproxy
    'TestCase',
    'Proxy',
    'sleep_loop',
]

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
VERSION = (1, 0, 0)
__version__ = '.'.join(map(str, VERSION[0:3]))


__all__ = '__version__', 'VERSION'

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import ipaddress
from typing import Dict, Tuple, Union, NamedTuple


IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
HostPort = Tuple[str, int]
# Keys are lower case header names
HeaderMap = Dict[bytes, bytes]


class Credentials(NamedTuple):
    """Expected Basic auth user and password, loaded once at startup."""
    user: bytes
    password: bytes

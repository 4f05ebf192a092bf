# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
from typing import Optional

from .types import tcpConnectionTypes
from .connection import TcpConnection, TcpConnectionUninitializedException
from ...common.types import HostPort
from ...common.utils import new_socket_connection


class TcpServerConnection(TcpConnection):
    """Connection to an origin server."""

    def __init__(self, host: str, port: int) -> None:
        super().__init__(tcpConnectionTypes.SERVER)
        self._conn: Optional[socket.socket] = None
        self.addr: HostPort = (host, port)
        self.closed = True

    @property
    def connection(self) -> socket.socket:
        if self._conn is None:
            raise TcpConnectionUninitializedException()
        return self._conn

    def connect(self, timeout: Optional[float] = None) -> None:
        """Dial the origin.  ``timeout`` bounds the connect only."""
        if self._conn is not None:
            return
        self._conn = new_socket_connection(self.addr, timeout=timeout)
        self.closed = False

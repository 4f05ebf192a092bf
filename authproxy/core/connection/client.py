# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import io
import socket
from typing import Optional

from .types import tcpConnectionTypes
from .connection import TcpConnection, TcpConnectionUninitializedException
from ...common.types import HostPort
from ...common.constants import DEFAULT_BUFFER_SIZE


class TcpClientConnection(TcpConnection):
    """An accepted client connection.

    Reads go through a buffered ``reader`` so the request parser
    can consume lines.  Whatever the parser buffered past the end
    of headers is returned first by ``recv``, then live socket data.
    """

    def __init__(
        self,
        conn: socket.socket,
        addr: Optional[HostPort] = None,
    ) -> None:
        super().__init__(tcpConnectionTypes.CLIENT)
        self._conn: Optional[socket.socket] = conn
        self.addr: Optional[HostPort] = addr
        self.reader: io.BufferedReader = conn.makefile('rb')

    @property
    def address(self) -> str:
        return 'unknown' if not self.addr else '{0}:{1}'.format(self.addr[0], self.addr[1])

    @property
    def connection(self) -> socket.socket:
        if self._conn is None:
            raise TcpConnectionUninitializedException()
        return self._conn

    def recv(
            self, buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> Optional[memoryview]:
        data = self.reader.read1(buffer_size)
        if not data:
            return None
        return memoryview(data)

    def close(self) -> bool:
        if not self.closed:
            # Socket fd is released only once the reader is closed too
            self.reader.close()
        return super().close()

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import logging

from abc import ABC, abstractmethod
from typing import Optional, Union

from ...common.constants import DEFAULT_BUFFER_SIZE


logger = logging.getLogger(__name__)


class TcpConnectionUninitializedException(Exception):
    pass


class TcpConnection(ABC):
    """TCP server/client connection abstraction.

    Wraps a blocking socket.  Within a relay, one thread reads
    from a connection while another writes into it, so reads
    and writes never share state beyond the socket itself.

    Implement the connection property abstract method to return
    a socket connection object.
    """

    def __init__(self, tag: str) -> None:
        self.tag: str = tag
        self.closed: bool = False

    @property
    @abstractmethod
    def connection(self) -> socket.socket:
        """Must return the socket connection to use in this class."""
        raise TcpConnectionUninitializedException()     # pragma: no cover

    def send(self, data: Union[bytes, memoryview]) -> int:
        """Writes all of data.  Users must handle OSError exceptions."""
        self.connection.sendall(data)
        logger.debug('sent %d bytes to %s', len(data), self.tag)
        return len(data)

    def recv(
            self, buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> Optional[memoryview]:
        """Returns None on end-of-stream.  Users must handle OSError exceptions."""
        data: bytes = self.connection.recv(buffer_size)
        if len(data) == 0:
            return None
        logger.debug('received %d bytes from %s', len(data), self.tag)
        return memoryview(data)

    def settimeout(self, timeout: Optional[float]) -> None:
        self.connection.settimeout(timeout)

    def shutdown_write(self) -> None:
        """Half-close, signals end-of-stream to the peer while
        leaving the read side open.

        No-op when the transport refuses, e.g. peer already gone."""
        if self.closed:
            return
        try:
            self.connection.shutdown(socket.SHUT_WR)
            logger.debug('%s write side shutdown', self.tag)
        except OSError as e:
            logger.debug('%s write side shutdown failed: %r', self.tag, e)

    def close(self) -> bool:
        if not self.closed:
            self.connection.close()
            self.closed = True
        return self.closed

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
import argparse
from typing import Any, Optional

from ...common.flag import flags
from ...common.constants import (
    DEFAULT_PORT, DEFAULT_BACKLOG, DEFAULT_IPV4_HOSTNAME, ENV_PROXY_PORT,
)


flags.add_argument(
    '--backlog',
    type=int,
    default=DEFAULT_BACKLOG,
    help='Default: 100. Maximum number of pending connections to proxy server.',
)

flags.add_argument(
    '--hostname',
    type=str,
    default=str(DEFAULT_IPV4_HOSTNAME),
    help='Default: 0.0.0.0. Server IP address.',
)

flags.add_argument(
    '--port',
    type=int,
    default=None,
    help='Default: $' + ENV_PROXY_PORT + ' if set, otherwise ' +
    str(DEFAULT_PORT) + '.  Server port.  Use 0 for an ephemeral port.',
)

logger = logging.getLogger(__name__)


class TcpSocketListener:
    """Tcp listener.

    Binding failures propagate to the caller, nothing else
    can run without a listening socket."""

    def __init__(self, flags: argparse.Namespace) -> None:
        self.flags = flags
        self._socket: Optional[socket.socket] = None
        # Set after binding to a port.
        #
        # Stored here separately for ephemeral port discovery.
        self._port: Optional[int] = None

    def __enter__(self) -> 'TcpSocketListener':
        self.setup()
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()

    def listen(self) -> socket.socket:
        sock = socket.socket(
            socket.AF_INET6 if self.flags.hostname.version == 6 else socket.AF_INET,
            socket.SOCK_STREAM,
        )
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
            sock.bind((str(self.flags.hostname), self.flags.port))
            sock.listen(self.flags.backlog)
        except OSError:
            sock.close()
            raise
        sock.setblocking(False)
        self._port = sock.getsockname()[1]
        logger.info(
            'Listening on %s:%s' %
            (self.flags.hostname, self._port),
        )
        return sock

    @property
    def port(self) -> Optional[int]:
        return self._port

    def setup(self) -> None:
        self._socket = self.listen()

    def shutdown(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    @property
    def socket(self) -> socket.socket:
        assert self._socket is not None
        return self._socket

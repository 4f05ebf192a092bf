# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging
import argparse
import threading

from typing import Dict, List

from .connection import TcpConnection, TcpClientConnection, TcpServerConnection
from ..common.flag import flags
from ..common.constants import (
    DEFAULT_IDLE_TIMEOUT, DEFAULT_CLIENT_RECVBUF_SIZE, DEFAULT_SERVER_RECVBUF_SIZE,
)


flags.add_argument(
    '--idle-timeout',
    type=float,
    default=DEFAULT_IDLE_TIMEOUT,
    help='Default: 0 (disabled).  Seconds a relayed connection may stay '
    'silent before the relay direction gives up.',
)

flags.add_argument(
    '--client-recvbuf-size',
    type=int,
    default=DEFAULT_CLIENT_RECVBUF_SIZE,
    help='Default: ' + str(int(DEFAULT_CLIENT_RECVBUF_SIZE / 1024)) +
    ' KB. Maximum amount of data received from the '
    'client in a single recv() operation.',
)

flags.add_argument(
    '--server-recvbuf-size',
    type=int,
    default=DEFAULT_SERVER_RECVBUF_SIZE,
    help='Default: ' + str(int(DEFAULT_SERVER_RECVBUF_SIZE / 1024)) +
    ' KB. Maximum amount of data received from the '
    'server in a single recv() operation.',
)

logger = logging.getLogger(__name__)


class RelaySession:
    """Pumps bytes between a client and an upstream server connection.

    Two threads run, one per direction.  Each reads only from its
    source and writes only to its destination.  When a source reaches
    end-of-stream (or errors), the destination's write side is
    half-closed so the peer learns no more data is coming, while the
    opposite direction keeps draining.

    ``run`` returns only after both directions are done, and always
    closes both connections.  The session owns both connections from
    construction onwards.
    """

    def __init__(
            self,
            client: TcpClientConnection,
            upstream: TcpServerConnection,
            flags: argparse.Namespace,
    ) -> None:
        self.client = client
        self.upstream = upstream
        self.flags = flags
        # Bytes read from each source, keyed by connection tag
        self.relayed: Dict[str, int] = {}

    def run(self) -> None:
        try:
            self.client.settimeout(self.flags.idle_timeout)
            self.upstream.settimeout(self.flags.idle_timeout)
            pumps: List[threading.Thread] = [
                threading.Thread(
                    target=self._pump,
                    args=(self.client, self.upstream, self.flags.client_recvbuf_size),
                    name='relay-client-%s' % self.client.address,
                    daemon=True,
                ),
                threading.Thread(
                    target=self._pump,
                    args=(self.upstream, self.client, self.flags.server_recvbuf_size),
                    name='relay-server-%s' % self.client.address,
                    daemon=True,
                ),
            ]
            for pump in pumps:
                pump.start()
            for pump in pumps:
                pump.join()
            logger.debug(
                'Relay for %s done, client sent %d bytes, server sent %d bytes',
                self.client.address,
                self.relayed.get(self.client.tag, 0),
                self.relayed.get(self.upstream.tag, 0),
            )
        finally:
            self.upstream.close()
            self.client.close()

    def _pump(
            self,
            src: TcpConnection,
            dst: TcpConnection,
            buffer_size: int,
    ) -> None:
        total = 0
        try:
            while True:
                data = src.recv(buffer_size)
                if data is None:
                    logger.debug(
                        'Connection closed by %s after %d bytes', src.tag, total,
                    )
                    break
                dst.send(data)
                total += len(data)
        except OSError as e:
            logger.warning(
                'Relay %s -> %s for %s aborted after %d bytes: %r',
                src.tag, dst.tag, self.client.address, total, e,
            )
        finally:
            self.relayed[src.tag] = total
            dst.shutdown_write()

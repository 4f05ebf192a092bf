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

from abc import ABC, abstractmethod
from typing import Optional

from ..parser import InboundRequest
from ..exception import ProxyConnectionFailed
from ...core.relay import RelaySession
from ...core.connection import TcpClientConnection, TcpServerConnection

logger = logging.getLogger(__name__)


class BaseRelay(ABC):
    """Base class for relaying an authenticated request upstream.

    Implementations dial the upstream via ``connect_upstream``, write
    whatever must precede the byte relay, then call ``relay``.  Once
    ``relay`` is entered the session owns both connections.
    """

    def __init__(
            self,
            client: TcpClientConnection,
            request: InboundRequest,
            flags: argparse.Namespace,
    ) -> None:
        self.client = client
        self.request = request
        self.flags = flags
        self.upstream: Optional[TcpServerConnection] = None

    @abstractmethod
    def run(self) -> None:
        """Handle the request until both relay directions are done."""
        raise NotImplementedError()     # pragma: no cover

    def connect_upstream(
            self,
            host: str,
            port: int,
            timeout: Optional[float] = None,
    ) -> TcpServerConnection:
        upstream = TcpServerConnection(host, port)
        try:
            upstream.connect(timeout=timeout)
        except (OSError, UnicodeError) as e:
            # UnicodeError is raised by IDNA encoding of invalid hostnames
            raise ProxyConnectionFailed(host, port, repr(e)) from e
        logger.debug(
            'Connection established with upstream %s:%d for %s',
            host, port, self.client.address,
        )
        self.upstream = upstream
        return upstream

    def relay(self) -> None:
        assert self.upstream is not None
        RelaySession(self.client, self.upstream, self.flags).run()

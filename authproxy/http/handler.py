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

from typing import Any, Optional, Type

from .parser import HttpParser, InboundRequest
from .exception import HttpProtocolException
from .access_log import AccessLog, AccessLogEvent
from .proxy import AuthPlugin, BaseRelay, HttpsConnectTunnel, HttpForwardRelay
from ..core.connection import TcpClientConnection
from ..common.types import HostPort


logger = logging.getLogger(__name__)


class HttpProtocolHandler:
    """Handles one accepted client connection, start to finish.

    Parses a single request, authenticates it, records it in the
    access log and hands it to the tunnel or forward relay.  No
    keep-alive, one request per client connection.

    Protocol errors are answered with their response() if any,
    otherwise the connection is silently dropped.  The client
    connection is always closed before run returns.
    """

    def __init__(
            self,
            client: TcpClientConnection,
            flags: argparse.Namespace,
            access_log: Optional[AccessLog] = None,
    ) -> None:
        self.client = client
        self.flags = flags
        self.access_log = access_log
        self.auth = AuthPlugin(flags.credentials)
        self.request: Optional[InboundRequest] = None

    @classmethod
    def create(
            cls,
            conn: socket.socket,
            addr: Optional[HostPort],
            **kwargs: Any,
    ) -> 'HttpProtocolHandler':
        return cls(TcpClientConnection(conn, addr), **kwargs)

    def run(self) -> None:
        try:
            self.client.settimeout(self.flags.idle_timeout)
            self.request = HttpParser.request(self.client.reader)
            self.auth.authenticate(self.request)
            self.on_request_authenticated(self.request)
            self.relay_klass(self.request)(
                self.client, self.request, self.flags,
            ).run()
        except HttpProtocolException as e:
            logger.info('%s from %s', e, self.client.address)
            response = e.response()
            if response is not None:
                try:
                    self.client.send(response)
                except OSError as se:
                    logger.debug(
                        'Unable to send response to %s: %r',
                        self.client.address, se,
                    )
        except Exception:   # pylint: disable=broad-except
            logger.exception(
                'Exception while handling connection %s', self.client.address,
            )
        finally:
            self.client.close()
            logger.debug('Closed client connection %s', self.client.address)

    def on_request_authenticated(self, request: InboundRequest) -> None:
        event = AccessLogEvent.from_request(self.client.address, request)
        if self.access_log is not None:
            self.access_log.emit(event)
        else:
            logger.info(event.format())

    @staticmethod
    def relay_klass(request: InboundRequest) -> Type[BaseRelay]:
        if request.is_https_tunnel:
            return HttpsConnectTunnel
        return HttpForwardRelay

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging

from .base import BaseRelay
from ..url import Url
from ..exception import HttpProtocolException, ProxyConnectionFailed
from ..responses import PROXY_TUNNEL_ESTABLISHED_RESPONSE_PKT
from ...common.flag import flags
from ...common.utils import text_
from ...common.constants import DEFAULT_TIMEOUT


flags.add_argument(
    '--timeout',
    type=float,
    default=DEFAULT_TIMEOUT,
    help='Default: ' + str(DEFAULT_TIMEOUT) +
    '.  Number of seconds to wait while connecting to a CONNECT target.',
)

logger = logging.getLogger(__name__)


class HttpsConnectTunnel(BaseRelay):
    """Handles ``CONNECT host:port`` requests.

    Dials the target with a bounded connect timeout, acknowledges
    with ``200 Connection Established`` and then relays opaque bytes
    in both directions.  Tunneled bytes are never inspected.

    Target parse or dial failures raise :exc:`ProxyConnectionFailed`,
    the client receives nothing before the connection is dropped.
    """

    def run(self) -> None:
        try:
            url = Url.from_bytes(self.request.target)
        except HttpProtocolException as e:
            raise ProxyConnectionFailed(
                text_(self.request.target, errors='replace'), 0, str(e),
            ) from e
        if url.host is None or url.port is None:
            raise ProxyConnectionFailed(
                text_(self.request.target, errors='replace'), 0, 'missing port',
            )
        upstream = self.connect_upstream(
            url.host, url.port, timeout=self.flags.timeout,
        )
        try:
            self.client.send(PROXY_TUNNEL_ESTABLISHED_RESPONSE_PKT)
        except OSError as e:
            logger.warning(
                'Unable to acknowledge tunnel to %s: %r', self.client.address, e,
            )
            upstream.close()
            return
        logger.debug(
            'Tunnel %s <-> %s:%d established', self.client.address, url.host, url.port,
        )
        self.relay()

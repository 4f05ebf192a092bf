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
from ..headers import httpHeaders
from ..exception import HttpRequestMalformed
from ...common.utils import build_http_request
from ...common.types import HeaderMap
from ...common.constants import DEFAULT_HTTP_PORT

logger = logging.getLogger(__name__)


class HttpForwardRelay(BaseRelay):
    """Handles plain HTTP proxy requests, i.e. every method but CONNECT.

    Re-issues the request to the origin using the request-URI
    (path and query) instead of the absolute URL, without the
    ``Proxy-Authorization`` header.  The remaining request body and
    the response are then relayed as raw bytes.  Once the client body
    is exhausted, the origin socket is half-closed so the origin sees
    end of request while its response keeps flowing back.
    """

    def run(self) -> None:
        url = Url.from_bytes(self.request.target)
        if url.host is None:
            raise HttpRequestMalformed(
                'no host in request target %r' % self.request.target,
            )
        # No connect timeout for plain HTTP origins
        upstream = self.connect_upstream(
            url.host, url.port or DEFAULT_HTTP_PORT,
        )
        try:
            upstream.send(self.build_upstream_request(url))
        except OSError as e:
            logger.warning(
                'Unable to forward request headers to %s:%d: %r',
                url.host, url.port or DEFAULT_HTTP_PORT, e,
            )
            upstream.close()
            return
        self.relay()

    def build_upstream_request(self, url: Url) -> bytes:
        return build_http_request(
            self.request.method,
            url.request_uri,
            headers=self.upstream_headers(),
        )

    def upstream_headers(self) -> HeaderMap:
        """Original headers minus proxy credentials."""
        return {
            name: value
            for name, value in self.request.headers.items()
            if name != httpHeaders.PROXY_AUTHORIZATION
        }

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       http
"""
from typing import IO, NamedTuple

from .methods import httpMethods
from .exception import HttpRequestMalformed
from ..common.types import HeaderMap
from ..common.constants import COLON, WHITESPACE


class InboundRequest(NamedTuple):
    """A parsed request line and header block.

    ``reader`` is the client's buffered reader, positioned right
    after the blank line ending the headers.  Anything it already
    buffered beyond that point is request body.
    """
    method: bytes
    target: bytes
    # Keys are lower case header names, last occurrence wins
    headers: HeaderMap
    reader: IO[bytes]

    @property
    def is_https_tunnel(self) -> bool:
        """Returns true for HTTPS CONNECT tunnel request."""
        return self.method == httpMethods.CONNECT

    def has_header(self, key: bytes) -> bool:
        return key.lower() in self.headers

    def header(self, key: bytes) -> bytes:
        return self.headers[key.lower()]


class HttpParser:
    """Reads one request line and header block off a buffered byte stream.

    Request line is split on single spaces, the first two tokens are
    method and target, anything after (the HTTP version) is ignored.
    Header lines without a colon are ignored.  Premature end-of-stream
    or a read error raise :exc:`HttpRequestMalformed`.
    """

    @classmethod
    def request(cls, reader: IO[bytes]) -> InboundRequest:
        line = cls._readline(reader)
        parts = line.split(WHITESPACE)
        if len(parts) < 2:
            raise HttpRequestMalformed('invalid request line %r' % line)
        return InboundRequest(
            method=parts[0],
            target=parts[1],
            headers=cls._read_headers(reader),
            reader=reader,
        )

    @classmethod
    def _read_headers(cls, reader: IO[bytes]) -> HeaderMap:
        headers: HeaderMap = {}
        while True:
            line = cls._readline(reader)
            if line == b'':
                return headers
            name, sep, value = line.partition(COLON)
            if not sep:
                continue
            headers[name.strip().lower()] = value.strip()

    @staticmethod
    def _readline(reader: IO[bytes]) -> bytes:
        try:
            line = reader.readline()
        except OSError as e:
            raise HttpRequestMalformed('read failed %r' % e) from e
        if not line.endswith(b'\n'):
            raise HttpRequestMalformed('unexpected end of stream')
        return line.strip()

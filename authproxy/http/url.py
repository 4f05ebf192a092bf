# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       http
       url
"""
import re
from typing import Optional, Tuple

from ..common.utils import text_
from ..common.constants import AT, COLON, SLASH, HASH
from .exception import HttpProtocolException


# First byte which ends the authority component of an absolute URL
AUTHORITY_END = re.compile(rb'[/?#]')


class Url:
    """``urllib.urlparse`` doesn't work for byte-level request lines, so we
    wrote a simple URL.

    Only implements what the relays need: host, port and the
    request-URI to send to an origin.
    """

    def __init__(
            self,
            scheme: Optional[bytes] = None,
            hostname: Optional[bytes] = None,
            port: Optional[int] = None,
            remainder: Optional[bytes] = None,
    ) -> None:
        self.scheme: Optional[bytes] = scheme
        self.hostname: Optional[bytes] = hostname
        self.port: Optional[int] = port
        self.remainder: Optional[bytes] = remainder

    @property
    def host(self) -> Optional[str]:
        """Hostname usable for dialing, IPv6 brackets removed."""
        if self.hostname is None:
            return None
        return text_(self.hostname.strip(b'[]'))

    @property
    def request_uri(self) -> bytes:
        """Path and query to send to an origin.  Never empty."""
        if not self.remainder:
            return SLASH
        uri = self.remainder.split(HASH, 1)[0]
        if not uri.startswith(SLASH):
            uri = SLASH + uri
        return uri

    def __str__(self) -> str:
        url = ''
        if self.scheme:
            url += '{0}://'.format(text_(self.scheme))
        if self.hostname:
            url += text_(self.hostname)
        if self.port:
            url += ':{0}'.format(self.port)
        if self.remainder:
            url += text_(self.remainder)
        return url

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'Url':
        """A URL within a proxy request line can have several styles.

        Example:
        For a HTTPS connect tunnel, url is like ``httpbin.org:443``
        For a HTTP proxy request, url is like ``http://httpbin.org/get?key=value``
        For origin-form requests, url is like ``/get`` and carries no host.

        Userinfo (``user:pass@``) in absolute URLs is dropped.
        """
        if raw.startswith(SLASH) and not raw.startswith(SLASH + SLASH):
            return cls(remainder=raw)
        scheme: Optional[bytes] = None
        if b'://' in raw:
            scheme, rest = raw.split(b'://', 1)
        elif raw.startswith(SLASH + SLASH):
            rest = raw[len(SLASH + SLASH):]
        else:
            # Authority form, e.g. CONNECT targets
            host, port = Url._parse(raw)
            return cls(hostname=host, port=port)
        match = AUTHORITY_END.search(rest)
        authority = rest if match is None else rest[:match.start()]
        remainder = None if match is None else rest[match.start():]
        host, port = Url._parse(authority)
        return cls(
            scheme=scheme,
            hostname=host,
            port=port,
            remainder=remainder,
        )

    @staticmethod
    def _parse(raw: bytes) -> Tuple[bytes, Optional[int]]:
        authority = raw.rsplit(AT, 1)[-1]
        if authority.startswith(b'['):
            # Bracketed IPv6 literal, optionally followed by :port
            host, sep, rest = authority.partition(b']')
            if not sep:
                raise HttpProtocolException(
                    'Unterminated IPv6 address %r' % raw,
                )
            host += sep
            port_part = rest[len(COLON):] if rest.startswith(COLON) else None
            if rest and port_part is None:
                raise HttpProtocolException('Invalid authority %r' % raw)
        elif authority.count(COLON) > 1:
            # Bare IPv6 literal, no port possible
            host, port_part = b'[' + authority + b']', None
        else:
            host, sep, port_part_ = authority.partition(COLON)
            port_part = port_part_ if sep else None
        if not host:
            raise HttpProtocolException('No host in %r' % raw)
        try:
            host.decode('utf-8')
        except UnicodeDecodeError as e:
            raise HttpProtocolException('Undecodable host in %r' % raw) from e
        if port_part is None or port_part == b'':
            return host, None
        try:
            port = int(port_part)
        except ValueError as e:
            raise HttpProtocolException('Invalid port in %r' % raw) from e
        if not 0 < port < 65536:
            raise HttpProtocolException('Port out of range in %r' % raw)
        return host, port

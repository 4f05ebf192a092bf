# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import argparse
import threading

from typing import TYPE_CHECKING, Any, Optional, Tuple, Type

from ..common.types import HostPort

if TYPE_CHECKING:   # pragma: no cover
    from ..http.handler import HttpProtocolHandler


def start_threaded_work(
        work_klass: Type['HttpProtocolHandler'],
        flags: argparse.Namespace,
        conn: socket.socket,
        addr: Optional[HostPort],
        **kwargs: Any,
) -> Tuple['HttpProtocolHandler', threading.Thread]:
    """Utility method to handle an accepted connection in a new thread."""
    work = work_klass.create(conn, addr, flags=flags, **kwargs)
    thread = threading.Thread(
        target=work.run,
        name='conn-%s' % work.client.address,
    )
    thread.daemon = True
    thread.start()
    return (work, thread)

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
import selectors
import threading

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Type

from .listener import TcpSocketListener
from .threaded import start_threaded_work
from ..common.types import HostPort
from ..common.constants import DEFAULT_SELECTOR_SELECT_TIMEOUT

if TYPE_CHECKING:   # pragma: no cover
    from ..http.handler import HttpProtocolHandler


logger = logging.getLogger(__name__)


class Acceptor:
    """Accepts connections from a listener and hands each one to
    ``work_klass`` running in its own thread.

    Connections never share state with one another.  Extra keyword
    arguments are passed through to every ``work_klass`` instance.

    ``run`` loops until ``running`` is set, checking it at least
    every ``DEFAULT_SELECTOR_SELECT_TIMEOUT`` seconds.
    """

    def __init__(
            self,
            listener: TcpSocketListener,
            flags: argparse.Namespace,
            work_klass: Type['HttpProtocolHandler'],
            **work_kwargs: Any,
    ) -> None:
        self.listener = listener
        self.flags = flags
        self.work_klass = work_klass
        self.work_kwargs: Dict[str, Any] = work_kwargs
        # Set to request shutdown
        self.running = threading.Event()
        self.selector: Optional[selectors.DefaultSelector] = None
        self._total = 0
        self._thread: Optional[threading.Thread] = None

    def setup(self) -> None:
        self._thread = threading.Thread(target=self.run, name='acceptor')
        self._thread.daemon = True
        self._thread.start()

    def shutdown(self) -> None:
        self.running.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def accept(
            self,
            events: List[Tuple[selectors.SelectorKey, int]],
    ) -> List[Tuple[socket.socket, Optional[HostPort]]]:
        works = []
        for _, mask in events:
            if mask & selectors.EVENT_READ:
                try:
                    conn, addr = self.listener.socket.accept()
                except BlockingIOError:
                    continue
                except OSError as e:
                    logger.warning('Accept failed: %r', e)
                    continue
                # Accepted sockets may inherit non-blocking
                # mode from the listener on some platforms
                conn.setblocking(True)
                works.append((conn, addr[:2] if addr else None))
        return works

    def run_once(self) -> None:
        assert self.selector is not None
        events = self.selector.select(timeout=DEFAULT_SELECTOR_SELECT_TIMEOUT)
        for conn, addr in self.accept(events):
            self._work(conn, addr)

    def run(self) -> None:
        self.selector = selectors.DefaultSelector()
        self.selector.register(self.listener.socket, selectors.EVENT_READ)
        try:
            while not self.running.is_set():
                self.run_once()
        finally:
            self.selector.unregister(self.listener.socket)
            self.selector.close()
            logger.debug('Acceptor shutdown after %d connections', self._total)

    def _work(self, conn: socket.socket, addr: Optional[HostPort]) -> None:
        try:
            _, thread = start_threaded_work(
                self.work_klass,
                self.flags,
                conn,
                addr,
                **self.work_kwargs,
            )
        except Exception:   # pylint: disable=broad-except
            logger.exception('Unable to start work for %r', addr)
            conn.close()
            return
        logger.debug(
            'Started work#%d in thread#%s', self._total, thread.ident,
        )
        self._total += 1

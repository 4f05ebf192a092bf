# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import time
import signal
import logging
import threading
from typing import Any, List, Optional

from .http import HttpProtocolHandler, AccessLog
from .core.acceptor import Acceptor
from .core.listener import TcpSocketListener
from .common.flag import FlagParser, flags
from .common.constants import (
    IS_WINDOWS, DEFAULT_VERSION, DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_FORMAT, DEFAULT_USERNAME, DEFAULT_PASSWORD,
    ENV_PROXY_USER, ENV_PROXY_PASSWORD,
)


logger = logging.getLogger(__name__)


flags.add_argument(
    '--version',
    '-v',
    action='store_true',
    default=DEFAULT_VERSION,
    help='Prints authproxy version.',
)

flags.add_argument(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    help='Valid options: DEBUG, INFO (default), WARNING, ERROR, CRITICAL. '
    'Both upper and lowercase values are allowed. '
    'You may also simply use the leading character e.g. --log-level d',
)

flags.add_argument(
    '--log-file',
    type=str,
    default=DEFAULT_LOG_FILE,
    help='Default: sys.stderr. Log file destination.',
)

flags.add_argument(
    '--log-format',
    type=str,
    default=DEFAULT_LOG_FORMAT,
    help='Log format for Python logger.',
)

flags.add_argument(
    '--basic-auth',
    type=str,
    default=None,
    help='Default: $' + ENV_PROXY_USER + ':$' + ENV_PROXY_PASSWORD +
    ' if set, otherwise ' + DEFAULT_USERNAME.decode() + ':' +
    DEFAULT_PASSWORD.decode() + '.  Colon separated user:password '
    'every client must present via Proxy-Authorization.',
)


class Proxy:
    """Proxy is a context manager to control the authproxy server.

    On setup, the access log is opened, the listener bound and an
    :class:`~authproxy.core.acceptor.Acceptor` started with
    :class:`~authproxy.http.handler.HttpProtocolHandler` work class.
    Every accepted client connection is handled in its own thread.
    """

    def __init__(self, input_args: Optional[List[str]] = None, **opts: Any) -> None:
        self.opts = opts
        self.flags = FlagParser.initialize(input_args, **opts)
        self.listener: Optional[TcpSocketListener] = None
        self.acceptor: Optional[Acceptor] = None
        self.access_log: Optional[AccessLog] = None

    def __enter__(self) -> 'Proxy':
        self.setup()
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()

    def setup(self) -> None:
        self.access_log = AccessLog(self.flags.access_log_file)
        # We setup listener first because of flags.port override
        # in case of ephemeral port being used
        self.listener = TcpSocketListener(flags=self.flags)
        try:
            self.listener.setup()
        except OSError:
            self.access_log.close()
            raise
        # Override flags.port to match the actual port
        # we are listening upon.  This is necessary to preserve
        # the server port when `--port=0` is used.
        self.flags.port = self.listener.port
        self.acceptor = Acceptor(
            self.listener,
            self.flags,
            HttpProtocolHandler,
            access_log=self.access_log,
        )
        self.acceptor.setup()
        logger.info(
            'Access log at %s, authenticating as %s',
            self.flags.access_log_file,
            self.flags.credentials.user.decode('utf-8', 'replace'),
        )
        if threading.current_thread() == threading.main_thread():
            self._register_signals()

    def shutdown(self) -> None:
        if self.acceptor:
            self.acceptor.shutdown()
            self.acceptor = None
        if self.listener:
            self.listener.shutdown()
            self.listener = None
        if self.access_log:
            self.access_log.close()
            self.access_log = None

    def _register_signals(self) -> None:
        signal.signal(signal.SIGINT, self._handle_exit_signal)
        signal.signal(signal.SIGTERM, self._handle_exit_signal)
        if not IS_WINDOWS:
            signal.signal(signal.SIGHUP, self._handle_exit_signal)

    @staticmethod
    def _handle_exit_signal(signum: int, _frame: Any) -> None:
        logger.debug('Received signal %d' % signum)
        sys.exit(0)


def sleep_loop(p: Optional[Proxy] = None) -> None:
    while True:
        try:
            time.sleep(1)
        except KeyboardInterrupt:
            break


def main(**opts: Any) -> None:
    with Proxy(sys.argv[1:], **opts) as p:
        sleep_loop(p)


def entry_point() -> None:
    main()

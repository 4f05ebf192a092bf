# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import time
import base64
import unittest
from typing import Optional, List, Any

from ..proxy import Proxy
from ..common.utils import new_socket_connection
from ..common.constants import DEFAULT_TIMEOUT, COLON


class TestCase(unittest.TestCase):
    """Base TestCase class that automatically setup and tear down authproxy.

    Subclasses may define ``PROXY_STARTUP_FLAGS`` and
    ``PROXY_STARTUP_OPTS`` to customize the server.  The proxy always
    listens on loopback with an ephemeral port, see ``proxy_port``.
    """

    DEFAULT_PROXY_STARTUP_FLAGS: List[str] = []

    PROXY: Optional[Proxy] = None
    INPUT_ARGS: Optional[List[str]] = None

    @classmethod
    def setUpClass(cls) -> None:
        cls.INPUT_ARGS = list(
            getattr(cls, 'PROXY_STARTUP_FLAGS', cls.DEFAULT_PROXY_STARTUP_FLAGS),
        )
        cls.INPUT_ARGS.append('--hostname')
        cls.INPUT_ARGS.append('127.0.0.1')
        cls.INPUT_ARGS.append('--port')
        cls.INPUT_ARGS.append('0')

        cls.PROXY = Proxy(
            cls.INPUT_ARGS,
            **getattr(cls, 'PROXY_STARTUP_OPTS', {}),
        )
        cls.PROXY.__enter__()
        cls.wait_for_server(cls.PROXY.flags.port)

    @classmethod
    def proxy_port(cls) -> int:
        assert cls.PROXY
        return int(cls.PROXY.flags.port)

    @classmethod
    def proxy_authorization(cls) -> bytes:
        """Proxy-Authorization header value the running proxy accepts."""
        assert cls.PROXY
        credentials = cls.PROXY.flags.credentials
        return b'Basic ' + base64.b64encode(
            credentials.user + COLON + credentials.password,
        )

    @staticmethod
    def wait_for_server(
        proxy_port: int,
        wait_for_seconds: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Wait for authproxy server to come up."""
        start_time = time.time()
        while True:
            try:
                new_socket_connection(
                    ('127.0.0.1', proxy_port),
                ).close()
                break
            except ConnectionRefusedError:
                time.sleep(0.1)

            if time.time() - start_time > wait_for_seconds:
                raise TimeoutError(
                    'Timed out while waiting for authproxy to start...',
                )

    @classmethod
    def tearDownClass(cls) -> None:
        assert cls.PROXY
        cls.PROXY.__exit__(None, None, None)
        cls.PROXY = None
        cls.INPUT_ARGS = None

    def run(self, result: Optional[unittest.TestResult] = None) -> Any:
        super().run(result)

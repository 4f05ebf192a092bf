# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import threading
from typing import Tuple

import unittest
from unittest import mock

from authproxy.core.relay import RelaySession
from authproxy.common.flag import FlagParser
from authproxy.core.connection import TcpClientConnection, TcpServerConnection


def recv_until_eof(sock: socket.socket) -> bytes:
    chunks = []
    while True:
        data = sock.recv(65536)
        if not data:
            return b''.join(chunks)
        chunks.append(data)


class TestRelaySession(unittest.TestCase):

    def setUp(self) -> None:
        self.flags = FlagParser.initialize([])
        self.client_proxy_side, self.client = socket.socketpair()
        self.upstream_proxy_side, self.origin = socket.socketpair()
        for sock in (self.client, self.origin):
            sock.settimeout(5)
        self.client_conn = TcpClientConnection(
            self.client_proxy_side, ('127.0.0.1', 54382),
        )
        self.upstream_conn = TcpServerConnection('127.0.0.1', 8899)
        with mock.patch(
            'authproxy.core.connection.server.new_socket_connection',
            return_value=self.upstream_proxy_side,
        ):
            self.upstream_conn.connect()

    def tearDown(self) -> None:
        self.client.close()
        self.origin.close()

    def start(self) -> Tuple[RelaySession, threading.Thread]:
        session = RelaySession(self.client_conn, self.upstream_conn, self.flags)
        thread = threading.Thread(target=session.run)
        thread.start()
        return session, thread

    def test_half_close_lets_origin_reply(self) -> None:
        session, thread = self.start()
        self.client.sendall(b'request body')
        self.client.shutdown(socket.SHUT_WR)
        # Origin observes end of request but can still answer
        self.assertEqual(recv_until_eof(self.origin), b'request body')
        self.origin.sendall(b'response')
        self.origin.shutdown(socket.SHUT_WR)
        self.assertEqual(recv_until_eof(self.client), b'response')
        thread.join(timeout=5)
        self.assertFalse(thread.is_alive())
        self.assertEqual(session.relayed, {'client': 12, 'server': 8})
        self.assertTrue(self.client_conn.closed)
        self.assertTrue(self.upstream_conn.closed)

    def test_waits_for_both_directions(self) -> None:
        _, thread = self.start()
        self.origin.sendall(b'early response')
        self.origin.shutdown(socket.SHUT_WR)
        self.assertEqual(recv_until_eof(self.client), b'early response')
        # Client to origin direction is still open
        thread.join(timeout=0.2)
        self.assertTrue(thread.is_alive())
        self.client.sendall(b'late request')
        self.client.shutdown(socket.SHUT_WR)
        self.assertEqual(recv_until_eof(self.origin), b'late request')
        thread.join(timeout=5)
        self.assertFalse(thread.is_alive())

    def test_origin_close_ends_session(self) -> None:
        _, thread = self.start()
        self.origin.close()
        self.assertEqual(recv_until_eof(self.client), b'')
        self.client.close()
        thread.join(timeout=5)
        self.assertFalse(thread.is_alive())
        self.assertTrue(self.client_conn.closed)
        self.assertTrue(self.upstream_conn.closed)

    def test_idle_timeout(self) -> None:
        self.flags.idle_timeout = 0.2
        _, thread = self.start()
        thread.join(timeout=5)
        self.assertFalse(thread.is_alive())
        self.assertTrue(self.client_conn.closed)
        self.assertTrue(self.upstream_conn.closed)

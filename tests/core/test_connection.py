# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
from typing import Optional

import unittest
from unittest import mock

from authproxy.core.connection import (
    TcpClientConnection, TcpConnection, TcpConnectionUninitializedException,
    TcpServerConnection, tcpConnectionTypes,
)


class TestTcpConnection(unittest.TestCase):
    class TcpConnectionToTest(TcpConnection):

        def __init__(
            self, conn: Optional[socket.socket] = None,
            tag: str = tcpConnectionTypes.CLIENT,
        ) -> None:
            super().__init__(tag)
            self._conn = conn

        @property
        def connection(self) -> socket.socket:
            if self._conn is None:
                raise TcpConnectionUninitializedException()
            return self._conn

    def testThrowsKeyErrorIfNoConn(self) -> None:
        self.conn = TestTcpConnection.TcpConnectionToTest()
        with self.assertRaises(TcpConnectionUninitializedException):
            self.conn.send(b'dummy')
        with self.assertRaises(TcpConnectionUninitializedException):
            self.conn.recv()
        with self.assertRaises(TcpConnectionUninitializedException):
            self.conn.close()

    def testClosesIfNotClosed(self) -> None:
        _conn = mock.MagicMock()
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.conn.close()
        _conn.close.assert_called()
        self.assertTrue(self.conn.closed)

    def testNoOpIfAlreadyClosed(self) -> None:
        _conn = mock.MagicMock()
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.conn.closed = True
        self.conn.close()
        _conn.close.assert_not_called()
        self.assertTrue(self.conn.closed)

    def testTags(self) -> None:
        self.assertEqual(
            TestTcpConnection.TcpConnectionToTest(
                tag=tcpConnectionTypes.CLIENT,
            ).tag,
            'client',
        )
        self.assertEqual(
            TestTcpConnection.TcpConnectionToTest(
                tag=tcpConnectionTypes.SERVER,
            ).tag,
            'server',
        )

    def testSendWritesEverything(self) -> None:
        _conn = mock.MagicMock()
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.assertEqual(self.conn.send(b'hello'), 5)
        _conn.sendall.assert_called_once_with(b'hello')

    def testRecvReturnsNoneOnEndOfStream(self) -> None:
        _conn = mock.MagicMock()
        _conn.recv.return_value = b''
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.assertIsNone(self.conn.recv())

    def testRecvReturnsData(self) -> None:
        _conn = mock.MagicMock()
        _conn.recv.return_value = b'hello'
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.assertEqual(self.conn.recv(1024), b'hello')
        _conn.recv.assert_called_once_with(1024)

    def testShutdownWrite(self) -> None:
        _conn = mock.MagicMock()
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.conn.shutdown_write()
        _conn.shutdown.assert_called_once_with(socket.SHUT_WR)
        self.assertFalse(self.conn.closed)

    def testShutdownWriteIgnoresTransportErrors(self) -> None:
        _conn = mock.MagicMock()
        _conn.shutdown.side_effect = OSError()
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.conn.shutdown_write()
        _conn.shutdown.assert_called_once_with(socket.SHUT_WR)

    def testShutdownWriteNoOpIfClosed(self) -> None:
        _conn = mock.MagicMock()
        self.conn = TestTcpConnection.TcpConnectionToTest(_conn)
        self.conn.close()
        self.conn.shutdown_write()
        _conn.shutdown.assert_not_called()


class TestTcpServerConnection(unittest.TestCase):

    def testUninitializedUntilConnected(self) -> None:
        conn = TcpServerConnection('example.com', 443)
        self.assertTrue(conn.closed)
        with self.assertRaises(TcpConnectionUninitializedException):
            conn.send(b'dummy')

    @mock.patch('authproxy.core.connection.server.new_socket_connection')
    def testConnect(self, mock_new_socket_connection: mock.Mock) -> None:
        conn = TcpServerConnection('example.com', 443)
        conn.connect(timeout=5.0)
        mock_new_socket_connection.assert_called_once_with(
            ('example.com', 443), timeout=5.0,
        )
        self.assertFalse(conn.closed)
        self.assertEqual(
            conn.connection,
            mock_new_socket_connection.return_value,
        )
        conn.connect()
        mock_new_socket_connection.assert_called_once()

    @mock.patch('authproxy.core.connection.server.new_socket_connection')
    def testConnectFailurePropagates(
            self, mock_new_socket_connection: mock.Mock,
    ) -> None:
        mock_new_socket_connection.side_effect = ConnectionRefusedError()
        conn = TcpServerConnection('127.0.0.1', 1)
        with self.assertRaises(ConnectionRefusedError):
            conn.connect()
        self.assertTrue(conn.closed)


class TestTcpClientConnection(unittest.TestCase):

    def setUp(self) -> None:
        self.proxy_side, self.app_side = socket.socketpair()
        self.conn = TcpClientConnection(self.proxy_side, ('127.0.0.1', 54382))

    def tearDown(self) -> None:
        self.conn.close()
        self.app_side.close()

    def testAddress(self) -> None:
        self.assertEqual(self.conn.address, '127.0.0.1:54382')
        self.assertEqual(
            TcpClientConnection(mock.MagicMock()).address, 'unknown',
        )

    def testRecvReturnsBufferedBytesFirst(self) -> None:
        self.app_side.sendall(b'GET / HTTP/1.1\r\n\r\nbody')
        self.assertEqual(self.conn.reader.readline(), b'GET / HTTP/1.1\r\n')
        self.assertEqual(self.conn.reader.readline(), b'\r\n')
        self.assertEqual(self.conn.recv(), b'body')
        self.app_side.sendall(b'more')
        self.assertEqual(self.conn.recv(), b'more')
        self.app_side.close()
        self.assertIsNone(self.conn.recv())

    def testCloseReleasesSocket(self) -> None:
        self.conn.close()
        self.assertTrue(self.conn.closed)
        self.assertTrue(self.conn.reader.closed)
        self.assertEqual(self.proxy_side.fileno(), -1)
        # Peer observes end-of-stream
        self.assertEqual(self.app_side.recv(1), b'')

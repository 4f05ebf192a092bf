# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import platform
import ipaddress


SYS_PLATFORM = platform.system()
IS_WINDOWS = SYS_PLATFORM == 'Windows'

CRLF = b'\r\n'
COLON = b':'
WHITESPACE = b' '
SLASH = b'/'
HASH = b'#'
AT = b'@'
HTTP_PROTO = b'http'
HTTP_1_1 = HTTP_PROTO.upper() + SLASH + b'1.1'

# Environment overrides, consulted once at startup by FlagParser
ENV_PROXY_PORT = 'PROXY_PORT'
ENV_PROXY_USER = 'PROXY_USER'
ENV_PROXY_PASSWORD = 'PROXY_PASSWORD'
ENV_PROXY_LOG_PATH = 'PROXY_LOG_PATH'

# Defaults
DEFAULT_BACKLOG = 100
DEFAULT_USERNAME = b'user'
DEFAULT_PASSWORD = b'pass'
DEFAULT_BUFFER_SIZE = 128 * 1024
DEFAULT_CLIENT_RECVBUF_SIZE = DEFAULT_BUFFER_SIZE
DEFAULT_SERVER_RECVBUF_SIZE = DEFAULT_BUFFER_SIZE
DEFAULT_IPV4_HOSTNAME = ipaddress.IPv4Address('0.0.0.0')
DEFAULT_PORT = 8080
DEFAULT_HTTP_PORT = 80
DEFAULT_ACCESS_LOG_FILE = 'proxy_access.log'
DEFAULT_ACCESS_LOG_FORMAT = '[{timestamp}] {client_address} {method} {target}'
DEFAULT_ACCESS_LOG_TIME_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_TIMEOUT = 10.0
DEFAULT_IDLE_TIMEOUT = 0.0
DEFAULT_VERSION = False
# Used by the acceptor to periodically check for shutdown
DEFAULT_SELECTOR_SELECT_TIMEOUT = 25 / 1000

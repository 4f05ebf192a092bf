# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import os
import sys
import argparse
import ipaddress

from typing import Optional, List, Any, cast

from .types import Credentials, IpAddress
from .utils import bytes_
from .logger import Logger
from .constants import (
    COLON, DEFAULT_PORT, DEFAULT_USERNAME, DEFAULT_PASSWORD,
    DEFAULT_ACCESS_LOG_FILE, ENV_PROXY_PORT, ENV_PROXY_USER,
    ENV_PROXY_PASSWORD, ENV_PROXY_LOG_PATH,
)
from .version import __version__


class FlagParser:
    """Wrapper around argparse module.

    Import `flag.flags` and use `add_argument` API
    to define custom flags within respective Python files.

    Flags are registered at module import time.  Do not
    register flags from within class methods, a second
    registration of the same flag raises ``argparse.ArgumentError``.

    Values resolve in the order: ``**opts`` passed to
    ``initialize``, command line flags, environment variables
    and finally the built-in defaults.  The resolved namespace
    is built once at startup and handed to every connection
    handler, request handling never reads the environment.
    """

    def __init__(self) -> None:
        self.args: Optional[argparse.Namespace] = None
        self.actions: List[str] = []
        self.parser = argparse.ArgumentParser(
            description='authproxy v%s' % __version__,
        )

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register a flag."""
        action = self.parser.add_argument(*args, **kwargs)
        self.actions.append(action.dest)
        return action

    def parse_args(
            self, input_args: Optional[List[str]],
    ) -> argparse.Namespace:
        """Parse flags from input arguments."""
        self.args = self.parser.parse_args(input_args)
        return self.args

    @staticmethod
    def initialize(
        input_args: Optional[List[str]] = None,
        **opts: Any,
    ) -> argparse.Namespace:
        if input_args is None:
            input_args = []

        # Parse flags
        args = flags.parse_args(input_args)

        # Print version and exit
        if args.version:
            print(__version__)
            sys.exit(0)

        # Setup logging module
        Logger.setup(args.log_file, args.log_level, args.log_format)

        args.credentials = cast(
            Credentials,
            opts.get(
                'credentials',
                FlagParser.resolve_credentials(
                    opts.get('basic_auth', args.basic_auth),
                ),
            ),
        )
        args.hostname = cast(
            IpAddress,
            ipaddress.ip_address(str(opts.get('hostname', args.hostname))),
        )
        args.port = cast(
            int,
            int(
                opts.get(
                    'port',
                    FlagParser.from_env(args.port, ENV_PROXY_PORT, DEFAULT_PORT),
                ),
            ),
        )
        args.backlog = cast(int, opts.get('backlog', args.backlog))
        args.access_log_file = cast(
            str,
            opts.get(
                'access_log_file',
                FlagParser.from_env(
                    args.access_log_file,
                    ENV_PROXY_LOG_PATH,
                    DEFAULT_ACCESS_LOG_FILE,
                ),
            ),
        )
        args.timeout = cast(float, opts.get('timeout', args.timeout))
        idle_timeout = cast(
            float, opts.get('idle_timeout', args.idle_timeout),
        )
        # 0 disables relay read timeouts
        args.idle_timeout = idle_timeout if idle_timeout and idle_timeout > 0 else None
        args.client_recvbuf_size = cast(
            int,
            opts.get(
                'client_recvbuf_size',
                args.client_recvbuf_size,
            ),
        )
        args.server_recvbuf_size = cast(
            int,
            opts.get(
                'server_recvbuf_size',
                args.server_recvbuf_size,
            ),
        )
        return args

    @staticmethod
    def from_env(value: Any, env_name: str, default: Any) -> Any:
        """Returns value when given on command line, otherwise the
        environment variable when set and non-empty, otherwise default."""
        if value is not None:
            return value
        return os.environ.get(env_name) or default

    @staticmethod
    def resolve_credentials(basic_auth: Optional[Any]) -> Credentials:
        """Expected credentials from a ``user:password`` string, falling
        back to ``PROXY_USER`` / ``PROXY_PASSWORD`` and then defaults."""
        if basic_auth:
            user, _, password = bytes_(basic_auth).partition(COLON)
            return Credentials(user, password)
        return Credentials(
            bytes_(os.environ.get(ENV_PROXY_USER) or DEFAULT_USERNAME),
            bytes_(os.environ.get(ENV_PROXY_PASSWORD) or DEFAULT_PASSWORD),
        )


flags = FlagParser()

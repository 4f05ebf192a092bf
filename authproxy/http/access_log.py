# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging
import datetime

from typing import NamedTuple, Optional

from .parser import InboundRequest
from ..common.flag import flags
from ..common.utils import text_
from ..common.logger import ACCESS_LOGGER_NAME, Logger
from ..common.constants import (
    DEFAULT_ACCESS_LOG_FILE, DEFAULT_ACCESS_LOG_FORMAT,
    DEFAULT_ACCESS_LOG_TIME_FORMAT, ENV_PROXY_LOG_PATH,
)


flags.add_argument(
    '--access-log-file',
    type=str,
    default=None,
    help='Default: $' + ENV_PROXY_LOG_PATH + ' if set, otherwise ' +
    DEFAULT_ACCESS_LOG_FILE + '.  One line is appended per '
    'authenticated request, and mirrored on stdout.',
)

logger = logging.getLogger(__name__)


class AccessLogEvent(NamedTuple):
    """Emitted once per authenticated request."""
    timestamp: datetime.datetime
    client_address: str
    method: str
    target: str

    @classmethod
    def from_request(
            cls,
            client_address: str,
            request: InboundRequest,
            timestamp: Optional[datetime.datetime] = None,
    ) -> 'AccessLogEvent':
        return cls(
            timestamp=timestamp or datetime.datetime.now(),
            client_address=client_address,
            method=text_(request.method, errors='replace'),
            target=text_(request.target, errors='replace'),
        )

    def format(self, log_format: str = DEFAULT_ACCESS_LOG_FORMAT) -> str:
        return log_format.format(
            timestamp=self.timestamp.strftime(DEFAULT_ACCESS_LOG_TIME_FORMAT),
            client_address=self.client_address,
            method=self.method,
            target=self.target,
        )


class AccessLog:
    """Line oriented sink for :class:`AccessLogEvent`.

    Thread safe, connection threads share a single instance.  Each
    instance writes through its own logger, so several sinks can be
    open in one process.
    """

    def __init__(self, access_log_file: str = DEFAULT_ACCESS_LOG_FILE) -> None:
        self.access_log_file = access_log_file
        self._logger = Logger.setup_access_log(
            access_log_file,
            name='%s.%x' % (ACCESS_LOGGER_NAME, id(self)),
        )

    def emit(self, event: AccessLogEvent) -> None:
        self._logger.info(event.format())

    def close(self) -> None:
        Logger.teardown_access_log(self._logger)

# -*- coding: utf-8 -*-
"""
    authproxy
    ~~~~~~~~~
    Authenticating forward HTTP proxy with CONNECT tunneling.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import logging
from typing import Any, Optional

from .constants import (
    DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT,
    DEFAULT_ACCESS_LOG_FILE,
)


SINGLE_CHAR_TO_LEVEL = {
    'D': 'DEBUG',
    'I': 'INFO',
    'W': 'WARNING',
    'E': 'ERROR',
    'C': 'CRITICAL',
}

ACCESS_LOGGER_NAME = 'authproxy.access'


def single_char_to_level(char: str) -> Any:
    return getattr(logging, SINGLE_CHAR_TO_LEVEL[char.upper()[0]])


class Logger:
    """Common logging utilities and setup."""

    @staticmethod
    def setup(
            log_file: Optional[str] = DEFAULT_LOG_FILE,
            log_level: str = DEFAULT_LOG_LEVEL,
            log_format: str = DEFAULT_LOG_FORMAT,
    ) -> None:
        if log_file:    # pragma: no cover
            logging.basicConfig(
                filename=log_file,
                filemode='a',
                level=single_char_to_level(log_level),
                format=log_format,
            )
        else:
            logging.basicConfig(
                level=single_char_to_level(log_level),
                format=log_format,
            )

    @staticmethod
    def setup_access_log(
            access_log_file: str = DEFAULT_ACCESS_LOG_FILE,
            name: str = ACCESS_LOGGER_NAME,
    ) -> logging.Logger:
        """Returns logger ``name`` appending plain lines to
        ``access_log_file`` and mirroring them on stdout.

        Handlers previously attached to ``name`` are replaced.  Access
        lines never reach the root logger, so they stay out of the
        diagnostic log configured by ``setup``."""
        access_logger = logging.getLogger(name)
        access_logger.setLevel(logging.INFO)
        access_logger.propagate = False
        Logger.teardown_access_log(access_logger)
        formatter = logging.Formatter('%(message)s')
        handlers = [
            logging.FileHandler(access_log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler(sys.stdout),
        ]
        for handler in handlers:
            handler.setFormatter(formatter)
            access_logger.addHandler(handler)
        return access_logger

    @staticmethod
    def teardown_access_log(access_logger: logging.Logger) -> None:
        for handler in list(access_logger.handlers):
            access_logger.removeHandler(handler)
            handler.close()

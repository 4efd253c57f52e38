from __future__ import annotations

import json
import logging
import sys
import textwrap
from typing import Any

from colorama import Fore, Style, just_fix_windows_console

from html_prep._service_locator import service_locator

just_fix_windows_console()

_LOG_NAME_COLOR = Fore.LIGHTBLACK_EX

_LOG_LEVEL_COLOR = {
    logging.DEBUG: Fore.BLUE,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED,
}

# Padded to five characters so that the messages line up
_LOG_LEVEL_SHORT_ALIAS = {
    logging.DEBUG: 'DEBUG',
    logging.INFO: 'INFO ',
    logging.WARNING: 'WARN ',
    logging.ERROR: 'ERROR',
}

_LOG_LEVEL_BY_NAME = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}

_LOG_MESSAGE_INDENT = ' ' * 6

# Attributes every record has, anything else came in through `extra`
_STANDARD_RECORD_ATTRIBUTES = frozenset(
    {*logging.LogRecord('dummy', 0, 'dummy', 0, 'dummy', None, None).__dict__, 'message', 'asctime'}
)


def get_configured_log_level() -> int:
    """Resolve the log level, an explicitly configured one wins over the interpreter development mode."""
    config = service_locator.get_configuration()

    if 'log_level' in config.model_fields_set:
        return _LOG_LEVEL_BY_NAME[config.log_level]

    if sys.flags.dev_mode:
        return logging.DEBUG

    return logging.INFO


def configure_logger(logger: logging.Logger, *, remove_old_handlers: bool = False) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(HtmlPrepLogFormatter())

    if remove_old_handlers:
        for old_handler in logger.handlers[:]:
            logger.removeHandler(old_handler)

    logger.addHandler(handler)
    logger.setLevel(get_configured_log_level())


class HtmlPrepLogFormatter(logging.Formatter):
    """Log formatter printing a colored, aligned level, the message, the extra fields as JSON and the traceback.

    Multiline messages and tracebacks are indented so they stay under the message column.
    """

    def __init__(
        self,
        include_logger_name: bool = True,  # noqa: FBT001, FBT002
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """Create a new instance.

        Args:
            include_logger_name: Include logger name at the beginning of the log line.
            args: Arguments passed to the parent class.
            kwargs: Keyword arguments passed to the parent class.
        """
        super().__init__(*args, **kwargs)
        self.include_logger_name = include_logger_name

    @staticmethod
    def _get_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
        return {key: value for key, value in record.__dict__.items() if key not in _STANDARD_RECORD_ATTRIBUTES}

    def format(self, record: logging.LogRecord) -> str:
        level_color = _LOG_LEVEL_COLOR.get(record.levelno, '')
        level_alias = _LOG_LEVEL_SHORT_ALIAS.get(record.levelno, record.levelname)
        parts = [f'{level_color}{level_alias}{Style.RESET_ALL} ']

        if self.include_logger_name:
            parts.insert(0, f'{_LOG_NAME_COLOR}[{record.name}]{Style.RESET_ALL} ')

        extra = self._get_extra_fields(record)

        # Populates `message` and `exc_text` on the record
        super().format(record)
        message = self.formatMessage(record)
        parts.append(message.replace('\n', '\n' + _LOG_MESSAGE_INDENT))

        if extra:
            extra_string = json.dumps(extra, ensure_ascii=False, default=str)
            parts.append(f' {Fore.LIGHTBLACK_EX}({extra_string}){Style.RESET_ALL}')

        if record.exc_text:
            parts.append('\n' + textwrap.indent(record.exc_text.rstrip(), _LOG_MESSAGE_INDENT))

        return ''.join(parts)

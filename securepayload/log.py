# securepayload/log.py
"""
Logging setup for the codec and its tooling.

Severity ladder: CRITICAL, ERROR, WARNING, NOTICE, INFO, DEBUG. NOTICE marks a
normal but significant condition (e.g. a successful decrypt) and sits between
INFO and WARNING.

Destinations are flags and can be combined: LogDest.CONSOLE | LogDest.SYSLOG.
Per-module overrides let one module log at DEBUG while the rest of the
package stays at NOTICE.
"""
import enum
import logging
import logging.handlers
import os
from typing import Optional, Union

NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

PACKAGE_LOGGER = "securepayload"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SYSLOG_FORMAT = "%(name)s[%(process)d]: %(levelname)s %(message)s"
DEFAULT_SYSLOG_NAME = "FirstAlert"


class LogDest(enum.IntFlag):
    NONE = 1 << 0
    CONSOLE = 1 << 1
    SYSLOG = 1 << 2
    FILE = 1 << 3


def parse_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level}")
    return value


def level_from_env(default: Union[int, str] = NOTICE) -> int:
    raw = os.getenv("FA_LOG_LEVEL")
    if not raw:
        return parse_level(default)
    return parse_level(raw)


def _syslog_handler(ident: str) -> logging.Handler:
    address = "/dev/log" if os.path.exists("/dev/log") else ("localhost", 514)
    handler = logging.handlers.SysLogHandler(address=address, facility=logging.handlers.SysLogHandler.LOG_USER)
    handler.ident = f"{ident}: "
    handler.setFormatter(logging.Formatter(SYSLOG_FORMAT))
    return handler


def setup_logging(
    level: Union[int, str] = NOTICE,
    destinations: LogDest = LogDest.CONSOLE,
    syslog_name: str = DEFAULT_SYSLOG_NAME,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Install handlers on the package logger and return it.

    Calling again replaces the previous handlers rather than stacking them.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(parse_level(level))

    for h in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(h)
        h.close()

    if destinations & LogDest.NONE or not destinations:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.propagate = False
        return pkg_logger

    if destinations & LogDest.CONSOLE:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        pkg_logger.addHandler(console)

    if destinations & LogDest.SYSLOG:
        pkg_logger.addHandler(_syslog_handler(syslog_name))

    if destinations & LogDest.FILE:
        if not log_file:
            raise ValueError("log_file is required for LogDest.FILE")
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        pkg_logger.addHandler(file_handler)

    pkg_logger.propagate = False
    return pkg_logger


def configure_module(name: str, level: Union[int, str]) -> logging.Logger:
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    module_logger = logging.getLogger(name)
    module_logger.setLevel(parse_level(level))
    return module_logger

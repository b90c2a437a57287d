from __future__ import annotations

import sys
import typing

from loguru import logger

from esquery.config.general import CONFIG

if typing.TYPE_CHECKING:
    from loguru import Record


def format_stdout(record: Record) -> str:
    """Format a loguru record for the console sink."""
    header = "<cyan>{time:YYYY-MM-DDTHH:mm:ss.SSSZ}</cyan> <level>{level:8}</level> "
    if record["extra"]:
        header += "<green>{extra}</green> "
    log = "{message:80} <cyan>{name}:{function}():{line}</cyan>\n{exception}"
    return header + log


def configure_logging(level: str | None = None) -> int:
    """Enable esquery logs and replace loguru sinks with a console sink.

    Libraries embedding esquery usually own their logging setup; call this
    only from an application entrypoint. Returns the sink id.
    """
    logger.enable("esquery")
    logger.remove()
    return logger.add(
        sys.stdout,
        format=format_stdout,
        colorize=True,
        backtrace=True,
        diagnose=False,
        level=level or CONFIG.log_level,
    )

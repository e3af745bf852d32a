from logging import LogRecord
from pathlib import Path

import rich
from loguru import logger
from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.theme import Theme

LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')


class _Highlighter(ReprHighlighter):
    highlights = [*ReprHighlighter.highlights, r'(?P<vb>\|)']  # noqa: RUF012


class _LoguruRichHandler(RichHandler):
    """Shows loguru level names the stdlib does not know (`TRACE`, `SUCCESS`)."""

    _NAMES = {logger.level(x).no: x for x in LEVELS}  # noqa: RUF012

    def emit(self, record: LogRecord) -> None:
        record.levelname = self._NAMES.get(record.levelno, record.levelname)
        return super().emit(record)


cnsl = rich.get_console()
cnsl.push_theme(Theme({'logging.level.success': 'blue', 'repr.vb': 'bold blue'}))


def level_number(level: int | str) -> int:
    if isinstance(level, int):
        return level

    try:
        return logger.level(level.upper()).no
    except ValueError as e:
        msg = f'`{level}` not in {list(LEVELS)}'
        raise KeyError(msg) from e


def set_logger(
    level: int | str = 20,
    *,
    log_file: str | Path | None = 'utilkit.log',
    rich_tracebacks=False,
    **kwargs,
):
    level = level_number(level)

    logger.remove()

    _handler = _LoguruRichHandler(
        console=cnsl,
        highlighter=_Highlighter(),
        markup=True,
        log_time_format='[%X]',
        rich_tracebacks=rich_tracebacks,
    )
    logger.add(_handler, level=level, format='{message}', **kwargs)

    if log_file:
        logger.add(
            log_file,
            level=min(20, level),
            rotation='1 month',
            retention='1 year',
            encoding='UTF-8-SIG',
        )

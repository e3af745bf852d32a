# ruff: noqa: DOC501

from pathlib import Path
from typing import Annotated, Literal

from cyclopts import App, Group, Parameter
from loguru import logger
from rich.table import Table

from utilkit import utils
from utilkit.config import Config
from utilkit.files import FileAccessMode
from utilkit.files import is_file_accessible as _accessible
from utilkit.size import ByteSize, MalformedSizeError
from utilkit.strings import split_string as _split

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)

Mode = Literal[
    'exist',
    'read',
    'write',
    'exec',
    'read-write',
    'read-exec',
    'write-exec',
    'read-write-exec',
]


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
    conf: Path | None = None,
):
    config = Config.from_toml(conf)
    utils.set_logger(
        level='DEBUG' if debug else config.log_level,
        log_file=config.log_file or None,
        rich_tracebacks=config.rich_tracebacks,
    )
    logger.debug('{}', config)

    app(tokens)


@app.command(group='Size')
def to_bytes(texts: list[str], /):
    """
    사람이 읽을 수 있는 크기 (`1.50KB`, `82GiB`)를 byte 단위로 변환.

    Parameters
    ----------
    texts : list[str]
        변환할 크기 문자열.
    """
    table = Table('input', 'bytes', 'canonical')
    failed = 0

    for text in texts:
        try:
            size = ByteSize.parse(text)
        except MalformedSizeError as e:
            logger.error('{}', e)
            table.add_row(text, '[red italic]invalid[/]', '-')
            failed += 1
        else:
            table.add_row(text, str(int(size)), str(size))

    utils.cnsl.print(table)

    if failed:
        raise SystemExit(1)


@app.command(group='Size')
def from_bytes(values: list[int], /):
    """byte 수를 `KB`, `MB`, ... 단위 문자열로 변환."""
    failed = 0

    for value in values:
        try:
            size = ByteSize(value)
        except ValueError as e:
            logger.error('{}', e)
            utils.cnsl.print(f'{value} | [red italic]invalid[/]')
            failed += 1
        else:
            utils.cnsl.print(f'{value} | {size}')

    if failed:
        raise SystemExit(1)


@app.command
def access(path: Path, *, mode: Mode = 'exist'):
    """
    파일 접근 가능 여부 확인.

    Parameters
    ----------
    path : Path
        대상 경로.
    mode : Mode, optional
        확인할 권한.
    """
    flag = FileAccessMode[mode.replace('-', '_').upper()]
    accessible = _accessible(path, flag)

    logger.debug('path="{}" | mode={!r}', path, flag)
    utils.cnsl.print(f'{path} | {mode} | {accessible}')


@app.command
def split(text: str, *, delimiter: list[str]):
    """문자열을 하나 이상의 구분자로 분할."""
    for part in _split(text, delimiter):
        utils.cnsl.print(repr(part))


def main():
    app.meta()


if __name__ == '__main__':
    main()

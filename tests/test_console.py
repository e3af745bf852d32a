import pytest
from loguru import logger

from utilkit.utils import level_number, set_logger


@pytest.mark.parametrize(
    ('level', 'expected'),
    [('trace', 5), ('DEBUG', 10), ('Success', 25), ('critical', 50), (30, 30)],
)
def test_level_number(level, expected):
    assert level_number(level) == expected


def test_unknown_level():
    with pytest.raises(KeyError, match='VERBOSE'):
        set_logger('VERBOSE')


@pytest.mark.usefixtures('reset_logger')
def test_set_logger_file(tmp_path, capsys):
    path = tmp_path / 'test.log'
    set_logger('WARNING', log_file=path)

    logger.info('file only')
    logger.warning('both sinks')
    logger.remove()  # close the file sink

    text = path.read_text(encoding='UTF-8-SIG')
    assert 'file only' in text
    assert 'both sinks' in text

    out = capsys.readouterr().out
    assert 'both sinks' in out
    assert 'file only' not in out


@pytest.mark.usefixtures('reset_logger')
def test_set_logger_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    set_logger('DEBUG', log_file=None)
    logger.debug('console only')

    assert not list(tmp_path.iterdir())


@pytest.mark.usefixtures('reset_logger')
def test_loguru_level_names(capsys):
    set_logger('TRACE', log_file=None)
    logger.success('level name check')
    logger.trace('trace check')

    out = capsys.readouterr().out
    assert 'SUCCESS' in out
    assert 'TRACE' in out
    assert 'Level 25' not in out

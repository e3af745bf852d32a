import pytest

from utilkit.config import Config


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Config.from_toml() == Config()


def test_missing_file(tmp_path):
    assert Config.from_toml(tmp_path / 'pyproject.toml') == Config()


def test_pyproject(tmp_path, monkeypatch):
    (tmp_path / 'pyproject.toml').write_text(
        '[project]\nname = "x"\n\n'
        '[tool.utilkit]\nlog_level = "warning"\nrich_tracebacks = true\n',
        encoding='UTF-8',
    )
    monkeypatch.chdir(tmp_path)

    config = Config.from_toml()

    assert config.log_level == 'warning'
    assert config.log_file == 'utilkit.log'
    assert config.rich_tracebacks is True


def test_pyproject_without_table(tmp_path):
    path = tmp_path / 'pyproject.toml'
    path.write_text('[tool.ruff]\nline-length = 88\n', encoding='UTF-8')

    assert Config.from_toml(path) == Config()


def test_utilkit_toml(tmp_path):
    path = tmp_path / 'utilkit.toml'
    path.write_text('log_level = 10\nlog_file = ""\n', encoding='UTF-8')

    assert Config.from_toml(str(path)) == Config(log_level=10, log_file='')


def test_unknown_option(tmp_path):
    path = tmp_path / 'utilkit.toml'
    path.write_text('level = "INFO"\n', encoding='UTF-8')

    with pytest.raises(ValueError, match='level'):
        Config.from_toml(path)

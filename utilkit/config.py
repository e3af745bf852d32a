import dataclasses as dc
import tomllib
from pathlib import Path
from typing import Self


@dc.dataclass
class Config:
    log_level: int | str = 'INFO'
    log_file: str = 'utilkit.log'  # empty string disables the file sink
    rich_tracebacks: bool = False

    @classmethod
    def _table(cls, path: Path) -> dict:
        config = tomllib.loads(path.read_text(encoding='UTF-8'))

        if path.name != 'pyproject.toml':
            return config  # utilkit.toml

        try:
            return config['tool']['utilkit']
        except KeyError:
            return {}

    @classmethod
    def from_toml(cls, path: str | Path | None = None, /) -> Self:
        path = Path.cwd() / 'pyproject.toml' if path is None else Path(path)

        if not path.is_file():
            return cls()

        table = cls._table(path)
        fields = {f.name for f in dc.fields(cls)}
        if unknown := set(table) - fields:
            msg = f'Unknown utilkit options in "{path}": {sorted(unknown)}'
            raise ValueError(msg)

        return cls(**table)

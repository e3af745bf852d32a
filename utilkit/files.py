import os
from enum import IntFlag


class FileAccessMode(IntFlag):
    # same bits as os.F_OK, os.X_OK, os.W_OK, os.R_OK
    EXIST = 0
    EXEC = 1
    WRITE = 2
    READ = 4

    READ_WRITE = READ | WRITE
    READ_EXEC = READ | EXEC
    WRITE_EXEC = WRITE | EXEC
    READ_WRITE_EXEC = READ | WRITE | EXEC


def is_file_accessible(
    path: str | os.PathLike,
    mode: FileAccessMode = FileAccessMode.EXIST,
) -> bool:
    return os.access(path, int(mode))

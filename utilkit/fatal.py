"""Abort on broken invariants ("this should never happen")."""

import os
from typing import NoReturn

from loguru import logger


def tsnh(message: str, *args, **kwargs) -> NoReturn:
    """
    Log `message` as CRITICAL and abort the process.

    Only for states the code can never legitimately reach; ordinary errors
    raise exceptions instead. `args` and `kwargs` are loguru format arguments.
    """
    logger.opt(depth=1).critical(message, *args, **kwargs)
    os.abort()

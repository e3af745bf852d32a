from collections.abc import Iterable


def to_lowercase(text: str) -> str:
    return text.lower()


def to_uppercase(text: str) -> str:
    return text.upper()


def split_string(
    source: str | Iterable[str],
    delimiters: str | Iterable[str],
) -> list[str]:
    """
    Split one string, or each of several strings, by one or more delimiters.

    Empty fields are kept. With several delimiters, the pieces are split by
    each delimiter in sorted order.
    """
    parts = [source] if isinstance(source, str) else list(source)
    delims = [delimiters] if isinstance(delimiters, str) else sorted(delimiters)

    for d in delims:
        if not d:
            msg = 'Empty delimiter'
            raise ValueError(msg)

        parts = [p for part in parts for p in part.split(d)]

    return parts

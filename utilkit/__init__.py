from .containers import are_equal, contains, get_keys
from .fatal import tsnh
from .files import FileAccessMode, is_file_accessible
from .size import ByteSize, MalformedSizeError, from_bytes, to_bytes
from .strings import split_string, to_lowercase, to_uppercase

__all__ = [
    'ByteSize',
    'FileAccessMode',
    'MalformedSizeError',
    'are_equal',
    'contains',
    'from_bytes',
    'get_keys',
    'is_file_accessible',
    'split_string',
    'to_bytes',
    'to_lowercase',
    'to_uppercase',
    'tsnh',
]

import collections
from abc import ABC, abstractmethod
from typing import List

# TYPEDEF DirEntry
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
DirEntry = collections.namedtuple('DirEntry', 'path name is_dir')

# TYPEDEF EntryMeta
# ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
EntryMeta = collections.namedtuple('EntryMeta', 'create_ts modify_ts size_bytes')
"""Timestamps are in milliseconds since the epoch"""


class StorageProvider(ABC):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS StorageProvider

    The backing storage which a Cache is loaded from. It is only read, and only while the Cache is being constructed.
    Implementations report failures by raising OSError (or a subclass).
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_dir(self, path: str) -> List[DirEntry]:
        """Returns the immediate entries of the given dir. Each entry's path is its full path."""
        pass

    @abstractmethod
    def get_meta(self, path: str) -> EntryMeta:
        pass

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        pass

    def start_scan(self, root_path: str):
        """Called once at the start of each scan, before anything under root_path is listed"""
        pass

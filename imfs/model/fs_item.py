import copy
import logging
from abc import ABC, abstractmethod
from typing import Optional

from imfs.util import file_util, time_util
from imfs.util.ensure import ensure_bytes, ensure_int

logger = logging.getLogger(__name__)


class FileSystemItem(ABC):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS FileSystemItem

    Payload of every node in the cache: either a File or a Directory. Timestamps are in milliseconds since the epoch.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, location: str, created: Optional[int], modified: Optional[int]):
        self.location: str = location
        if created is None:
            created = time_util.now_ms()
        if modified is None:
            modified = created
        self.created: int = ensure_int(created)
        self.modified: int = ensure_int(modified)

    @abstractmethod
    def is_dir(self) -> bool:
        pass

    def get_name(self) -> str:
        return file_util.derive_name(self.location)

    def get_tag(self) -> str:
        return self.get_name()

    def clone(self):
        return copy.copy(self)

    def __eq__(self, other):
        return isinstance(other, FileSystemItem) and other.__class__ == self.__class__ and other.__dict__ == self.__dict__

    def __ne__(self, other):
        return not self.__eq__(other)


class Directory(FileSystemItem):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS Directory

    Timestamps are stamped when the Directory is created in memory; they are never read from storage.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, location: str, created: Optional[int] = None, modified: Optional[int] = None):
        super().__init__(location, created, modified)

    def is_dir(self) -> bool:
        return True

    def get_tag(self) -> str:
        return f'{self.get_name()}/'

    def __repr__(self):
        return f'Directory(location="{self.location}" created={time_util.ts_to_str(self.created)} modified={time_util.ts_to_str(self.modified)})'


class File(FileSystemItem):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS File

    The whole content of the file is held in buffer, as immutable bytes.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, name: str, location: str, buffer: bytes, size: Optional[int] = None, created: Optional[int] = None,
                 modified: Optional[int] = None):
        super().__init__(location, created, modified)
        self.name: str = name
        self.buffer: bytes = ensure_bytes(buffer)
        if size is None:
            size = len(self.buffer)
        self.size: int = ensure_int(size)

    def is_dir(self) -> bool:
        return False

    def get_name(self) -> str:
        return self.name

    def __repr__(self):
        return f'File(name="{self.name}" location="{self.location}" size={self.size} ' \
               f'created={time_util.ts_to_str(self.created)} modified={time_util.ts_to_str(self.modified)})'

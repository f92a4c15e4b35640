import logging
import os
from typing import List, Set

from imfs.constants import READ_CHUNK_SIZE
from imfs.logging_constants import TRACE_ENABLED
from imfs.store.storage_provider import DirEntry, EntryMeta, StorageProvider
from imfs.util import time_util

logger = logging.getLogger(__name__)


class LocalDiskStorage(StorageProvider):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS LocalDiskStorage

    StorageProvider for the local disk. Files are always read through symlinks; symlinks to dirs are only treated as dirs
    (and so recursed into) if follow_symlinks is True.

    While following symlinks, a symlinked dir whose real path was already listed during the current scan is skipped. This
    covers links back to an ancestor as well as dirs whose links point at each other, so every scan terminates.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, follow_symlinks: bool = False):
        self.follow_symlinks: bool = follow_symlinks
        self._listed_real_dirs: Set[str] = set()

    def start_scan(self, root_path: str):
        self._listed_real_dirs.clear()

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def list_dir(self, path: str) -> List[DirEntry]:
        """Adapted from os._walk(), except that errors are not suppressed: any OSError goes to the caller"""
        entry_list: List[DirEntry] = []

        self._listed_real_dirs.add(os.path.realpath(path))
        with os.scandir(path) as scandir_it:
            for entry in scandir_it:
                entry_path = os.path.join(path, entry.name)
                try:
                    is_dir = entry.is_dir(follow_symlinks=True)
                except OSError:
                    # If is_dir() raises an OSError, consider that the entry is not
                    # a directory, same behaviour than os.path.isdir().
                    is_dir = False

                if is_dir and entry.is_symlink():
                    if not self.follow_symlinks:
                        logger.debug(f'Skipping symlink to dir: "{entry_path}"')
                        continue
                    if os.path.realpath(entry_path) in self._listed_real_dirs:
                        logger.warning(f'Skipping symlink to a dir which was already scanned: "{entry_path}"')
                        continue

                entry_list.append(DirEntry(path=entry_path, name=entry.name, is_dir=is_dir))

        entry_list.sort(key=lambda e: e.name)
        if TRACE_ENABLED:
            logger.debug(f'list_dir(): returning {len(entry_list)} entries for "{path}"')
        return entry_list

    def get_meta(self, path: str) -> EntryMeta:
        stat = os.stat(path)
        # "birth time" is not available on every platform; fall back to ctime
        create_ts = time_util.sec_to_ms(getattr(stat, 'st_birthtime', stat.st_ctime))
        modify_ts = time_util.sec_to_ms(stat.st_mtime)
        return EntryMeta(create_ts=create_ts, modify_ts=modify_ts, size_bytes=int(stat.st_size))

    def read_bytes(self, path: str) -> bytes:
        chunk_list: List[bytes] = []
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(READ_CHUNK_SIZE), b''):
                chunk_list.append(chunk)
        return b''.join(chunk_list)

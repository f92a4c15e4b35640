import logging
from collections import deque
from typing import Deque, List

from pydispatch import dispatcher

from imfs.constants import DEFAULT_TREE_ID
from imfs.error import LocationDoesNotExistError, ScanFailedError
from imfs.logging_constants import TRACE_ENABLED
from imfs.model.fs_item import Directory, File, FileSystemItem
from imfs.model.local_disk_tree import LocalDiskTree
from imfs.signal_constants import Signal
from imfs.store.storage_provider import DirEntry, StorageProvider
from imfs.util.stopwatch_sec import Stopwatch
from imfs.util.tree_node import TreeNode

logger = logging.getLogger(__name__)


class LocalDiskScanner:
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS LocalDiskScanner

    Walks the storage depth-first starting at root_location and builds a LocalDiskTree containing one node per entry, with the
    full content of every file. This is a one-shot operation: any storage error aborts the whole scan with ScanFailedError,
    and no tree is returned.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, storage: StorageProvider, root_location: str, tree_id: str = DEFAULT_TREE_ID):
        self.storage: StorageProvider = storage
        self.root_location: str = root_location
        self.tree_id: str = tree_id
        self.progress = 0

        self._dir_stack: Deque[TreeNode[str, FileSystemItem]] = deque()

    def scan(self) -> LocalDiskTree:
        if not self.storage.exists(self.root_location):
            raise LocationDoesNotExistError(self.root_location)

        logger.info(f'[{self.tree_id}] Scanning path: {self.root_location}')
        sw = Stopwatch()
        dispatcher.send(signal=Signal.LOAD_SUBTREE_STARTED, sender=self.tree_id)
        self.storage.start_scan(self.root_location)

        local_tree = LocalDiskTree(Directory(self.root_location))
        self._dir_stack.append(local_tree.get_root_node())

        while len(self._dir_stack) > 0:
            dir_node = self._dir_stack.pop()
            items_scanned_in_dir = self.scan_single_dir(local_tree, dir_node)
            if TRACE_ENABLED:
                logger.debug(f'[{self.tree_id}] Scanned {items_scanned_in_dir} items from dir "{dir_node.identifier}" '
                             f'(dir_stack size: {len(self._dir_stack)})')

        logger.info(f'[{self.tree_id}] {sw} Scan complete: loaded {len(local_tree)} items from "{self.root_location}"')
        dispatcher.send(signal=Signal.LOAD_SUBTREE_DONE, sender=self.tree_id, item_count=len(local_tree))
        return local_tree

    def scan_single_dir(self, local_tree: LocalDiskTree, dir_node: TreeNode[str, FileSystemItem]) -> int:
        target_dir: str = dir_node.identifier
        logger.debug(f'[{self.tree_id}] Scanning & building nodes for dir: "{target_dir}"')

        try:
            entry_list: List[DirEntry] = self.storage.list_dir(target_dir)
        except OSError as err:
            logger.error(f'[{self.tree_id}] An error occurred listing dir entries for "{target_dir}": {err}')
            raise ScanFailedError(target_dir, err) from err

        for entry in entry_list:
            if entry.is_dir:
                if TRACE_ENABLED:
                    logger.debug(f'[{self.tree_id}] Adding scanned dir: {entry.path}')
                child_node = local_tree.add_item(dir_node, entry.name, Directory(entry.path))
                self._dir_stack.append(child_node)
            else:
                if TRACE_ENABLED:
                    logger.debug(f'[{self.tree_id}] Adding scanned file: {entry.path}')
                local_tree.add_item(dir_node, entry.name, self._build_file(entry))

            self.progress += 1
            dispatcher.send(signal=Signal.PROGRESS_MADE, sender=self.tree_id, progress=1)

        return len(entry_list)

    def _build_file(self, entry: DirEntry) -> File:
        try:
            meta = self.storage.get_meta(entry.path)
            buffer = self.storage.read_bytes(entry.path)
        except OSError as err:
            logger.error(f'[{self.tree_id}] An error occurred reading file "{entry.path}": {err}')
            raise ScanFailedError(entry.path, err) from err

        return File(name=entry.name, location=entry.path, buffer=buffer, size=meta.size_bytes, created=meta.create_ts, modified=meta.modify_ts)

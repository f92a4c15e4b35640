import logging
from typing import List, Optional

from pydispatch import dispatcher

from imfs.app_config import AppConfig
from imfs.constants import CFG_SCAN_FOLLOW_SYMLINKS, CFG_SCAN_TREE_ID, DEFAULT_TREE_ID
from imfs.error import LocationAlreadyExistsError, LocationDoesNotExistError, LocationNotADirectoryError, NodeAlreadyPresentError
from imfs.model.fs_item import Directory, File, FileSystemItem
from imfs.model.local_disk_tree import LocalDiskTree
from imfs.signal_constants import Signal
from imfs.store.local_disk_scanner import LocalDiskScanner
from imfs.store.local_disk_storage import LocalDiskStorage
from imfs.store.storage_provider import StorageProvider
from imfs.util import file_util
from imfs.util.ensure import ensure_bool
from imfs.util.tree_node import TreeNode

logger = logging.getLogger(__name__)


class Cache:
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS Cache

    In-memory mirror of the subtree of storage rooted at a given location. The whole subtree, including the content of every
    file, is loaded when the Cache is constructed; after that, storage is never touched again. All other operations work only
    on memory, and changes are never written back to storage.

    Locations are full path strings and are compared verbatim.

    Not thread-safe: callers which share a Cache between threads must serialize access to it.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, location: str, storage: Optional[StorageProvider] = None, app_config: Optional[AppConfig] = None):
        follow_symlinks = False
        self.tree_id: str = DEFAULT_TREE_ID
        if app_config:
            follow_symlinks = ensure_bool(app_config.get_config(CFG_SCAN_FOLLOW_SYMLINKS, default_val=False, is_required=False))
            self.tree_id = app_config.get_config(CFG_SCAN_TREE_ID, default_val=DEFAULT_TREE_ID, is_required=False)

        if not storage:
            storage = LocalDiskStorage(follow_symlinks=follow_symlinks)

        self._host_location: str = location
        self._tree: LocalDiskTree = LocalDiskScanner(storage, location, self.tree_id).scan()

    def __len__(self):
        return len(self._tree)

    def location(self) -> str:
        return self._host_location

    def within(self, location: str) -> bool:
        return file_util.is_under(location, self._host_location)

    def exists(self, location: str) -> bool:
        return self._tree.contains(location)

    def read(self, location: str) -> FileSystemItem:
        """Returns a copy of the item at the given location. Changing it will not change the Cache."""
        return self._get_node(location).value.clone()

    def is_dir(self, location: str) -> bool:
        return self._get_node(location).value.is_dir()

    def list_dir(self, location: str) -> List[FileSystemItem]:
        """Returns copies of the items directly inside the given dir, sorted by location"""
        node = self._get_node(location)
        if not node.value.is_dir():
            raise LocationNotADirectoryError(location)

        child_list = [item.clone() for item in self._tree.get_child_items(location)]
        child_list.sort(key=lambda item: item.location)
        return child_list

    def mkdir(self, location: str):
        """Creates an empty dir. Not recursive: the parent dir must already exist."""
        if self.exists(location):
            raise LocationAlreadyExistsError(location)

        parent_node = self._get_parent_dir_node(location)
        self._add_item(parent_node, Directory(location))
        logger.debug(f'[{self.tree_id}] Created dir: "{location}"')

    def write(self, location: str, name: str, buffer: bytes):
        """Creates a file with the given content. Never overwrites: to replace an existing file, remove() it first."""
        if self.exists(location):
            raise LocationAlreadyExistsError(location)

        parent_node = self._get_parent_dir_node(location)
        file = File(name=name, location=location, buffer=buffer)
        self._add_item(parent_node, file)
        logger.debug(f'[{self.tree_id}] Wrote file: "{location}" ({file.size} bytes)')

    def remove(self, location: str):
        """Removes the given location, and if it is a dir, everything under it"""
        if not self.exists(location):
            raise LocationDoesNotExistError(location)

        count_removed = self._tree.remove(location)
        logger.debug(f'[{self.tree_id}] Removed "{location}" ({count_removed} items)')
        dispatcher.send(signal=Signal.NODE_REMOVED_IN_CACHE, sender=self.tree_id, location=location, count_removed=count_removed)

    def show(self, show_identifier: bool = False) -> str:
        return self._tree.show(show_identifier=show_identifier)

    # Internal
    # ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼

    def _get_node(self, location: str) -> TreeNode[str, FileSystemItem]:
        node = self._tree.get(location)
        if not node:
            raise LocationDoesNotExistError(location)
        return node

    def _get_parent_dir_node(self, location: str) -> TreeNode[str, FileSystemItem]:
        parent_path = file_util.derive_parent_path(location)
        parent_node = self._tree.get(parent_path)
        if not parent_node:
            raise LocationDoesNotExistError(parent_path, f'Cannot create "{location}": parent dir does not exist: "{parent_path}"')
        if not parent_node.value.is_dir():
            raise LocationNotADirectoryError(parent_path, f'Cannot create "{location}": parent is not a dir: "{parent_path}"')
        return parent_node

    def _add_item(self, parent_node: TreeNode[str, FileSystemItem], item: FileSystemItem):
        try:
            self._tree.add_item(parent_node, file_util.derive_name(item.location), item)
        except NodeAlreadyPresentError as err:
            # Different location string, but same name within the same parent (e.g. trailing separator)
            raise LocationAlreadyExistsError(item.location) from err

        dispatcher.send(signal=Signal.NODE_UPSERTED_IN_CACHE, sender=self.tree_id, item=item.clone())

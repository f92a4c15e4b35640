import logging
from typing import List, Optional

import treelib

from imfs.model.fs_item import Directory, FileSystemItem
from imfs.util.simple_tree import SimpleTree
from imfs.util.tree_node import TreeNode

logger = logging.getLogger(__name__)


class LocalDiskTree(SimpleTree[str, FileSystemItem]):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS LocalDiskTree

    Tree data structure, representing a subtree on a local disk, backed by a SimpleTree data structure.
    Identifiers are full paths, used verbatim.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, root_dir: Directory):
        super().__init__(root_dir.location, TreeNode(root_dir))

    def add_item(self, parent: TreeNode[str, FileSystemItem], name: str, item: FileSystemItem) -> TreeNode[str, FileSystemItem]:
        return self.insert(parent, item.location, name, item)

    def get_item(self, location: str) -> Optional[FileSystemItem]:
        node = self.get(location)
        if node:
            return node.value
        return None

    def get_child_items(self, location: str) -> List[FileSystemItem]:
        return [child.value for child in self.get_child_list_for_identifier(location)]

    def show(self, show_identifier: bool = False) -> str:
        """Returns a printable text rendering of the tree. Children are sorted by tag."""
        if not self.get_root_node():
            return ''

        display_tree = treelib.Tree()

        def add_to_display_tree(node: TreeNode[str, FileSystemItem]):
            tag = node.value.get_tag()
            if show_identifier:
                tag = f'{tag}  [{node.identifier}]'
            display_tree.create_node(tag=tag, identifier=node.identifier, parent=node.parent, data=node.value)

        self.for_each_node_breadth_first(action_func=add_to_display_tree)
        return display_tree.show(stdout=False)

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Generic, List, Optional

from imfs.util.tree_node import IdentifierT, TreeNode, ValueT

logger = logging.getLogger(__name__)


class BaseTree(Generic[IdentifierT, ValueT], ABC):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS BaseTree

    Parent of all trees. Subclasses supply node lookup; traversal is implemented here in terms of it.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """

    @abstractmethod
    def get_root_node(self) -> Optional[TreeNode[IdentifierT, ValueT]]:
        pass

    @abstractmethod
    def get_child_list_for_node(self, node: TreeNode[IdentifierT, ValueT]) -> List[TreeNode[IdentifierT, ValueT]]:
        pass

    @abstractmethod
    def get_node_for_identifier(self, identifier: IdentifierT) -> Optional[TreeNode[IdentifierT, ValueT]]:
        pass

    def for_each_node_breadth_first(self, action_func: Callable[[TreeNode[IdentifierT, ValueT]], None],
                                    subtree_root_identifier: Optional[IdentifierT] = None):
        node_queue: Deque[TreeNode[IdentifierT, ValueT]] = deque()
        if subtree_root_identifier is not None:
            # Only part of the tree
            subtree_root = self.get_node_for_identifier(subtree_root_identifier)
        else:
            subtree_root = self.get_root_node()

        if not subtree_root:
            return

        node_queue.append(subtree_root)

        while len(node_queue) > 0:
            node = node_queue.popleft()
            action_func(node)

            if node.children:
                for child in self.get_child_list_for_node(node):
                    node_queue.append(child)

    def get_subtree_bfs(self, subtree_root_identifier: Optional[IdentifierT] = None) -> List[TreeNode[IdentifierT, ValueT]]:
        """Returns a list containing a breadth-first traversal of the tree. If subtree_root_identifier is provided, do a breadth-first
        traversal of the subtree whose root is the given node (returning an empty list if this tree does not contain it).
        """
        bfs_list: List[TreeNode[IdentifierT, ValueT]] = []
        self.for_each_node_breadth_first(action_func=bfs_list.append, subtree_root_identifier=subtree_root_identifier)
        return bfs_list

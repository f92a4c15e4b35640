import logging
from collections import deque
from typing import Deque, Dict, Generic, List, Optional

from imfs.error import NodeAlreadyPresentError, NodeNotPresentError
from imfs.logging_constants import SUPER_DEBUG_ENABLED, TRACE_ENABLED
from imfs.util.base_tree import BaseTree
from imfs.util.tree_node import IdentifierT, TreeNode, ValueT

logger = logging.getLogger(__name__)


class SimpleTree(Generic[IdentifierT, ValueT], BaseTree[IdentifierT, ValueT]):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS SimpleTree

    A tree which is also a flat index. Every node reachable from the root has exactly one entry in _node_dict, keyed by its
    identifier, and _node_dict holds nothing else. Nodes refer to each other only by identifier, so the dict is the single owner
    of every node.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, root_identifier: IdentifierT, root_node: TreeNode[IdentifierT, ValueT]):
        root_node.identifier = root_identifier
        if root_node.name is None:
            root_node.name = str(root_identifier)
        self._root_node: Optional[TreeNode[IdentifierT, ValueT]] = root_node
        self._node_dict: Dict[IdentifierT, TreeNode[IdentifierT, ValueT]] = {root_identifier: root_node}

    def __len__(self):
        return len(self._node_dict)

    def get_root_node(self) -> Optional[TreeNode[IdentifierT, ValueT]]:
        return self._root_node

    def get_node_for_identifier(self, identifier: IdentifierT) -> Optional[TreeNode[IdentifierT, ValueT]]:
        return self._node_dict.get(identifier, None)

    def get(self, identifier: IdentifierT) -> Optional[TreeNode[IdentifierT, ValueT]]:
        return self._node_dict.get(identifier, None)

    def contains(self, identifier: IdentifierT) -> bool:
        return identifier in self._node_dict

    def insert(self, parent: TreeNode[IdentifierT, ValueT], identifier: IdentifierT, name: str, value: ValueT) -> TreeNode[IdentifierT, ValueT]:
        """Creates a new node wrapping the given value and adds it as a child of parent, which must already be in this tree.
        Nothing is changed if the insert is rejected."""
        if self._node_dict.get(parent.identifier, None) is not parent:
            raise NodeNotPresentError(f'Cannot add node ({identifier}): parent "{parent.identifier}" not found in tree!')

        if identifier in self._node_dict:
            raise NodeAlreadyPresentError(f'Cannot add node: identifier "{identifier}" is already present in this tree')

        if name in parent.children:
            raise NodeAlreadyPresentError(f'Cannot add node ({identifier}): parent "{parent.identifier}" already has a child named "{name}" '
                                          f'(identifier: "{parent.children[name]}")')

        node: TreeNode[IdentifierT, ValueT] = TreeNode(value, identifier=identifier, name=name)
        node.attach(parent.identifier)
        self._node_dict[identifier] = node
        parent.children[name] = identifier

        if TRACE_ENABLED:
            logger.debug(f'Inserted node "{identifier}" under parent "{parent.identifier}"')
        return node

    def remove(self, identifier: IdentifierT) -> int:
        """Removes the node with the given identifier along with all of its descendants. Returns the number of nodes removed.

        The whole subtree is collected before anything is changed, so a corrupt subtree raises NodeNotPresentError and leaves the
        tree as it was."""
        node = self._node_dict.get(identifier, None)
        if not node:
            raise NodeNotPresentError(f'Cannot remove node: identifier "{identifier}" not found in tree!')

        doomed_list: List[IdentifierT] = []
        node_stack: Deque[TreeNode[IdentifierT, ValueT]] = deque()
        node_stack.append(node)
        while len(node_stack) > 0:
            next_node = node_stack.pop()
            doomed_list.append(next_node.identifier)
            for child_name, child_identifier in next_node.children.items():
                child = self._node_dict.get(child_identifier, None)
                if not child:
                    raise NodeNotPresentError(f'Cannot remove node "{identifier}": its descendant "{child_name}" '
                                              f'(identifier: "{child_identifier}") is not present in tree')
                node_stack.append(child)

        # Unlink target node from its parent's children
        parent = self.get_parent(identifier)
        if parent:
            parent.children.pop(node.name, None)
        node.detach()

        if node is self._root_node:
            self._root_node = None

        for doomed_identifier in doomed_list:
            if SUPER_DEBUG_ENABLED:
                logger.debug(f'Removing node from tree: "{doomed_identifier}"')
            del self._node_dict[doomed_identifier]

        logger.debug(f'Removed {len(doomed_list)} nodes from tree (subtree root: "{identifier}")')
        return len(doomed_list)

    def get_parent(self, child_identifier: IdentifierT) -> Optional[TreeNode[IdentifierT, ValueT]]:
        child = self._node_dict.get(child_identifier, None)
        if not child or child.parent is None:
            return None
        return self._node_dict.get(child.parent, None)

    def get_child_list_for_node(self, node: TreeNode[IdentifierT, ValueT]) -> List[TreeNode[IdentifierT, ValueT]]:
        return [self._node_dict[child_identifier] for child_identifier in node.children.values()]

    def get_child_list_for_identifier(self, parent_identifier: IdentifierT) -> List[TreeNode[IdentifierT, ValueT]]:
        parent = self._node_dict.get(parent_identifier, None)
        if not parent:
            raise NodeNotPresentError(f'Cannot get children: parent "{parent_identifier}" is not in the tree!')
        return self.get_child_list_for_node(parent)

import logging
from typing import Dict, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

IdentifierT = TypeVar('IdentifierT')
ValueT = TypeVar('ValueT')


class TreeNode(Generic[IdentifierT, ValueT]):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS TreeNode

    A single element of a SimpleTree. Holds a payload (value), plus structural links which are expressed as identifiers rather than
    object references: children maps each child's name to the child's identifier, and parent is the identifier of the parent node.
    The owning SimpleTree resolves identifiers to nodes.

    The identifier of the node itself is recorded once, when the node is registered in a tree, so that removal never needs to
    rebuild it.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """
    def __init__(self, value: ValueT, identifier: Optional[IdentifierT] = None, name: Optional[str] = None):
        self.value: ValueT = value
        self.identifier: Optional[IdentifierT] = identifier
        self.name: Optional[str] = name
        self.children: Dict[str, IdentifierT] = {}
        self._parent: Optional[IdentifierT] = None

    @property
    def parent(self) -> Optional[IdentifierT]:
        return self._parent

    def attach(self, parent_identifier: IdentifierT):
        """Records the back-reference to the parent. Does NOT add this node to the parent's children: that is the tree's job."""
        if self._parent is not None and self._parent != parent_identifier:
            raise RuntimeError(f'Cannot attach node "{self.identifier}" to parent "{parent_identifier}": already attached to "{self._parent}"')
        self._parent = parent_identifier

    def detach(self):
        self._parent = None

    def is_root(self) -> bool:
        return self._parent is None

    def __repr__(self):
        return f'TreeNode(id="{self.identifier}" name="{self.name}" parent="{self._parent}" children={len(self.children)} value={self.value})'

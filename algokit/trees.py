"""Binary trees: a level-order filled tree and a simple binary search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A tree node; nodes compare by identity."""

    data: int
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)


def _inorder_nodes(root: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _size(node: Node | None) -> int:
    if node is None:
        return 0
    return _size(node.left) + 1 + _size(node.right)


class BinaryTree:
    """A binary tree that fills each level from left to right on insertion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return _size(self.root)

    def _levels(self) -> Iterator[list[Node]]:
        level = [self.root] if self.root is not None else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def _breadth_first(self) -> Iterator[Node]:
        for level in self._levels():
            yield from level

    def insert(self, data: int) -> Node:
        """Place ``data`` in the first free child slot in level order."""
        new = Node(data)
        if self.root is None:
            self.root = new
            return new
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            if node.left is None:
                node.left = new
                return new
            queue.append(node.left)
            if node.right is None:
                node.right = new
                return new
            queue.append(node.right)
        raise AssertionError("a non-empty tree always has a free slot")

    def delete(self, key: int) -> bool:
        """Remove ``key`` by moving the deepest node's value into its place.

        When several nodes hold ``key``, the last one in level order is used.
        Returns False when no node holds ``key``.
        """
        root = self.root
        if root is None:
            return False
        if root.left is None and root.right is None:
            if root.data == key:
                self.root = None
                return True
            return False
        key_node: Node | None = None
        parent_of: dict[int, Node] = {}
        deepest = root
        queue = deque([root])
        while queue:
            deepest = queue.popleft()
            if deepest.data == key:
                key_node = deepest
            for child in (deepest.left, deepest.right):
                if child is not None:
                    parent_of[id(child)] = deepest
                    queue.append(child)
        if key_node is None:
            return False
        parent = parent_of[id(deepest)]
        if parent.right is deepest:
            parent.right = None
        else:
            parent.left = None
        key_node.data = deepest.data
        return True

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path."""

        def measure(node: Node | None) -> int:
            if node is None or (node.left is None and node.right is None):
                return 0
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self.root)

    def maximum(self) -> int:
        """Return the largest value in the tree."""
        if self.root is None:
            raise ValueError("maximum() of an empty tree")
        return max(node.data for node in self._breadth_first())

    def minimum(self) -> int:
        """Return the smallest value in the tree."""
        if self.root is None:
            raise ValueError("minimum() of an empty tree")
        return min(node.data for node in self._breadth_first())

    def left_view(self) -> list[int]:
        """Return the first value of each level, top down."""
        return [level[0].data for level in self._levels()]

    def right_view(self) -> list[int]:
        """Return the last value of each level, top down."""
        return [level[-1].data for level in self._levels()]

    def mirror(self) -> None:
        """Swap the children of every node in place."""
        for node in self._breadth_first():
            node.left, node.right = node.right, node.left

    def lowest_common_ancestor(self, n1: int, n2: int) -> Node | None:
        """Return the lowest node above both ``n1`` and ``n2``.

        If only one of the values is present, the node holding it is returned;
        if neither is, None.
        """

        def search(node: Node | None) -> Node | None:
            if node is None:
                return None
            if node.data in (n1, n2):
                return node
            left = search(node.left)
            right = search(node.right)
            if left is not None and right is not None:
                return node
            return left if left is not None else right

        return search(self.root)

    def to_sum_tree(self) -> int:
        """Replace each value with the sum of its descendants' original values.

        Returns the sum of all original values.
        """

        def convert(node: Node | None) -> int:
            if node is None:
                return 0
            below = convert(node.left) + convert(node.right)
            original = node.data
            node.data = below
            return below + original

        return convert(self.root)

    def to_linked_list(self) -> Node | None:
        """Relink the nodes into a doubly linked list in in-order sequence.

        ``right`` points to the next node and ``left`` to the previous one.
        The tree is consumed and left empty; the head of the list is returned.
        """
        nodes = list(_inorder_nodes(self.root))
        self.root = None
        if not nodes:
            return None
        nodes[0].left = None
        nodes[-1].right = None
        for previous, following in zip(nodes, nodes[1:]):
            previous.right = following
            following.left = previous
        return nodes[0]

    def preorder(self) -> list[int]:
        """Return the values in root, left, right order."""
        if self.root is None:
            return []
        order: list[int] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            order.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def inorder(self) -> list[int]:
        """Return the values in left, root, right order."""
        return [node.data for node in _inorder_nodes(self.root)]


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the left."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return _size(self.root)

    def insert(self, key: int) -> Node:
        """Add ``key`` below the node it belongs under."""
        new = Node(key)
        if self.root is None:
            self.root = new
            return new
        node = self.root
        while True:
            if key <= node.data:
                if node.left is None:
                    node.left = new
                    return new
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return new
                node = node.right

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return [node.data for node in _inorder_nodes(self.root)]
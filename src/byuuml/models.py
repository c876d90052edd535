# src/byuuml/models.py

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(frozen=True, eq=False, repr=False)
class Node:
    """An immutable document node.

    ``children`` is an ordered tuple in document order; inline attributes
    come first, followed by nested child lines.

    Equality, hashing and repr never recurse, so arbitrarily deep trees are
    safe to compare and print.
    """

    name: str
    data: str = ""
    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def _outline(self) -> Iterator[tuple[str, str, int]]:
        # Pre-order (name, data, child count); determines the tree uniquely.
        pending = [self]
        while pending:
            node = pending.pop()
            yield node.name, node.data, len(node.children)
            pending.extend(reversed(node.children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self is other:
            return True
        return all(a == b for a, b in zip_longest(self._outline(), other._outline()))

    def __hash__(self) -> int:
        return hash(tuple(self._outline()))

    def __repr__(self) -> str:
        return (
            f"Node(name={self.name!r}, data={self.data!r}, "
            f"children=<{len(self.children)} nodes>)"
        )

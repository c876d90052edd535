# src/byuuml/parsing/freezer.py

from collections.abc import Sequence

from byuuml.errors import DataDecodeError
from byuuml.models import Node

from .header import ParseNode


def freeze(
    roots: Sequence[ParseNode],
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> tuple[Node, ...]:
    """Convert a finished ParseNode forest into immutable Nodes.

    Children are frozen before their parent (post-order), using an explicit
    stack so very deep or very wide documents never hit the recursion limit.
    Document order is preserved at every level.

    Raises:
        DataDecodeError: A node's data cannot be decoded with ``encoding``
            under the ``errors`` policy.
    """
    frozen: dict[int, Node] = {}
    pending: list[tuple[ParseNode, bool]] = [(root, False) for root in reversed(roots)]
    while pending:
        node, expanded = pending.pop()
        if not expanded:
            pending.append((node, True))
            pending.extend((child, False) for child in reversed(node.children))
            continue
        try:
            data = node.data.decode(encoding, errors)
        except UnicodeDecodeError as exc:
            raise DataDecodeError(
                f"Cannot decode data of node {node.name.decode('ascii')!r} "
                f"as {encoding}",
                line=node.data,
            ) from exc
        frozen[id(node)] = Node(
            name=node.name.decode("ascii"),
            data=data,
            children=tuple(frozen.pop(id(child)) for child in node.children),
        )
    return tuple(frozen.pop(id(root)) for root in roots)

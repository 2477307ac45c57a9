"""Generic traversal over the AST."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import fields

from moonparse.ast.model import Chunk, ElseIf, ExpressionKey, NameKey, Node, TableField

# Plain records that hold nodes but have no identity of their own.
_RECORD_TYPES = (Chunk, ElseIf, TableField, NameKey, ExpressionKey)


def children(value: Node | Chunk) -> Iterator[Node]:
    """Yield the nearest descendant nodes of `value`, in field order."""
    for f in fields(value):
        yield from _nodes_in(getattr(value, f.name))


def iter_nodes(root: Node | Chunk) -> Iterator[Node]:
    """Yield every node under `root` (and `root` itself if it is a node), depth-first, pre-order."""
    stack: list[Node | Chunk] = [root]
    while stack:
        current = stack.pop()
        if isinstance(current, Node):
            yield current
        stack.extend(reversed(list(children(current))))


def _nodes_in(value: object) -> Iterator[Node]:
    if isinstance(value, Node):
        yield value
    elif isinstance(value, _RECORD_TYPES):
        for f in fields(value):
            yield from _nodes_in(getattr(value, f.name))
    elif isinstance(value, tuple):
        for item in value:
            yield from _nodes_in(item)

"""Structural nesting: control blocks inside control blocks, braces or not.

`if (a) for (B b : bs) use(b);` has no nested braces at all, so the brace
count never sees it. Here every method is walked as a syntax tree instead.
Each node is sorted into a small closed set of kinds; entering any control
kind costs one level. Nodes wait on an explicit stack paired with the depth
they are entered at, so siblings always start from their parent's depth.
No visitor state survives the walk, and a long expression cannot hit the
recursion limit.

A try and its catch handlers sit side by side: the handlers are visited at
the try statement's own depth, not inside it. The finally block belongs to
the try.
"""

import enum

from javalang import tree
from javalang.ast import Node

from indent_warden._laws import MAX_CONTROL_DEPTH


class Kind(enum.Enum):
    CONDITIONAL = "conditional"
    LOOP = "loop"
    TRY_BLOCK = "try"
    HANDLER = "catch"
    OTHER = "other"


# javalang folds for-each into ForStatement (EnhancedForControl).
_KINDS = (
    (tree.IfStatement, Kind.CONDITIONAL),
    (tree.ForStatement, Kind.LOOP),
    (tree.WhileStatement, Kind.LOOP),
    (tree.DoStatement, Kind.LOOP),
    (tree.TryStatement, Kind.TRY_BLOCK),
    (tree.CatchClause, Kind.HANDLER),
)


def _kind(node):
    for node_type, kind in _KINDS:
        if isinstance(node, node_type):
            return kind
    return Kind.OTHER


def _child_nodes(value):
    """Yield the nodes held by one attribute value, flattening lists."""
    if isinstance(value, Node):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _child_nodes(item)


def _nodes_of(values):
    for value in values:
        yield from _child_nodes(value)


def _exceeds(method):
    stack = [(method, 0)]
    while stack:
        node, depth = stack.pop()
        kind = _kind(node)
        if kind is Kind.OTHER:
            stack.extend((child, depth) for child in _nodes_of(node.children))
            continue

        inner = depth + 1
        if inner > MAX_CONTROL_DEPTH:
            return True
        if kind is Kind.TRY_BLOCK:
            protected = (node.resources, node.block, node.finally_block)
            stack.extend((child, inner) for child in _nodes_of(protected))
            stack.extend((handler, depth) for handler in _child_nodes(node.catches))
        else:
            stack.extend((child, inner) for child in _nodes_of(node.children))
    return False


def has_nested_blocks(method):
    """True if any control construct in the method sits inside another.

    Depth is relative to the method: the first control block is level 1,
    anything entered from inside it is level 2 and fails.
    """
    return _exceeds(method)

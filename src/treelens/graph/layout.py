"""
Layout Engine.

Two passes over the visible tree:

1. Size: a leaf, or a node in the collapse set, needs one padded row;
   any other node needs the sum of its children's subtree heights.
2. Position: each child gets a vertical band equal to its subtree height,
   stacked in child order, and is centered in that band. Every child of a
   node sits at ``parent.x + parent.width + LEVEL_GAP``.

Layout is always a full pass; collapsing or expanding re-runs both passes.
"""

from typing import AbstractSet, List, Sequence

from ..config import (
    DEFAULT_TRANSFORM,
    EDGE_CURVE_OFFSET,
    FIT_FALLBACK_EXTENT,
    FIT_MARGIN,
    LAYOUT_ORIGIN,
    LEVEL_GAP,
    ROW_HEIGHT,
    ROW_PADDING,
)
from ..core.types import GraphEdge, GraphNode, ViewTransform


def _visible_preorder(root: GraphNode, collapsed: AbstractSet[str]) -> List[GraphNode]:
    order: List[GraphNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        if node.id not in collapsed:
            stack.extend(reversed(node.children))
    return order


def _measure(order: List[GraphNode], collapsed: AbstractSet[str]) -> None:
    # Reversed pre-order visits every child before its parent
    for node in reversed(order):
        if node.id in collapsed or not node.children:
            node._subtree_height = float(ROW_HEIGHT + ROW_PADDING)
        else:
            node._subtree_height = sum(child.subtree_height for child in node.children)


def _place(root: GraphNode, collapsed: AbstractSet[str]) -> None:
    origin_x, origin_y = LAYOUT_ORIGIN
    stack = [(root, origin_x, origin_y)]
    while stack:
        node, x, band_y = stack.pop()
        node.x = x
        node.y = band_y + node.subtree_height / 2 - ROW_HEIGHT / 2
        if node.id in collapsed:
            continue

        next_x = x + node.width + LEVEL_GAP
        bands = []
        for child in node.children:
            bands.append((child, next_x, band_y))
            band_y += child.subtree_height
        stack.extend(reversed(bands))


def layout_graph(root: GraphNode, collapsed: AbstractSet[str] | None = None) -> List[GraphNode]:
    """
    Position every visible node.

    Both passes use an explicit stack, so layout handles any depth the
    builders produce.

    Args:
        root: Graph root; x/y and subtree heights are updated in place.
        collapsed: Ids whose descendants are hidden.

    Returns:
        Visible nodes in pre-order.
    """
    collapsed = collapsed or frozenset()
    visible = _visible_preorder(root, collapsed)
    _measure(visible, collapsed)
    _place(root, collapsed)
    return visible


def edge_path(parent: GraphNode, child: GraphNode) -> str:
    """Cubic Bezier from the parent's right edge to the child's left edge."""
    sx = parent.x + parent.width
    sy = parent.y + ROW_HEIGHT / 2
    tx = child.x
    ty = child.y + ROW_HEIGHT / 2
    return (
        f"M {sx:g} {sy:g} "
        f"C {sx + EDGE_CURVE_OFFSET:g} {sy:g}, {tx - EDGE_CURVE_OFFSET:g} {ty:g}, {tx:g} {ty:g}"
    )


def visible_edges(nodes: Sequence[GraphNode], collapsed: AbstractSet[str] | None = None) -> List[GraphEdge]:
    """Parent -> child edges between visible nodes."""
    collapsed = collapsed or frozenset()
    by_id = {node.id: node for node in nodes}
    edges: List[GraphEdge] = []
    for parent in nodes:
        if parent.id in collapsed:
            continue
        for child in parent.children:
            placed = by_id.get(child.id)
            if placed is None:
                continue
            edges.append(GraphEdge(
                source_id=parent.id,
                target_id=placed.id,
                path=edge_path(parent, placed),
            ))
    return edges


def default_transform() -> ViewTransform:
    x, y, k = DEFAULT_TRANSFORM
    return ViewTransform(x=x, y=y, k=k)


def fit_view(nodes: Sequence[GraphNode], viewport_width: float, viewport_height: float) -> ViewTransform:
    """
    Scale and translate so all visible nodes fit the viewport.

    The scale never exceeds 1: fitting never zooms in past native size.
    """
    if not nodes:
        return default_transform()

    min_x = min(n.x for n in nodes)
    min_y = min(n.y for n in nodes)
    max_x = max(n.x + n.width for n in nodes)
    max_y = max(n.y + n.height for n in nodes)

    content_w = (max_x - min_x) or FIT_FALLBACK_EXTENT
    content_h = (max_y - min_y) or FIT_FALLBACK_EXTENT
    scale = min(
        (viewport_width - FIT_MARGIN) / content_w,
        (viewport_height - FIT_MARGIN) / content_h,
        1.0,
    )
    return ViewTransform(
        x=(viewport_width - content_w * scale) / 2 - min_x * scale,
        y=(viewport_height - content_h * scale) / 2 - min_y * scale,
        k=scale,
    )


def center_on(node: GraphNode, viewport_width: float, viewport_height: float, scale: float = 1.0) -> ViewTransform:
    """Transform that puts the node's center at the viewport center."""
    center_x = node.x + node.width / 2
    center_y = node.y + ROW_HEIGHT / 2
    return ViewTransform(
        x=viewport_width / 2 - center_x * scale,
        y=viewport_height / 2 - center_y * scale,
        k=scale,
    )

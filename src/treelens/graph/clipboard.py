"""Copy payload selection for a double-clicked graph node."""

from typing import Tuple

from ..core.types import CopyMode, GraphNode


def copy_text(node: GraphNode, mode: CopyMode | str = CopyMode.VALUE) -> Tuple[str, CopyMode]:
    """
    Pick the text to copy and report what it actually is.

    Value mode falls back to the label for nodes without a value (containers,
    JSON null), and reports that as a key copy.
    """
    try:
        mode = CopyMode(mode)
    except ValueError:
        mode = CopyMode.VALUE

    if mode == CopyMode.KEY or node.value is None:
        return node.label, CopyMode.KEY
    return node.full_value if node.full_value is not None else node.value, CopyMode.VALUE

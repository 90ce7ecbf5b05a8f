# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree search over a forest of nodes.

Traversal is depth-first, pre-order, and descends only into list content:
an element whose content is a single Node is matched itself but its child
is never visited.

Results are the nodes living in the tree, not copies. Inserting a found
node somewhere else shares the same instance between both positions.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .node import Node


def iter_nodes(forest: Iterable[Node]) -> Iterator[Node]:
    """Yield every reachable node in pre-order (parent before children).

    Example:
        >>> [n.tag for n in iter_nodes([ElementNode('ul', content=[ElementNode('li')])])]
        ['ul', 'li']
    """
    for node in forest:
        yield node
        content = getattr(node, "content", None)
        if isinstance(content, list):
            yield from iter_nodes(content)


def _matches(
    node: Node,
    tag: str | None,
    id: str | None,
    class_name: str | None,
) -> bool:
    if not isinstance(node, Node):
        # Raw items in list content (e.g. a bare string) never match
        return False
    if tag and node.tag == tag:
        return True
    attributes = node.attributes
    if not attributes:
        return False
    if id and attributes.get("id") == id:
        return True
    if class_name and attributes.get("class") == class_name:
        return True
    return False


def find_nodes(
    forest: Iterable[Node],
    tag: str | None = None,
    id: str | None = None,
    class_name: str | None = None,
) -> list[Node]:
    """Collect nodes matching a criterion, in document order.

    Args:
        forest: Root nodes to search.
        tag: Match nodes whose tag equals this value.
        id: Match nodes whose 'id' attribute equals this value.
        class_name: Match nodes whose whole 'class' attribute equals this value
            (no per-token matching).

    Returns:
        Matching nodes, ancestors before descendants. Empty when no
        criterion is given.
    """
    if not (tag or id or class_name):
        return []
    return [node for node in iter_nodes(forest) if _matches(node, tag, id, class_name)]

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conversion between nodes and plain dicts.

The dict shape is {'type': str, 'attributes': dict, 'content': ...},
where an empty or missing 'type' denotes a text node.

Example:
    >>> node_from_dict({'type': 'ul', 'content': [{'type': 'li', 'content': 'a'}]})
    ElementNode('ul', content=[1 nodes])
    >>> node_to_dict(TextNode('hi'))
    {'content': 'hi'}
"""

from __future__ import annotations

from typing import Any

from .node import ElementNode, Node, TextNode


def _content_from_value(value: Any) -> Any:
    if isinstance(value, list):
        return [node_from_dict(item) for item in value]
    if isinstance(value, dict):
        return node_from_dict(value)
    return value


def node_from_dict(data: Any) -> Any:
    """Build a node from its dict form.

    Nodes and anything that is not a dict (a bare string, None, a number)
    are returned unchanged; the serializer renders the latter as "".
    """
    if not isinstance(data, dict):
        return data
    tag = data.get("type")
    if not tag:
        return TextNode(data.get("content"))
    attributes = data.get("attributes")
    return ElementNode(
        tag,
        attributes=dict(attributes) if attributes else None,
        content=_content_from_value(data.get("content")),
    )


def forest_from_list(items: Any) -> list[Node]:
    """Build a forest from a list of dicts. Non-list input gives []."""
    if not isinstance(items, list):
        return []
    return [node_from_dict(item) for item in items]


def node_to_dict(node: Any) -> Any:
    """Convert a node to its dict form, omitting absent keys.

    Items that are not nodes are returned unchanged.
    """
    if not isinstance(node, Node):
        return node
    result: dict[str, Any] = {}
    if isinstance(node, ElementNode) and node.tag:
        result["type"] = node.tag
        if node.attributes:
            result["attributes"] = dict(node.attributes)
    content = node.content
    if isinstance(content, list):
        result["content"] = forest_to_list(content)
    elif isinstance(content, Node):
        result["content"] = node_to_dict(content)
    elif content is not None:
        result["content"] = content
    return result


def forest_to_list(forest: list[Any]) -> list[Any]:
    """Convert a forest to a list of dicts."""
    return [node_to_dict(node) for node in forest]

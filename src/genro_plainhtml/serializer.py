# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Serializer - convert nodes to HTML text.

Output is raw: neither text content nor attribute values are escaped.
Callers are responsible for escaping before building the tree.

Example:
    >>> node_to_string(ElementNode('p', {'dataFoo': '1'}, 'hi'))
    '<p data-foo="1">hi</p>'
    >>> node_to_string(ElementNode('br', content='ignored'))
    '<br />'
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .node import ElementNode, Node, TextNode

logger = logging.getLogger(__name__)

# Void elements: serialized as <tag ... /> with any content discarded
SELF_CLOSING_TAGS: frozenset[str] = frozenset({
    "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
    "keygen", "link", "meta", "param", "source", "track", "wbr",
})

_UPPERCASE = re.compile(r"([A-Z])")
_LINE_BREAKS = re.compile(r"\r\n|\n|\r")


def attribute_name(key: str) -> str:
    """Convert a camelCase attribute key to kebab-case (dataFoo -> data-foo)."""
    return _UPPERCASE.sub(lambda match: f"-{match.group(1).lower()}", key)


def attributes_to_string(attributes: dict[str, str] | None) -> str:
    """Render attributes as ' key="value"' pairs in insertion order.

    Returns an empty string for None or an empty mapping.
    """
    if not attributes:
        return ""
    return "".join(
        f' {attribute_name(key)}="{value}"' for key, value in attributes.items()
    )


def _content_to_string(content: object) -> str:
    if isinstance(content, list):
        return forest_to_string(content)
    if isinstance(content, Node):
        return node_to_string(content)
    if isinstance(content, str):
        return content
    return str(content) if content else ""


def node_to_string(node: Node) -> str:
    """Serialize a single node (and its subtree) to HTML."""
    if isinstance(node, TextNode):
        return node.content if isinstance(node.content, str) else ""

    if not isinstance(node, ElementNode) or not node.tag:
        # Untagged nodes behave as text
        content = getattr(node, "content", None)
        return content if isinstance(content, str) else ""

    attrs = attributes_to_string(node.attributes)

    if node.tag in SELF_CLOSING_TAGS:
        if node.content:
            logger.debug("Discarding content of self-closing <%s>", node.tag)
        return f"<{node.tag}{attrs} />"

    return f"<{node.tag}{attrs}>{_content_to_string(node.content)}</{node.tag}>"


def forest_to_string(forest: Iterable[Node]) -> str:
    """Concatenate the serialization of every node in order."""
    return "".join(node_to_string(node) for node in forest)


def strip_line_breaks(text: str) -> str:
    """Remove every \\r\\n, \\n and \\r sequence."""
    return _LINE_BREAKS.sub("", text)

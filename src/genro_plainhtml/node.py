# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PlainHtml node classes.

A tree is made of two kinds of nodes:

- TextNode: raw text, emitted verbatim (no escaping)
- ElementNode: a tag with attributes and optional content

ElementNode.content is one of:
    - None (no content)
    - str (raw text placed between the tags)
    - a single Node
    - a list of Nodes (the only form that search and insertion descend into)
"""

from __future__ import annotations

from typing import Any, Union


class Node:
    """Common base for TextNode and ElementNode."""

    __slots__ = ()

    tag: str | None = None
    attributes: dict[str, str] | None = None

    def to_html(self) -> str:
        """Render this node alone as a complete document string."""
        from .document import Document
        return Document([self]).get_html()

    def to_complete_html(self) -> str:
        """Render this node inside head/body boilerplate."""
        from .document import Document
        return Document([self]).with_boilerplate().get_html()


class TextNode(Node):
    """A text node carrying raw string content.

    Example:
        >>> TextNode('Hello').content
        'Hello'
    """

    __slots__ = ('content',)

    def __init__(self, content: Any = None) -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"TextNode({self.content!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextNode):
            return NotImplemented
        return self.content == other.content

    __hash__ = None  # type: ignore[assignment]


class ElementNode(Node):
    """An element node: tag, attributes and content.

    Attributes are kept in insertion order; camelCase keys are rendered
    in kebab-case by the serializer (dataFoo -> data-foo).

    Equality is structural and recurses into content. A node inserted into
    its own subtree makes == (and serialization) raise RecursionError.

    Example:
        >>> ul = ElementNode('ul', content=[ElementNode('li'), ElementNode('li')])
        >>> ul.children
        [ElementNode('li'), ElementNode('li')]
    """

    __slots__ = ('tag', 'attributes', 'content')

    def __init__(
        self,
        tag: str,
        attributes: dict[str, str] | None = None,
        content: Content = None,
    ) -> None:
        """Initialize an ElementNode.

        Args:
            tag: The tag name (e.g. 'div', 'meta').
            attributes: Optional mapping of attribute name to value.
            content: None, a string, a single Node or a list of Nodes.
                A list is stored as is, not copied.
        """
        self.tag = tag
        self.attributes = attributes if attributes is not None else {}
        self.content = content

    def __repr__(self) -> str:
        parts = [repr(self.tag)]
        if self.attributes:
            parts.append(f"attributes={self.attributes!r}")
        if self.content is not None:
            if isinstance(self.content, list):
                parts.append(f"content=[{len(self.content)} nodes]")
            else:
                parts.append(f"content={self.content!r}")
        return f"ElementNode({', '.join(parts)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementNode):
            return NotImplemented
        return (
            self.tag == other.tag
            and self.attributes == other.attributes
            and self.content == other.content
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def children(self) -> list[Node]:
        """Child nodes reachable by search and insertion.

        Only list content counts: a single Node or a string yields [].
        """
        return self.content if isinstance(self.content, list) else []

    def get_attr(self, attr: str, default: str | None = None) -> str | None:
        """Return attribute value or default if missing."""
        return self.attributes.get(attr, default)

    def set_attr(self, _attr: dict[str, str] | None = None, **kwargs: str) -> None:
        """Set attributes on the node.

        Args:
            _attr: Dictionary of attributes to set.
            **kwargs: Additional attributes as keyword arguments.
        """
        if _attr:
            self.attributes.update(_attr)
        self.attributes.update(kwargs)


Content = Union[str, Node, list, None]

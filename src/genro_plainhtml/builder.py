# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - fluent construction of element nodes.

Two entry points build the same ElementNode:

1. The element() function, taking tag, attributes and children:

    >>> element('p', {'class': 'lead'}, 'Hello ', element('b', None, 'World'))
    ElementNode('p', attributes={'class': 'lead'}, content=[2 nodes])

2. HtmlBuilder, whose attributes are tag methods (any tag name is accepted):

    >>> h = HtmlBuilder()
    >>> page = h.div(h.h1('Welcome'), h.p('Hello'), id='main', class_='container')
    >>> page.to_html()
    '<!DOCTYPE html><html><div id="main" class="container"><h1>Welcome</h1><p>Hello</p></div></html>'

Strings become TextNode children; None children are dropped and nested
lists or tuples are flattened.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Union

from .node import ElementNode, Node, TextNode

Child = Union[Node, str, Iterable, None]


def _flatten_children(children: Iterable[Any]) -> list[Node]:
    result: list[Node] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, Node):
            result.append(child)
        elif isinstance(child, str):
            result.append(TextNode(child))
        elif isinstance(child, (list, tuple)):
            result.extend(_flatten_children(child))
        else:
            result.append(TextNode(str(child)))
    return result


def element(tag: str, attributes: dict[str, str] | None = None, *children: Child) -> ElementNode:
    """Create an ElementNode whose content is the list of children.

    Args:
        tag: The tag name.
        attributes: Optional attribute mapping (copied).
        *children: Nodes, strings, None or nested lists of them.
    """
    return ElementNode(
        tag,
        attributes=dict(attributes) if attributes else None,
        content=_flatten_children(children),
    )


class HtmlBuilder:
    """Builder exposing one method per tag name via __getattr__.

    Keyword arguments become attributes. A trailing underscore is
    removed so reserved words can be used (class_ -> class, for_ -> for).

    Usage:
        >>> h = HtmlBuilder()
        >>> h.ul(h.li('Item 1'), h.li('Item 2'), class_='menu')
        ElementNode('ul', attributes={'class': 'menu'}, content=[2 nodes])
    """

    def __getattr__(self, name: str) -> Callable[..., ElementNode]:
        """Dynamic method for any HTML tag.

        Raises:
            AttributeError: For private names.
        """
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        return self._make_tag_method(name)

    def _make_tag_method(self, name: str) -> Callable[..., ElementNode]:
        """Create a method for a specific tag."""

        def tag_method(*children: Child, **attr: str) -> ElementNode:
            attributes = {key[:-1] if key.endswith("_") else key: value for key, value in attr.items()}
            return element(name, attributes, *children)

        return tag_method

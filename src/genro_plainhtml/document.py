# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document - a forest of nodes rendered as a complete HTML page.

The Document owns an ordered list of root nodes (the forest). Mutations
work in place on that list and on the nodes it reaches; nothing is copied.

Example:
    Building a page::

        doc = Document([ElementNode('p', content='hi')])
        doc.set_title('Home')
        doc.add_element_to_target(ElementNode('meta', {'charset': 'utf-8'}), tag='head')
        doc.get_html()
        # '<!DOCTYPE html><html><p>hi</p><head><title>Home</title>...'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

from .node import ElementNode, Node
from .search import find_nodes
from .serializer import forest_to_string, node_to_string, strip_line_breaks

logger = logging.getLogger(__name__)

DOCTYPE = "<!DOCTYPE html>"

# Meta tags placed in the head by with_boilerplate()
BOILERPLATE_META: tuple[dict[str, str], ...] = (
    {"charset": "utf-8"},
    {
        "name": "viewport",
        "content": "width=device-width, initial-scale=1, shrink-to-fit=no",
    },
)


def _insertion_list(node: Node) -> list[Node] | None:
    """Return the list to append children to, creating it if content is empty.

    Content that is present but not a list (a string or a single Node) is
    left untouched and None is returned: the insertion is skipped.
    """
    content = getattr(node, "content", None)
    if isinstance(content, list):
        return content
    if not content:
        node.content = []
        return node.content
    return None


class Document:
    """An HTML document built from a forest of nodes.

    Attributes:
        nodes: The forest, the same list object given to the constructor.
    """

    __slots__ = ('_content',)

    def __init__(self, content: list[Node] | None = None) -> None:
        """Initialize a Document.

        Args:
            content: The list of root nodes. It is kept by reference.
                Anything that is not a list gives an empty forest.
        """
        if not isinstance(content, list):
            if content is not None:
                logger.debug(
                    "Document content must be a list, not %s: using empty forest",
                    type(content).__name__,
                )
            content = []
        self._content: list[Node] = content

    @classmethod
    def from_dicts(cls, items: Any) -> Document:
        """Create a Document from plain dicts ({'type', 'attributes', 'content'})."""
        from .loading import forest_from_list
        return cls(forest_from_list(items))

    def __repr__(self) -> str:
        tags = [getattr(node, 'tag', None) or '#text' for node in self._content]
        return f"Document({tags})"

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._content)

    @property
    def nodes(self) -> list[Node]:
        """The root nodes of this document."""
        return self._content

    def as_list(self) -> list[dict[str, Any]]:
        """Convert the forest to plain dicts."""
        from .loading import forest_to_list
        return forest_to_list(self._content)

    # ==================== Rendering ====================

    def get_html(self, html_tag_attributes: dict[str, str] | None = None) -> str:
        """Render the whole document as a single line of HTML.

        Args:
            html_tag_attributes: Attributes for the <html> tag.

        Returns:
            '<!DOCTYPE html><html ...>...</html>' with every line break removed.
        """
        root = ElementNode(
            "html",
            attributes=html_tag_attributes,
            content=forest_to_string(self._content),
        )
        return strip_line_breaks(f"{DOCTYPE}{node_to_string(root)}")

    def write(self, filename: str, output_dir: str | Path | None = None) -> str:
        """Save get_html() to output_dir/filename.

        Args:
            filename: Name of the file to write.
            output_dir: Directory to save to (default: current directory).
                It is created when missing.

        Returns:
            The path of the written file.
        """
        output_dir = Path.cwd() if output_dir is None else Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / filename
        output_path.write_text(self.get_html(), encoding="utf-8")
        return str(output_path)

    # ==================== Search ====================

    def find_nodes_by_type(self, tag: str) -> list[Node]:
        """Return all nodes with the given tag, in document order."""
        return find_nodes(self._content, tag=tag)

    def find_nodes_by_id(self, id: str) -> list[Node]:
        """Return all nodes whose id attribute equals id."""
        return find_nodes(self._content, id=id)

    def find_nodes_by_class_name(self, class_name: str) -> list[Node]:
        """Return all nodes whose class attribute equals class_name."""
        return find_nodes(self._content, class_name=class_name)

    # ==================== Mutation ====================

    def set_title(self, title: str) -> str:
        """Set the document title.

        Replaces the content of the first <title>; otherwise appends a title
        to the first <head>; otherwise appends a new head holding the title
        to the forest.

        Returns:
            The title.
        """
        title_nodes = self.find_nodes_by_type("title")
        if title_nodes:
            title_nodes[0].content = title
            return title

        head_nodes = self.find_nodes_by_type("head")
        if head_nodes:
            children = _insertion_list(head_nodes[0])
            if children is not None:
                children.append(ElementNode("title", content=title))
            else:
                logger.debug("<head> content is not a list: title not added")
            return title

        self._content.append(
            ElementNode("head", content=[ElementNode("title", content=title)])
        )
        return title

    def add_element(self, node: Node | list[Node]) -> Document:
        """Append a node, or a list of nodes in order, to the forest."""
        if isinstance(node, list):
            self._content.extend(node)
        else:
            self._content.append(node)
        return self

    def add_element_to_target(
        self,
        node: Node,
        *,
        id: str | None = None,
        class_name: str | None = None,
        tag: str | None = None,
    ) -> Document:
        """Append node to every node matching the target.

        The target is resolved by id, else class_name, else tag. Without any
        of them the call does nothing. Targets whose content is a string or a
        single Node are skipped.

        The same node instance is appended to every target.
        """
        if id:
            targets = self.find_nodes_by_id(id)
        elif class_name:
            targets = self.find_nodes_by_class_name(class_name)
        elif tag:
            targets = self.find_nodes_by_type(tag)
        else:
            return self

        for target in targets:
            children = _insertion_list(target)
            if children is None:
                logger.debug("Skipping target %r: content is not a list", target)
                continue
            children.append(node)
        return self

    def with_boilerplate(self) -> Document:
        """Wrap the forest as <head> (charset and viewport meta) plus <body>.

        The current root nodes move into a new body element; the forest
        becomes [head, body]. The body receives a snapshot list, so the
        document never contains itself.
        """
        head = ElementNode(
            "head",
            content=[ElementNode("meta", attributes=dict(meta)) for meta in BOILERPLATE_META],
        )
        body = ElementNode("body", content=list(self._content))
        self._content[:] = [head, body]
        return self

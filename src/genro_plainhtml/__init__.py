# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-PlainHtml - In-memory HTML trees serialized to a single-line document.

A lightweight, zero-dependency library for the Genro ecosystem: build a
forest of nodes, query it by tag, id or class, mutate it, and render it
as '<!DOCTYPE html><html>...</html>'.
"""

__version__ = "0.1.0"

from .builder import HtmlBuilder, element
from .document import BOILERPLATE_META, DOCTYPE, Document
from .loading import forest_from_list, forest_to_list, node_from_dict, node_to_dict
from .node import ElementNode, Node, TextNode
from .search import find_nodes, iter_nodes
from .serializer import SELF_CLOSING_TAGS, attributes_to_string, node_to_string

__all__ = [
    # Nodes
    "Node",
    "TextNode",
    "ElementNode",
    # Document
    "Document",
    "DOCTYPE",
    "BOILERPLATE_META",
    # Serializer
    "SELF_CLOSING_TAGS",
    "attributes_to_string",
    "node_to_string",
    # Search
    "find_nodes",
    "iter_nodes",
    # Loading
    "node_from_dict",
    "forest_from_list",
    "node_to_dict",
    "forest_to_list",
    # Builder
    "HtmlBuilder",
    "element",
]

"""
HTML tree types and tree utilities
"""

from .node import Attributes, Document, Element, Node, Text
from .tree import (
    collect_attribute_names,
    count_nodes,
    filter_whitespace,
    find_all,
    fold,
    format_outline,
    get_body_children,
    is_named,
    is_nested,
    max_depth,
    print_outline,
)

__all__ = [
    'Attributes',
    'Document',
    'Element',
    'Node',
    'Text',
    'collect_attribute_names',
    'count_nodes',
    'filter_whitespace',
    'find_all',
    'fold',
    'format_outline',
    'get_body_children',
    'is_named',
    'is_nested',
    'max_depth',
    'print_outline',
]

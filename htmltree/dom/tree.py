"""
Query, transformation and outline utilities over parsed HTML trees

Every function takes a sequence of top-level nodes and returns a new value;
trees are never modified in place.
"""

import logging
import sys
from typing import Callable, Iterable, List, Optional, Sequence, Set, TextIO, Tuple, TypeVar

from ..errors import MissingElementError
from .node import Document, Element, Node

logger = logging.getLogger(__name__)

T = TypeVar('T')

ASCII_WHITESPACE = ' \t\n\r\x0b\x0c'


def is_named(node: Node, name: str) -> bool:
    """True if node is an element with the given tag"""
    return isinstance(node, Element) and node.tag == name


def find_all(tree: Sequence[Node], tag_name: str) -> Tuple[Element, ...]:
    """Collect elements named tag_name in document order.

    A matched element's subtree is not searched again, so for
    ``<div><div>x</div></div>`` only the outer div is returned.
    """
    found: List[Element] = []
    stack: List[Node] = list(reversed(tree))
    while stack:
        node = stack.pop()
        if not isinstance(node, Element):
            continue
        if node.tag == tag_name:
            found.append(node)
        else:
            stack.extend(reversed(node.children))
    return tuple(found)


def is_nested(tag_name: str, tree: Sequence[Node]) -> bool:
    """True if some tag_name element contains another tag_name element"""
    stack = [(node, False) for node in tree]
    while stack:
        node, inside_match = stack.pop()
        if not isinstance(node, Element):
            continue
        if node.tag == tag_name:
            if inside_match:
                return True
            inside_match = True
        stack.extend((child, inside_match) for child in node.children)
    return False


def collect_attribute_names(tree: Sequence[Node]) -> Set[str]:
    """Every distinct attribute name used anywhere in the tree"""

    def add_names(names: Set[str], node: Node) -> Set[str]:
        if isinstance(node, Element):
            names.update(node.attribute_names)
        return names

    return fold(tree, set(), add_names)


def get_body_children(tree: Sequence[Node], source_label: Optional[str] = None) -> Tuple[Node, ...]:
    """Return the children of the document's single <body> element.

    Raises MissingElementError when there is no <body> or more than one,
    counting bodies at every depth.
    """
    bodies = fold(tree, [], lambda acc, node: acc + [node] if is_named(node, 'body') else acc)
    if len(bodies) != 1:
        raise MissingElementError('body', len(bodies), source_label)
    return bodies[0].children


def is_blank(text: str) -> bool:
    """True if text holds only ASCII whitespace; non-breaking spaces are content"""
    return all(c in ASCII_WHITESPACE for c in text)


def filter_whitespace(tree: Sequence[Node]) -> Document:
    """Drop whitespace-only text nodes, keeping every element"""
    top: List[Node] = []
    # Frames of (element being rebuilt, remaining children, kept children)
    stack = [(None, iter(tree), top)]
    while stack:
        element, remaining, kept = stack[-1]
        child = next(remaining, None)
        if child is None:
            stack.pop()
            if element is not None:
                stack[-1][2].append(Element(element.tag, element.attributes, tuple(kept)))
        elif isinstance(child, Element):
            stack.append((child, iter(child.children), []))
        elif not is_blank(child.data):
            kept.append(child)
    return tuple(top)


def fold(tree: Sequence[Node], init: T, combine: Callable[[T, Node], T]) -> T:
    """Thread an accumulator through a pre-order walk of every node"""
    accum = init
    stack: List[Node] = list(reversed(tree))
    while stack:
        node = stack.pop()
        accum = combine(accum, node)
        if isinstance(node, Element):
            stack.extend(reversed(node.children))
    return accum


def count_nodes(tree: Sequence[Node]) -> int:
    """Count elements and text nodes"""
    return fold(tree, 0, lambda count, _node: count + 1)


def max_depth(tree: Sequence[Node]) -> int:
    """Depth of the deepest node; top-level nodes are at depth 0, empty trees -1"""
    deepest = -1
    stack = [(node, 0) for node in tree]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(node, Element):
            stack.extend((child, depth + 1) for child in node.children)
    return deepest


def format_outline(tree: Sequence[Node],
                   exclude: Iterable[str] = (),
                   keep_attrs: Iterable[str] = (),
                   indent_width: int = 2) -> List[str]:
    """Build the indented element outline as a list of lines"""
    exclude = set(exclude)
    keep_attrs = set(keep_attrs)
    lines: List[str] = []

    stack = [(node, 0) for node in reversed(tree)]
    while stack:
        node, depth = stack.pop()
        if not isinstance(node, Element) or node.tag in exclude:
            continue
        parts = [node.tag]
        parts.extend(f"{name}={value}" for name, value in node.attributes
                     if name in keep_attrs)
        lines.append(' ' * (indent_width * depth) + ' '.join(parts))
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return lines


def print_outline(tree: Sequence[Node],
                  exclude: Iterable[str] = (),
                  keep_attrs: Iterable[str] = (),
                  file: Optional[TextIO] = None,
                  indent_width: int = 2):
    """Print one line per element, indented by depth, to stdout or file"""
    out = file if file is not None else sys.stdout
    lines = format_outline(tree, exclude=exclude, keep_attrs=keep_attrs,
                           indent_width=indent_width)
    logger.debug(f"Printing outline with {len(lines)} elements")
    for line in lines:
        print(line, file=out)

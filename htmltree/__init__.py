"""
htmltree - parse, query, validate and build HTML document trees
"""

from .config import ParserConfig
from .dom import (
    Document,
    Element,
    Node,
    Text,
    collect_attribute_names,
    filter_whitespace,
    find_all,
    fold,
    get_body_children,
    is_named,
    is_nested,
    print_outline,
)
from .errors import (
    DuplicateAttribute,
    HTMLTreeError,
    MissingAttributes,
    MissingElementError,
    ParseError,
    StructureError,
    UnexpectedAttributes,
    ValidationError,
)
from .parser import HTMLParser, parse, parse_single, serialize
from .validation import AttributeCheck, validate_attributes

__all__ = [
    'ParserConfig',
    'Document',
    'Element',
    'Node',
    'Text',
    'collect_attribute_names',
    'filter_whitespace',
    'find_all',
    'fold',
    'get_body_children',
    'is_named',
    'is_nested',
    'print_outline',
    'DuplicateAttribute',
    'HTMLTreeError',
    'MissingAttributes',
    'MissingElementError',
    'ParseError',
    'StructureError',
    'UnexpectedAttributes',
    'ValidationError',
    'HTMLParser',
    'parse',
    'parse_single',
    'serialize',
    'AttributeCheck',
    'validate_attributes',
]

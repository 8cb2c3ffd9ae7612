"""
Exceptions raised by htmltree
"""

from typing import Iterable, Optional


class HTMLTreeError(Exception):
    """Base class for all htmltree errors"""


class ParseError(HTMLTreeError):
    """The underlying HTML parser rejected the input"""


class StructureError(HTMLTreeError):
    """A document did not have exactly one top-level element"""

    def __init__(self, count: int, source_label: Optional[str] = None):
        self.count = count
        self.source_label = source_label
        message = f"expected single HTML item but got {count}"
        if source_label:
            message = f"{source_label}: {message}"
        super().__init__(message)


class MissingElementError(HTMLTreeError):
    """Zero or several elements were found where exactly one is required"""

    def __init__(self, tag: str, count: int, source_label: Optional[str] = None):
        self.tag = tag
        self.count = count
        self.source_label = source_label
        if count == 0:
            message = f"<{tag}> not found"
        else:
            message = f"multiple <{tag}> tags found ({count})"
        if source_label:
            message = f"{source_label}: {message}"
        super().__init__(message)


class ValidationError(HTMLTreeError):
    """Base class for attribute validation failures"""


class DuplicateAttribute(ValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"attribute repeated: {name}")


class MissingAttributes(ValidationError):
    def __init__(self, names: Iterable[str]):
        self.names = set(names)
        super().__init__(f"expected attributes not present: {', '.join(sorted(self.names))}")


class UnexpectedAttributes(ValidationError):
    def __init__(self, names: Iterable[str]):
        self.names = set(names)
        super().__init__(f"unexpected attributes present: {', '.join(sorted(self.names))}")

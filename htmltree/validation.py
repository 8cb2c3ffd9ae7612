"""
Attribute validation for document auditing
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

from .dom.node import Element
from .errors import DuplicateAttribute, MissingAttributes, UnexpectedAttributes, ValidationError

logger = logging.getLogger(__name__)

ANY = 'any'


@dataclass
class AttributeCheck:
    """Outcome of validate_attributes"""
    ok: bool
    error: Optional[ValidationError] = None

    def raise_for_error(self):
        if self.error is not None:
            raise self.error


def validate_attributes(attrs: Union[Element, Sequence[Tuple[str, str]]],
                        required: Iterable[str] = (),
                        allowed: Union[str, Iterable[str]] = ANY) -> AttributeCheck:
    """Check an attribute list against required and allowed names

    Checks run in order and the first failure is returned:
    a repeated name, then missing required names, then (when allowed
    is a collection rather than "any") names that are neither required
    nor allowed.
    """
    if isinstance(attrs, Element):
        attrs = attrs.attributes
    names = [name for name, _ in attrs]
    required = set(required)

    seen = set()
    for name in names:
        if name in seen:
            return _failed(DuplicateAttribute(name))
        seen.add(name)

    missing = required - seen
    if missing:
        return _failed(MissingAttributes(missing))

    if allowed == ANY:
        return AttributeCheck(ok=True)

    allowed = {allowed} if isinstance(allowed, str) else set(allowed)
    unexpected = (seen - required) - allowed
    if unexpected:
        return _failed(UnexpectedAttributes(unexpected))
    return AttributeCheck(ok=True)


def _failed(error: ValidationError) -> AttributeCheck:
    logger.debug(f"Attribute validation failed: {error}")
    return AttributeCheck(ok=False, error=error)

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

Attributes = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class Element:
    """An HTML element with ordered attributes and children"""
    tag: str
    attributes: Attributes = ()
    children: Tuple['Node', ...] = ()

    def __post_init__(self):
        # Lists are accepted from callers but stored as tuples
        object.__setattr__(self, 'attributes',
                           tuple((name, value) for name, value in self.attributes))
        object.__setattr__(self, 'children', tuple(self.children))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the first value of the named attribute"""
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return default

    @property
    def attribute_names(self) -> List[str]:
        return [name for name, _ in self.attributes]

    def __repr__(self) -> str:
        attrs = ' '.join(f'{name}="{value}"' for name, value in self.attributes)
        return f"<{self.tag} {attrs}>" if attrs else f"<{self.tag}>"


@dataclass(frozen=True)
class Text:
    """Raw character data"""
    data: str

    def __repr__(self) -> str:
        return repr(self.data)


Node = Union[Element, Text]
Document = Tuple[Node, ...]

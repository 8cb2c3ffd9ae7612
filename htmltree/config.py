from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Configuration for parsing, serializing and printing documents"""
    features: str = 'html.parser'
    encoding: str = 'utf-8'
    formatter: str = 'minimal'
    indent_width: int = 2

    def __post_init__(self):
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {self.indent_width}")

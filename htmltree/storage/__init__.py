"""
File discovery and reading
"""

from .file_reader import (
    has_html_extension,
    list_html_files,
    parse_file,
    parse_single_file,
    read_file,
)

__all__ = [
    'has_html_extension',
    'list_html_files',
    'parse_file',
    'parse_single_file',
    'read_file'
]

import logging
import os
from typing import List

import aiofiles

from ..dom.node import Document, Element
from ..parser import HTMLParser

logger = logging.getLogger(__name__)


def has_html_extension(path: str) -> bool:
    """True if the file extension is exactly 'html'"""
    return os.path.splitext(path)[1] == '.html'


def list_html_files(directory: str) -> List[str]:
    """List the .html files directly inside directory, as full paths"""
    files = [os.path.join(directory, name)
             for name in sorted(os.listdir(directory))
             if has_html_extension(name)]
    logger.debug(f"Found {len(files)} HTML files in {directory}")
    return files


async def read_file(path: str, encoding: str = 'utf-8') -> str:
    async with aiofiles.open(path, 'r', encoding=encoding) as f:
        return await f.read()


async def parse_file(path: str, parser: HTMLParser = None) -> Document:
    """Read and parse an HTML file"""
    parser = parser or HTMLParser()
    content = await read_file(path, parser.config.encoding)
    return parser.parse(content)


async def parse_single_file(path: str, parser: HTMLParser = None) -> Element:
    """Read an HTML file that must hold exactly one top-level element"""
    parser = parser or HTMLParser()
    content = await read_file(path, parser.config.encoding)
    return parser.parse_single(content, source_label=path)

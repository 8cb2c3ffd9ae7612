"""
Command-line outline viewer

Usage:
    htmltree page.html
    htmltree book/ --body-only --exclude script --keep-attr id --keep-attr class
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Tuple

from .config import ParserConfig
from .errors import MissingElementError, ParseError
from .dom import count_nodes, filter_whitespace, get_body_children, max_depth, print_outline
from .monitoring import LogManager
from .parser import HTMLParser
from .storage import list_html_files, parse_file

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmltree",
        description="Print an indented element outline of HTML files",
    )
    parser.add_argument("paths", nargs="+", help="HTML files or directories containing .html files")
    parser.add_argument("--exclude", action="append", default=[], metavar="TAG",
                        help="Skip elements with this tag and everything inside them")
    parser.add_argument("--keep-attr", action="append", default=[], metavar="NAME",
                        help="Show this attribute in the outline")
    parser.add_argument("--keep-whitespace", action="store_true",
                        help="Do not drop whitespace-only text before printing")
    parser.add_argument("--body-only", action="store_true",
                        help="Print only the children of the single <body> element")
    parser.add_argument("--stats", action="store_true",
                        help="Print node count and depth for each file")
    parser.add_argument("--indent", type=non_negative_int, default=2, help="Spaces per outline level")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the input files")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-dir", help="Also write a detailed log file here")
    return parser


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def expand_paths(paths: List[str]) -> Tuple[List[str], bool]:
    """Expand directories into their .html files; False if a directory could not be listed"""
    files = []
    ok = True
    for path in paths:
        if os.path.isdir(path):
            try:
                files.extend(list_html_files(path))
            except OSError as e:
                logger.error(f"{path}: {e}")
                ok = False
        else:
            files.append(path)
    return files, ok


async def outline_file(path: str, args, parser: HTMLParser) -> bool:
    """Print the outline for one file; False if it could not be processed"""
    try:
        tree = await parse_file(path, parser)
    except (OSError, UnicodeDecodeError, ParseError) as e:
        logger.error(f"{path}: {e}")
        return False

    if not args.keep_whitespace:
        tree = filter_whitespace(tree)

    if args.body_only:
        try:
            tree = get_body_children(tree, source_label=path)
        except MissingElementError as e:
            logger.error(str(e))
            return False

    print(f"== {path}")
    if args.stats:
        print(f"nodes={count_nodes(tree)} depth={max_depth(tree)}")
    print_outline(tree, exclude=args.exclude, keep_attrs=args.keep_attr,
                  indent_width=parser.config.indent_width)
    return True


async def main(argv=None) -> int:
    args = create_parser().parse_args(argv)
    LogManager(log_dir=args.log_dir, log_level=args.log_level)

    parser = HTMLParser(ParserConfig(encoding=args.encoding, indent_width=args.indent))
    files, ok = expand_paths(args.paths)
    logger.info(f"Outlining {len(files)} files")

    for path in files:
        ok = await outline_file(path, args, parser) and ok
    return 0 if ok else 1


def run():
    """Console entry point"""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        sys.exit(130)

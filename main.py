#!/usr/bin/env python3
"""
htmltree outline viewer
Prints the element structure of HTML files for inspection
"""

from htmltree.cli import run

if __name__ == "__main__":
    run()

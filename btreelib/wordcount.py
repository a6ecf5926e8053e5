#!/usr/bin/env python
"""
Word Frequency Counter
======================

Reads whitespace-separated words from standard input and prints how often
each one occurred, one ``<count> <word>`` line per distinct word.

Words are kept in a BinaryTree ordered by text, so the output comes out of
an in-order traversal: reverse alphabetical, given the tree's insertion
rule.

Usage:
    wordcount < input.txt
"""

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .core.node import Node
from .core.tree import BinaryTree
from .config import TreeConfig


@dataclass
class WordCount:
    """Payload of a node: a word and how many times it was seen."""
    text: str
    count: int = 0


def word_less(a: Node, b: Node) -> bool:
    """``a`` is less when its word sorts first."""
    return a.payload.text < b.payload.text


def count_words(stream: TextIO) -> BinaryTree:
    """Build the word tree from every token in ``stream``."""
    # Sorted input degenerates into a linked list; don't recurse over it
    tree = BinaryTree(word_less, TreeConfig.deep())

    for line in stream:
        for word in line.split():
            # A fresh node starts at zero and a found one keeps its tally;
            # either way this occurrence is counted on the located node.
            located, _ = tree.upsert(Node(WordCount(word)))
            located.payload.count += 1

    return tree


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordcount",
        usage="%(prog)s < input",
        description="Reads from stdin, shows words and their frequencies.",
        add_help=False,  # Any argument at all is a usage error
    )
    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    """Entry point for the ``wordcount`` console script.

    Args:
        argv: Command-line arguments, excluding the program name
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)

    Returns:
        Process exit status

    Raises:
        SystemExit: With status 2 when any argument is given
    """
    create_parser().parse_args(argv)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    tree = count_words(stdin)

    def print_count(node: Node) -> None:
        print(node.payload.count, node.payload.text, file=stdout)

    tree.traverse_in_order(print_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())

from dataclasses import dataclass
from typing import TextIO

from domtree.constants import INDENT_STEP
from domtree.node import Comment, Element, Node, Text


@dataclass
class _Frame:
    node: Node
    indent: int
    closing: bool = False


def pretty_print(node: Node, indent: int = 0, file: TextIO | None = None) -> None:
    """
    Print the subtree rooted at `node`, one line per node.

    Elements get a second `<tag/>` line after their children so the dump
    is visually bracketed. Children are indented by INDENT_STEP spaces.
    """
    stack: list[_Frame] = [_Frame(node, indent)]
    while stack:
        frame = stack.pop()
        prefix = " " * frame.indent
        node_type = frame.node.node_type

        if frame.closing:
            assert isinstance(node_type, Element)
            print(f"{prefix}<{node_type.data.tag_name}/>", file=file)
            continue

        if isinstance(node_type, Element):
            print(f"{prefix}{node_type.data!r}", file=file)
            # the closing marker is emitted once every child has been popped
            stack.append(_Frame(frame.node, frame.indent, closing=True))
        elif isinstance(node_type, Text):
            print(f"{prefix}{node_type.content}", file=file)
        elif isinstance(node_type, Comment):
            print(f"{prefix}<!--{node_type.content}-->", file=file)

        for child in reversed(frame.node.children):
            stack.append(_Frame(child, frame.indent + INDENT_STEP))

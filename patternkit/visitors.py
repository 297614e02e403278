"""Document nodes rendered by interchangeable visitors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


class Visitor(Protocol):
    def visit_text(self, node: TextNode) -> None: ...

    def visit_link(self, node: LinkNode) -> None: ...


@dataclass
class TextNode:
    """Plain text."""

    text: str

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_text(self)


@dataclass
class LinkNode:
    """A link with its target URL and its text."""

    url: str
    text: str

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_link(self)


DocNode = Union[TextNode, LinkNode]


class HTMLVisitor:
    """Accumulates an HTML rendering of the visited nodes."""

    def __init__(self) -> None:
        self.output = ""

    def visit_text(self, node: TextNode) -> None:
        self.output += node.text

    def visit_link(self, node: LinkNode) -> None:
        self.output += f'<a href="{node.url}">{node.text}</a>'


class PlainTextVisitor:
    """Accumulates a plain-text rendering of the visited nodes."""

    def __init__(self) -> None:
        self.output = ""

    def visit_text(self, node: TextNode) -> None:
        self.output += node.text

    def visit_link(self, node: LinkNode) -> None:
        self.output += f"{node.text} ({node.url})"


def build_doc() -> list[DocNode]:
    """A small sample document."""
    return [
        TextNode("Check out "),
        LinkNode(url="https://example.com", text="Go"),
        TextNode(" for more info."),
    ]
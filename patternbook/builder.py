"""Builder pattern: an editor assembling documents through a format builder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class Document:
    """A document made of a header and a body."""

    header: Optional[str] = None
    body: Optional[str] = None


class Builder(ABC):
    """Formats the parts of a document."""

    @abstractmethod
    def make_header(self, title: str) -> str:
        """Format a title as a header."""

    @abstractmethod
    def make_body(self, body: str) -> str:
        """Format text as a body."""


class HTMLBuilder(Builder):
    def make_header(self, title: str) -> str:
        return f"<h1>{title}</h1>"

    def make_body(self, body: str) -> str:
        return f"<p>{body}</p>"


class MarkdownBuilder(Builder):
    def make_header(self, title: str) -> str:
        return f"# {title}"

    def make_body(self, body: str) -> str:
        return body


class Editor:
    """Directs a builder to fill in a document."""

    def __init__(self, builder: Builder) -> None:
        self.builder = builder
        self.document = Document()

    def set_title(self, title: str) -> None:
        self.document.header = self.builder.make_header(title)

    def set_content(self, content: str) -> None:
        self.document.body = self.builder.make_body(content)

    def construct(self, title: str, content: str) -> None:
        self.set_title(title)
        self.set_content(content)

    def render(self) -> str:
        """Return the header and the body on separate lines."""
        if self.document.header is None or self.document.body is None:
            raise RuntimeError("document has not been constructed")
        return f"{self.document.header}\n{self.document.body}"


def main(argv=None) -> int:
    html_editor = Editor(HTMLBuilder())
    html_editor.construct("Hello HTML!", "This is a HTML text!")
    print(html_editor.render())

    markdown_editor = Editor(MarkdownBuilder())
    markdown_editor.construct("Hello MD!", "This is a markdown text!")
    print(markdown_editor.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Turn Markdown into a stream of heading and code block events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdtestcases.config import MDTESTCASES_MARKDOWN_PRESET

OPTIONS_TAG = "options"

_CODE_TOKEN_TYPES = {"fence", "code_block"}


@dataclass(frozen=True)
class Heading:
    """A top-level heading."""

    level: int
    text: str
    line: int


@dataclass(frozen=True)
class CodeBlock:
    """A top-level fenced or indented code block."""

    tag: str | None
    content: str
    line: int

    @property
    def is_options(self) -> bool:
        return self.tag == OPTIONS_TAG


BlockEvent = Union[Heading, CodeBlock]


def create_parser() -> MarkdownIt:
    """Build the default block parser."""
    return MarkdownIt(MDTESTCASES_MARKDOWN_PRESET)


def iter_block_events(content: str, parser: MarkdownIt | None = None) -> Iterator[BlockEvent]:
    """Yield headings and code blocks of the document root in source order.

    Blocks nested in list items or blockquotes are skipped, as is every other
    kind of content.
    """
    md = parser or create_parser()
    tokens = md.parse(content)
    for index, token in enumerate(tokens):
        if token.level != 0:
            continue
        if token.type == "heading_open":
            yield Heading(
                level=int(token.tag[1]),
                text=_heading_text(tokens, index),
                line=_start_line(token),
            )
        elif token.type in _CODE_TOKEN_TYPES:
            yield CodeBlock(
                tag=(token.info.strip() or None) if token.type == "fence" else None,
                content=token.content.removesuffix("\n"),
                line=_start_line(token),
            )


def _start_line(token: Token) -> int:
    return token.map[0] + 1 if token.map else 0


def _heading_text(tokens: Sequence[Token], open_index: int) -> str:
    inline = tokens[open_index + 1] if open_index + 1 < len(tokens) else None
    if inline is None or inline.type != "inline":
        return ""
    return _plain_text(inline.children or []).strip()


def _plain_text(children: Sequence[Token]) -> str:
    parts: list[str] = []
    for child in children:
        if child.type in {"text", "code_inline"}:
            parts.append(child.content)
        elif child.type in {"softbreak", "hardbreak"}:
            parts.append(" ")
        elif child.children:
            parts.append(_plain_text(child.children))
    return "".join(parts)

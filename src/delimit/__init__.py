"""delimit — CommonMark-style inline parsing for Python

Parses the inline content of paragraphs and headings (emphasis, strong
emphasis, code spans, text and soft breaks) into a typed, immutable tree,
using a delimiter-stack algorithm that never fails on malformed markup:
anything that does not match degrades to literal text.

Quick Start:
    >>> from delimit import parse_inline
    >>> parse_inline("**bold** and `code`")
    (Strong(children=(Text(content='bold'),)), Text(content=' and '), CodeSpan(code='code'))

    >>> # Inline-parse a block tree built elsewhere
    >>> from delimit import Document, Heading, Paragraph, parse_inlines
    >>> doc = Document((Heading(("*Title*",), level=2), Paragraph(("plain",))))
    >>> parse_inlines(doc).children[0]
    Heading(children=(Emphasis(children=(Text(content='Title'),)),), closed=False, level=2)

"""

from delimit.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from delimit.cursor import TextCursor
from delimit.errors import DelimitError, NodeClosedError, ParseStallError
from delimit.nodes import (
    Block,
    BlockNode,
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    IndentedCode,
    Inline,
    List,
    ListItem,
    Node,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
)
from delimit.parser import InlineParser, parse_inline, parse_inlines
from delimit.text import extract_text
from delimit.visitor import BaseVisitor, transform

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse_inline",
    "parse_inlines",
    "InlineParser",
    "TextCursor",
    # Block nodes
    "Block",
    "BlockNode",
    "BlockQuote",
    "Document",
    "FencedCode",
    "Heading",
    "IndentedCode",
    "List",
    "ListItem",
    "Paragraph",
    "ThematicBreak",
    # Inline nodes
    "Inline",
    "CodeSpan",
    "Emphasis",
    "SoftBreak",
    "Strong",
    "Text",
    "Node",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    "extract_text",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "DelimitError",
    "NodeClosedError",
    "ParseStallError",
]

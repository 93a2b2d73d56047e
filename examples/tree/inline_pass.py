"""Run the inline pass over a block tree built by hand.

A block parser would normally hand over this tree: paragraphs and headings
hold their raw text as a single string until the inline pass replaces it.
"""

from delimit import (
    BaseVisitor,
    BlockQuote,
    Document,
    Emphasis,
    Heading,
    ParseConfig,
    Paragraph,
    Strong,
    parse_inlines,
)

doc = (
    Document()
    .add_child(Heading(("A *short* note",), level=1).close())
    .add_child(Paragraph(("Mixed **strong** text\nover two lines",)).close())
    .add_child(BlockQuote((Paragraph(("*unmatched opener",)).close(),)).close())
    .close()
)


class EmphasisCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts = {"em": 0, "strong": 0}

    def visit_emphasis(self, node: Emphasis) -> None:
        self.counts["em"] += 1

    def visit_strong(self, node: Strong) -> None:
        self.counts["strong"] += 1


parsed = parse_inlines(doc, config=ParseConfig(softbreaks=True))
for block in parsed.children:
    print(block)

counter = EmphasisCounter()
counter.visit(parsed)
print(counter.counts)

"""Property-based tests for inline parser invariants using Hypothesis.

These properties hold for any input: the driver always terminates, the two
parse stacks stay the same length, and markup never loses plain text.
"""

import time

from hypothesis import given, settings
from hypothesis import strategies as st

from delimit import InlineParser, ParseConfig, parse_inline
from delimit.nodes import Emphasis, Paragraph, Strong, Text
from delimit.text import extract_text

# Inputs dense in delimiters, with whitespace and punctuation for flanking
MARKUP = st.text(alphabet="*`ab .!\n ", max_size=300)


class TestTermination:
    """The driver advances on every step."""

    @given(MARKUP)
    @settings(max_examples=300)
    def test_step_count_bounded_by_length(self, source: str) -> None:
        parser = InlineParser(source)
        steps = 0
        while parser.step():
            steps += 1
            assert steps <= len(source)
        assert parser.at_end()

    @given(MARKUP)
    @settings(max_examples=200)
    def test_position_strictly_increases(self, source: str) -> None:
        parser = InlineParser(source, config=ParseConfig(softbreaks=True))
        last = parser.position
        while parser.step():
            assert parser.position > last
            last = parser.position

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_arbitrary_text_never_raises(self, source: str) -> None:
        assert isinstance(parse_inline(source), tuple)


class TestStackParity:
    """Delimiter and segment stacks always have equal length."""

    @given(MARKUP)
    @settings(max_examples=300)
    def test_parity_after_every_step(self, source: str) -> None:
        parser = InlineParser(source)
        while parser.step():
            delimiters, segments = parser.stack_depths
            assert delimiters == segments

    @given(MARKUP)
    def test_stacks_empty_after_parse(self, source: str) -> None:
        parser = InlineParser(source)
        parser.parse()
        assert parser.stack_depths == (0, 0)


class TestPlainText:
    """Text without delimiters passes through untouched."""

    @given(st.text(min_size=1).filter(lambda s: "*" not in s and "`" not in s))
    def test_single_text_node(self, source: str) -> None:
        assert parse_inline(source) == (Text(source),)

    @given(st.text(alphabet="*ab .!\n", max_size=200))
    @settings(max_examples=300)
    def test_non_delimiter_text_preserved_in_order(self, source: str) -> None:
        """Only ``*`` characters are ever added, moved or dropped."""
        result = extract_text(Paragraph(parse_inline(source)))
        assert result.replace("*", "") == source.replace("*", "")

    @given(st.text(alphabet="*ab .!", max_size=200))
    @settings(max_examples=200)
    def test_emphasis_never_empty_of_text(self, source: str) -> None:
        """Every emphasis node wraps at least one character of content."""
        pending = list(parse_inline(source))
        while pending:
            node = pending.pop()
            if isinstance(node, (Emphasis, Strong)):
                assert extract_text(node)
                pending.extend(node.children)


class TestDeepInput:
    """Adversarial nesting does not grow the native stack."""

    def test_many_unmatched_openers(self) -> None:
        source = "*a " * 5000
        result = parse_inline(source)
        assert len(result) == 10000
        assert result[0] == Text("*")
        assert result[1] == Text("a ")

    def test_deep_balanced_nesting(self) -> None:
        depth = 3000
        source = "*a " * depth + "b" + " c*" * depth
        result = parse_inline(source)
        assert len(result) == 1

        # Walk iteratively; recursive equality would hit the recursion limit
        levels = 0
        node = result[0]
        while isinstance(node, Emphasis):
            levels += 1
            node = node.children[1] if len(node.children) > 2 else node.children[-1]
            if isinstance(node, Text):
                break
        assert levels == depth

    def test_long_closer_against_many_openers(self) -> None:
        """A closer run consumed one ``*`` at a time stays linear."""
        depth = 20000
        source = "*a " * depth + "b" + "*" * depth
        started = time.perf_counter()
        result = parse_inline(source)
        assert time.perf_counter() - started < 10.0
        assert len(result) == 1

        levels = 0
        node = result[0]
        while isinstance(node, Emphasis):
            levels += 1
            inner = node.children[-1]
            if not isinstance(inner, Emphasis):
                assert node.children == (Text("a b"),)
            node = inner
        assert levels == depth

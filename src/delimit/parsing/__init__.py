"""Parsing subsystem for delimit.

Public API:
InlineParsingMixin: Combined inline parsing (emphasis, code spans, text)

"""

from delimit.parsing.inline import InlineParsingMixin

__all__ = ["InlineParsingMixin"]

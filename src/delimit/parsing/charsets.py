"""Character classification and precompiled run patterns.

Everything here is a module-level constant built once at import time:
frozensets for O(1) membership and compiled regular expressions for the
fixed delimiter and plain-text runs. Nothing in this module is mutable.

Reference: CommonMark 0.31.2 specification

Usage:
    from delimit.parsing.charsets import BACKTICK_RUN, is_unicode_punctuation

    match = BACKTICK_RUN.match(text, pos)
"""

import re
import unicodedata

# CommonMark: ASCII punctuation characters
# https://spec.commonmark.org/0.31.2/#ascii-punctuation-character
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Maximal runs of a single delimiter character
STAR_RUN: re.Pattern[str] = re.compile(r"\*+")
BACKTICK_RUN: re.Pattern[str] = re.compile(r"`+")

# Plain text: everything up to the next delimiter (and, with softbreaks on,
# the next newline)
PLAIN_RUN: re.Pattern[str] = re.compile(r"[^`*]+")
PLAIN_LINE_RUN: re.Pattern[str] = re.compile(r"[^`*\n]+")


def is_unicode_punctuation(char: str) -> bool:
    """Check if character is Unicode punctuation (P* or S* categories).

    ASCII punctuation is a subset. The empty string (string boundary) is not
    punctuation.

    """
    if not char:
        return False
    if char in ASCII_PUNCTUATION:
        return True
    cat = unicodedata.category(char)
    return cat.startswith("P") or cat.startswith("S")


def is_unicode_whitespace(char: str) -> bool:
    """Check if character is Unicode whitespace.

    Includes ASCII whitespace and category Zs. The empty string (string
    boundary) counts as whitespace.

    """
    if not char:
        return True
    if char in WHITESPACE:
        return True
    return unicodedata.category(char) == "Zs"

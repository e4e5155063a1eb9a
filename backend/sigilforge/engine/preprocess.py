"""Intention text → processed symbols.

Lowercase, strip vowels and whitespace, then keep the first occurrence of
every remaining character. The result sizes and seeds every pattern.

Whitespace is the ECMAScript ``\\s`` set rather than ``str.isspace``: the
byte-order mark counts as whitespace, the ASCII separators ``\\x1c``-``\\x1f``
and ``\\x85`` do not. Existing sigils were generated with that set.
"""

from __future__ import annotations

import re

VOWELS = frozenset("aeiou")

WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WHITESPACE = frozenset(WHITESPACE_CHARS)
WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE_CHARS)}]+")


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def trim(text: str) -> str:
    return text.strip(WHITESPACE_CHARS)


def split_words(text: str) -> list[str]:
    """Split on whitespace runs, ignoring leading/trailing whitespace."""
    return [w for w in WHITESPACE_RUN.split(text) if w]


def preprocess(intention: str) -> str:
    """Return the processed symbol string for an intention (may be empty)."""
    seen: set[str] = set()
    symbols: list[str] = []
    for ch in intention.lower():
        if ch in VOWELS or ch in WHITESPACE or ch in seen:
            continue
        seen.add(ch)
        symbols.append(ch)
    return "".join(symbols)

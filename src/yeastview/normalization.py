"""Deterministic placeholder substitution for byte-code text.

Yeast text arrives with line breaks and other invisible characters already
escaped (``\\n``, ``\\u2028`` ...). Rendering replaces each of those, plus
literal tabs and spaces, with a visible placeholder symbol.
"""

from __future__ import annotations

import re

from yeastview.types import TokenDescriptor


CARRIAGE_RETURN = "⏎"
LINE_FEED = "↓"
NEXT_LINE = "⇓"
LINE_SEPARATOR = "§"
PARAGRAPH_SEPARATOR = "¶"
TAB = "→"
SPACE = "·"
NO_BREAK = "◆"

BOM_MARKER = "⇔"
EMPTY_MARKER = "°"

# Priority order. The first matching sequence at a position wins.
PLACEHOLDERS: tuple[tuple[str, str], ...] = (
    ("\\r", CARRIAGE_RETURN),
    ("\\n", LINE_FEED),
    ("\\x85", NEXT_LINE),
    ("\\u2028", LINE_SEPARATOR),
    ("\\u2029", PARAGRAPH_SEPARATOR),
    ("\\t", TAB),
    ("\t", TAB),
    (" ", SPACE),
    ("\\uFEFF", NO_BREAK),
    ("\\ufeff", NO_BREAK),
)

LINE_BREAK_PLACEHOLDERS = frozenset({CARRIAGE_RETURN, LINE_FEED})

_ESCAPED_BACKSLASH = "\\\\"

_SUBSTITUTIONS: dict[str, str] = {}
for _sequence, _symbol in PLACEHOLDERS:
    _SUBSTITUTIONS.setdefault(_sequence, _symbol)

_SUBSTITUTION_RE = re.compile(
    "|".join(re.escape(seq) for seq in (_ESCAPED_BACKSLASH, *_SUBSTITUTIONS)),
)

# Inverse direction: each placeholder maps back to its canonical sequence.
_REVERSE: dict[str, str] = {}
for _sequence, _symbol in PLACEHOLDERS:
    _REVERSE.setdefault(_symbol, _sequence)

_REVERSE_RE = re.compile("|".join(re.escape(symbol) for symbol in _REVERSE))


def _substitute(match: re.Match[str]) -> str:
    sequence = match.group(0)
    if sequence == _ESCAPED_BACKSLASH:
        return sequence
    return _SUBSTITUTIONS[sequence]


def normalize_text(text: str) -> str:
    """Replace escaped control sequences and blanks with placeholder symbols.

    A single left-to-right scan is used, so a placeholder produced for one
    sequence is never substituted again, and an escaped backslash is kept
    as-is (``\\\\n`` is a backslash followed by ``n``, not a line feed).
    """
    if not text:
        return ""
    return _SUBSTITUTION_RE.sub(_substitute, text)


def normalize_line(descriptor: TokenDescriptor, text: str) -> str:
    """Normalize the text that followed *descriptor*'s code on one line.

    For the byte order mark the code letter belongs to the encoding name
    (``UTF-8`` arrives as code ``U`` plus ``TF-8``), so it is put back and
    nothing is substituted.
    """
    if descriptor.kind == "bom":
        return descriptor.code + text
    return normalize_text(text)


def denormalize_text(text: str) -> str:
    """Map placeholder symbols back to the sequences they stand for.

    Both tab spellings come back as the ``\\t`` escape.
    """
    if not text:
        return ""
    return _REVERSE_RE.sub(lambda match: _REVERSE[match.group(0)], text)

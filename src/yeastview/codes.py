"""Byte-code table for yeast token streams.

Each input record starts with one code character:

  U         byte order mark (the code letter is part of the encoding name)
  T t b L l text-like tokens (content, meta, break, line feed, line fold)
  I w i     indicator, white space, indentation
  K k       directives end / document end markers
  ! - $     error, unparsed remainder, detected parameter
  X / x     begin / end pairs: uppercase opens, lowercase closes
            (E C D G H A P R S Q M N X O)
  #         comment line, ignored

The table is built once at import and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from yeastview.errors import InputFormatError
from yeastview.types import TokenDescriptor, TokenKind


COMMENT_CODE = "#"

_SINGLE_CODES: tuple[tuple[str, TokenKind, str], ...] = (
    ("U", "bom", "BOM"),
    ("T", "text", "Text"),
    ("t", "text", "Meta"),
    ("b", "text", "Break"),
    ("L", "text", "Line Feed"),
    ("l", "text", "Line Fold"),
    ("I", "text", "Indicator"),
    ("w", "text", "White"),
    ("i", "text", "Indent"),
    ("K", "text", "Directives End"),
    ("k", "text", "Document End"),
    ("!", "error", "Error"),
    ("-", "text", "Unparsed"),
    ("$", "text", "Detected"),
)

_PAIRED_CODES: tuple[tuple[str, str], ...] = (
    ("E", "Escape"),
    ("C", "Comment"),
    ("D", "Directive"),
    ("G", "Tag"),
    ("H", "Handle"),
    ("A", "Anchor"),
    ("P", "Properties"),
    ("R", "Alias"),
    ("S", "Scalar"),
    ("Q", "Sequence"),
    ("M", "Mapping"),
    ("N", "Node"),
    ("X", "Pair"),
    ("O", "Document"),
)

# Synthetic marker for containers that closed without content. Its code is
# not part of CODE_TABLE, so input can never produce it directly.
EMPTY_DESCRIPTOR = TokenDescriptor(code="~", kind="text", title="Empty")


def _build_code_table() -> Mapping[str, TokenDescriptor]:
    table: dict[str, TokenDescriptor] = {}
    rows: list[tuple[str, TokenKind, str]] = list(_SINGLE_CODES)
    for begin_code, title in _PAIRED_CODES:
        rows.append((begin_code, "begin", title))
        rows.append((begin_code.lower(), "end", title))
    for code, kind, title in rows:
        if code in table:
            raise ValueError(f"duplicate byte code {code!r}")
        if code in (COMMENT_CODE, EMPTY_DESCRIPTOR.code):
            raise ValueError(f"reserved byte code {code!r}")
        table[code] = TokenDescriptor(code=code, kind=kind, title=title)
    return MappingProxyType(table)


CODE_TABLE: Mapping[str, TokenDescriptor] = _build_code_table()

_END_BY_TITLE: Mapping[str, TokenDescriptor] = MappingProxyType(
    {row.title: row for row in CODE_TABLE.values() if row.kind == "end"}
)

_END_CODES = [row for row in CODE_TABLE.values() if row.kind == "end"]
if len(_END_CODES) != len(_END_BY_TITLE):
    raise ValueError("end codes must have distinct titles")
for _row in CODE_TABLE.values():
    if _row.kind == "begin" and _row.title not in _END_BY_TITLE:
        raise ValueError(f"begin code {_row.code!r} has no matching end code")

# Descriptor used when text trailing a begin/end code is split into its own entry.
TEXT_DESCRIPTOR = CODE_TABLE["T"]


def lookup_code(code: str, line_number: int) -> TokenDescriptor:
    """Resolve one byte-code character, failing on codes the table lacks."""
    descriptor = CODE_TABLE.get(code)
    if descriptor is None:
        raise InputFormatError(
            f"unknown byte code {code!r}",
            line_number=line_number,
            code=code,
        )
    return descriptor


def matching_end(descriptor: TokenDescriptor) -> TokenDescriptor:
    """Return the end descriptor that closes *descriptor*."""
    if descriptor.kind != "begin":
        raise ValueError(f"{descriptor.code!r} is not a begin code")
    return _END_BY_TITLE[descriptor.title]

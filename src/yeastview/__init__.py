"""yeastview: render yeast byte-code streams as cross-linked tree/text HTML."""

from yeastview.codes import (
    CODE_TABLE,
    COMMENT_CODE,
    EMPTY_DESCRIPTOR,
    lookup_code,
    matching_end,
)
from yeastview.errors import (
    ConfigurationError,
    InputFormatError,
    StructureError,
    YeastError,
    YeastIOError,
)
from yeastview.interpreter import ParserContext, parse_lines, parse_text, split_records
from yeastview.normalization import denormalize_text, normalize_line, normalize_text
from yeastview.page import PageOptions, assemble_page
from yeastview.render import render_text, render_tree
from yeastview.types import DocumentModel, Entry, TokenDescriptor, TokenKind

__all__ = [
    "CODE_TABLE",
    "COMMENT_CODE",
    "ConfigurationError",
    "DocumentModel",
    "EMPTY_DESCRIPTOR",
    "Entry",
    "InputFormatError",
    "PageOptions",
    "ParserContext",
    "StructureError",
    "TokenDescriptor",
    "TokenKind",
    "YeastError",
    "YeastIOError",
    "assemble_page",
    "denormalize_text",
    "lookup_code",
    "matching_end",
    "normalize_line",
    "normalize_text",
    "parse_lines",
    "parse_text",
    "render_text",
    "render_tree",
    "split_records",
]

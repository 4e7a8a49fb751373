"""Core types for the yeast token stream and its document model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


TokenKind: TypeAlias = Literal["bom", "text", "begin", "end", "error"]

TOKEN_KINDS: tuple[TokenKind, ...] = ("bom", "text", "begin", "end", "error")


@dataclass(frozen=True, slots=True)
class TokenDescriptor:
    """What a single byte-code character means."""

    code: str
    kind: TokenKind
    title: str

    def __post_init__(self) -> None:
        if len(self.code) != 1:
            raise ValueError(f"code must be a single character, got {self.code!r}")
        if self.kind not in TOKEN_KINDS:
            raise ValueError(f"unknown token kind {self.kind!r}")
        if not self.title:
            raise ValueError("title cannot be empty")


@dataclass(frozen=True, slots=True)
class Entry:
    """One element of the document model, in document order.

    ``correlation_id`` is shared by the tree node/leaf and the text span
    rendered for this entry. End entries only close a scope and carry none.
    """

    descriptor: TokenDescriptor
    text: str
    correlation_id: int | None
    line_number: int
    synthetic: bool = False

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")
        if self.descriptor.kind == "end":
            if self.correlation_id is not None:
                raise ValueError("end entries cannot carry a correlation_id")
        elif self.correlation_id is None or self.correlation_id < 1:
            raise ValueError(
                f"{self.descriptor.kind} entries need a correlation_id >= 1, "
                f"got {self.correlation_id}",
            )

    @property
    def kind(self) -> TokenKind:
        return self.descriptor.kind

    @property
    def title(self) -> str:
        return self.descriptor.title


OpenScope: TypeAlias = tuple[int, TokenDescriptor]


@dataclass(frozen=True, slots=True)
class DocumentModel:
    """Parsed byte-code stream, read-only once built.

    ``open_scopes`` holds ``(line_number, descriptor)`` for begin markers
    never closed before end of input, outermost first.
    """

    entries: tuple[Entry, ...]
    open_scopes: tuple[OpenScope, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_balanced(self) -> bool:
        return not self.open_scopes

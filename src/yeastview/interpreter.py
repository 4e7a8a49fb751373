"""Stream interpreter: byte-code lines to a validated document model.

The parse state is two parallel stacks held by ``ParserContext``:

* the nesting stack of ``(line_number, descriptor)`` for open begin markers;
* the content stack of booleans telling whether each open scope has seen
  anything since it opened.

A scope that closes without content gets a synthetic ``Empty`` entry right
before its end marker, so every container renders at least one child.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from yeastview.codes import COMMENT_CODE, EMPTY_DESCRIPTOR, TEXT_DESCRIPTOR, lookup_code
from yeastview.errors import InputFormatError, StructureError
from yeastview.normalization import EMPTY_MARKER, normalize_line
from yeastview.types import DocumentModel, Entry, OpenScope, TokenDescriptor


log = logging.getLogger(__name__)

# Correlation id 0 belongs to the tree legend node.
FIRST_CORRELATION_ID = 1


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


@dataclass(slots=True)
class ParserContext:
    """Mutable state for one pass over a byte-code stream."""

    nesting: list[OpenScope] = field(default_factory=list)
    content: list[bool] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)
    next_id: int = FIRST_CORRELATION_ID

    @property
    def depth(self) -> int:
        return len(self.nesting)

    def feed(self, raw_line: str, line_number: int) -> None:
        """Interpret one input line (1-based *line_number*)."""
        line = _strip_line_terminator(raw_line)
        if not line:
            raise InputFormatError("not a byte-code line", line_number=line_number)

        code, raw_text = line[0], line[1:]
        if code == COMMENT_CODE:
            return

        descriptor = lookup_code(code, line_number)
        text = normalize_line(descriptor, raw_text)

        if descriptor.kind == "begin":
            self._open(descriptor, line_number)
            if text:
                self._append(TEXT_DESCRIPTOR, text, line_number)
                self._mark_content()
        elif descriptor.kind == "end":
            if text:
                self._append(TEXT_DESCRIPTOR, text, line_number)
                self._mark_content()
            self._close(descriptor, line_number)
        else:
            self._append(descriptor, text, line_number)
            if text:
                self._mark_content()

    def finish(self) -> DocumentModel:
        """Freeze the entries seen so far into a document model."""
        if self.nesting:
            innermost_line, innermost = self.nesting[-1]
            log.warning(
                "%d scope(s) left open at end of input; innermost is %s opened at line %d",
                len(self.nesting),
                innermost.title,
                innermost_line,
            )
        return DocumentModel(entries=tuple(self.entries), open_scopes=tuple(self.nesting))

    def _open(self, descriptor: TokenDescriptor, line_number: int) -> None:
        self.nesting.append((line_number, descriptor))
        self.content.append(False)
        self._append(descriptor, "", line_number)

    def _close(self, descriptor: TokenDescriptor, line_number: int) -> None:
        if not self.nesting:
            raise InputFormatError(
                f"end code {descriptor.code!r} ({descriptor.title}) has no open begin code",
                line_number=line_number,
                code=descriptor.code,
            )
        if not self.content.pop():
            self._append(EMPTY_DESCRIPTOR, EMPTY_MARKER, line_number, synthetic=True)
        self._mark_content()

        open_line, open_descriptor = self.nesting.pop()
        if open_descriptor.title != descriptor.title:
            raise StructureError(
                line_number=line_number,
                code=descriptor.code,
                title=descriptor.title,
                open_line_number=open_line,
                open_code=open_descriptor.code,
                open_title=open_descriptor.title,
            )
        self.entries.append(
            Entry(descriptor=descriptor, text="", correlation_id=None, line_number=line_number)
        )

    def _append(
        self,
        descriptor: TokenDescriptor,
        text: str,
        line_number: int,
        *,
        synthetic: bool = False,
    ) -> None:
        self.entries.append(
            Entry(
                descriptor=descriptor,
                text=text,
                correlation_id=self.next_id,
                line_number=line_number,
                synthetic=synthetic,
            )
        )
        self.next_id += 1

    def _mark_content(self) -> None:
        for idx in range(len(self.content)):
            self.content[idx] = True


def parse_lines(lines: Iterable[str]) -> DocumentModel:
    """Parse a complete byte-code stream.

    Raises ``InputFormatError`` or ``StructureError`` on the first bad line;
    nothing is returned for a partially valid stream.
    """
    context = ParserContext()
    for line_number, line in enumerate(lines, start=1):
        context.feed(line, line_number)
    model = context.finish()
    log.debug("parsed %d entries", len(model))
    return model


def split_records(text: str) -> list[str]:
    """Split a byte-code stream into records on line feeds only.

    Form feeds, NEL and Unicode line separators are record text, not
    terminators; a trailing carriage return is removed per line by the parser.
    """
    if not text:
        return []
    records = text.split("\n")
    if records[-1] == "":
        records.pop()
    return records


def parse_text(text: str) -> DocumentModel:
    """Parse byte-code records held in one string."""
    return parse_lines(split_records(text))

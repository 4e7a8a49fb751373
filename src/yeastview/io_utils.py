"""I/O utilities: encoding-safe input reading, output writing, JSON dumps.

Byte-code input is normally UTF-8; single-byte encodings are accepted via a
CP1252 fallback and finally a replacing decode.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import orjson

from yeastview.errors import YeastIOError
from yeastview.interpreter import split_records
from yeastview.normalization import denormalize_text
from yeastview.types import DocumentModel


def decode_bytes(raw: bytes) -> str:
    """Decode input bytes with fallback: UTF-8 -> CP1252 -> replace."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        try:
            return raw.decode("cp1252")
        except UnicodeDecodeError:
            return raw.decode("utf-8", errors="replace")


def read_text_file(path: Path) -> str:
    """Read a whole text file, raising ``YeastIOError`` when it cannot be opened."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise YeastIOError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return decode_bytes(raw)


def read_lines(path: Path | None) -> list[str]:
    """Read byte-code records from *path*, or from standard input when None."""
    if path is None:
        text = decode_bytes(sys.stdin.buffer.read())
    else:
        text = read_text_file(path)
    if text.startswith("\ufeff"):
        text = text[1:]
    return split_records(text)


def write_output(text: str, path: Path | None) -> None:
    """Write the finished document to *path*, or standard output when None."""
    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise YeastIOError(f"cannot write {path}: {exc.strerror or exc}") from exc


def model_to_dict(model: DocumentModel) -> dict[str, Any]:
    """Plain-data view of a document model for JSON output."""
    return {
        "entries": [
            {
                "code": entry.descriptor.code,
                "kind": entry.kind,
                "title": entry.title,
                "text": entry.text,
                "source_text": denormalize_text(entry.text) if entry.kind != "bom" else entry.text,
                "correlation_id": entry.correlation_id,
                "line_number": entry.line_number,
                "synthetic": entry.synthetic,
            }
            for entry in model.entries
        ],
        "open_scopes": [
            {"line_number": line_number, "code": descriptor.code, "title": descriptor.title}
            for line_number, descriptor in model.open_scopes
        ],
    }


def dump_model_json(model: DocumentModel, *, pretty: bool = True) -> str:
    """Serialize a document model with orjson."""
    opts = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(model_to_dict(model), option=opts).decode("utf-8") + "\n"

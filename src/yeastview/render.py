"""Tree and text renderings of a document model.

Both passes read the correlation id stored on each entry, so the tree
element ``tree-N`` and the text span ``text-N`` always describe the same
source entry. Begin entries get a tree id but no clickable text span.
"""

from __future__ import annotations

import html
import re

from yeastview.normalization import (
    BOM_MARKER,
    CARRIAGE_RETURN,
    EMPTY_MARKER,
    LINE_BREAK_PLACEHOLDERS,
    LINE_FEED,
    LINE_SEPARATOR,
    NEXT_LINE,
    NO_BREAK,
    PARAGRAPH_SEPARATOR,
    SPACE,
    TAB,
)
from yeastview.types import DocumentModel, Entry


LEGEND_ID = 0

LEGEND_ROWS: tuple[tuple[str, str], ...] = (
    (BOM_MARKER, "byte order mark"),
    (CARRIAGE_RETURN, "carriage return"),
    (LINE_FEED, "line feed"),
    (NEXT_LINE, "next line"),
    (LINE_SEPARATOR, "line separator"),
    (PARAGRAPH_SEPARATOR, "paragraph separator"),
    (TAB, "tab"),
    (SPACE, "space"),
    (NO_BREAK, "zero width no-break space"),
    (EMPTY_MARKER, "empty content"),
)

_INDENT = "  "


def _css_name(title: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")


def _attrs(pane: str, entry: Entry) -> str:
    cid = entry.correlation_id
    return f'id="{pane}-{cid}" data-cid="{cid}"'


def _leaf_label(entry: Entry) -> str:
    if entry.kind == "bom":
        return f"{entry.title} ({entry.text})"
    return entry.title


def _legend() -> list[str]:
    rows = [
        f'<li class="node closed" id="tree-{LEGEND_ID}" data-cid="{LEGEND_ID}">'
        '<span class="label toggle">Legend</span>',
        f"{_INDENT}<ul>",
    ]
    for symbol, meaning in LEGEND_ROWS:
        rows.append(
            f'{_INDENT * 2}<li class="legend-row"><span class="symbol">{html.escape(symbol)}</span> '
            f"{html.escape(meaning)}</li>"
        )
    rows.append(f"{_INDENT}</ul>")
    rows.append("</li>")
    return rows


def render_tree(model: DocumentModel) -> str:
    """Render the collapsible outline: a legend node, then one item per entry.

    Begin entries open a node, end entries close it, and everything else is
    a leaf at the current depth. Nodes still open at the end of the model are
    closed at the end of the output.
    """
    lines = ['<ul class="tree">', *(_INDENT + row for row in _legend())]
    depth = 1

    for entry in model.entries:
        pad = _INDENT * depth
        if entry.kind == "begin":
            lines.append(
                f'{pad}<li class="node open {_css_name(entry.title)}" {_attrs("tree", entry)}>'
                f'<span class="label toggle">{html.escape(entry.title)}</span>'
            )
            lines.append(f"{pad}{_INDENT}<ul>")
            depth += 2
        elif entry.kind == "end":
            depth -= 2
            pad = _INDENT * depth
            lines.append(f"{pad}{_INDENT}</ul>")
            lines.append(f"{pad}</li>")
        else:
            classes = f"leaf {entry.kind} {_css_name(entry.title)}"
            tooltip = "" if entry.kind == "bom" else f' title="{html.escape(entry.text)}"'
            lines.append(
                f'{pad}<li class="{classes}" {_attrs("tree", entry)}{tooltip}>'
                f'<span class="label">{html.escape(_leaf_label(entry))}</span></li>'
            )

    while depth > 1:
        depth -= 2
        pad = _INDENT * depth
        lines.append(f"{pad}{_INDENT}</ul>")
        lines.append(f"{pad}</li>")

    lines.append("</ul>")
    return "\n".join(lines) + "\n"


def render_text(model: DocumentModel) -> str:
    """Render the linear reconstruction of the source text.

    A line break is inserted before the entry that follows text ending in a
    carriage return or line feed placeholder.
    """
    parts: list[str] = ['<div class="text">']
    open_spans = 0
    pending_break = False

    for entry in model.entries:
        if entry.kind == "end":
            parts.append("</span>")
            open_spans -= 1
            continue

        if pending_break:
            parts.append("<br/>\n")
            pending_break = False

        if entry.kind == "begin":
            parts.append(f'<span class="scope {_css_name(entry.title)}">')
            open_spans += 1
            continue

        shown = BOM_MARKER if entry.kind == "bom" else entry.text
        classes = f"token {entry.kind} {_css_name(entry.title)}"
        parts.append(f'<span class="{classes}" {_attrs("text", entry)}>{html.escape(shown)}</span>')
        if shown.endswith(tuple(LINE_BREAK_PLACEHOLDERS)):
            pending_break = True

    parts.extend("</span>" for _ in range(open_spans))
    parts.append("</div>")
    return "".join(parts) + "\n"

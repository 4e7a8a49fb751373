"""Assemble the final HTML page: style, script, and the two panes."""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from pathlib import Path

from yeastview.errors import ConfigurationError
from yeastview.io_utils import read_text_file
from yeastview.render import render_text, render_tree
from yeastview.types import DocumentModel


log = logging.getLogger(__name__)

DEFAULT_TREE_TITLE = "Syntax Tree"
DEFAULT_TEXT_TITLE = "YAML Text"

BUILTIN_STYLE = """\
body { margin: 0; font-family: sans-serif; }
.pane { position: absolute; top: 0; bottom: 0; overflow: auto; padding: 0 0.5em; }
#tree-pane { left: 0; width: 40%; border-right: 1px solid #999; }
#text-pane { left: 40%; right: 0; }
.tree, .tree ul { list-style: none; padding-left: 1em; margin: 0; }
.node.closed > ul { display: none; }
.toggle { cursor: pointer; font-weight: bold; }
.node.closed > .toggle:before { content: "+ "; }
.node.open > .toggle:before { content: "- "; }
.text { font-family: monospace; white-space: pre; }
.token { cursor: pointer; }
.token.error { color: #c00; }
.token.empty, .leaf.empty { color: #999; }
.highlight { background: #ff6; }
"""

SCRIPT = """\
function yeastToggle(event) {
  var node = event.target.parentNode;
  node.classList.toggle('open');
  node.classList.toggle('closed');
  event.stopPropagation();
}
function yeastHighlight(cid) {
  var marked = document.querySelectorAll('.highlight');
  for (var i = 0; i < marked.length; i++) marked[i].classList.remove('highlight');
  var peers = document.querySelectorAll('[data-cid="' + cid + '"]');
  for (var j = 0; j < peers.length; j++) {
    peers[j].classList.add('highlight');
    var up = peers[j].parentNode;
    while (up && up.classList) {
      if (up.classList.contains('closed')) {
        up.classList.remove('closed');
        up.classList.add('open');
      }
      up = up.parentNode;
    }
  }
  var target = document.getElementById('text-' + cid);
  if (target) target.scrollIntoView({block: 'nearest'});
  target = document.getElementById('tree-' + cid);
  if (target) target.scrollIntoView({block: 'nearest'});
}
window.addEventListener('load', function () {
  var toggles = document.querySelectorAll('.toggle');
  for (var i = 0; i < toggles.length; i++) toggles[i].addEventListener('click', yeastToggle);
  var items = document.querySelectorAll('.leaf, .token');
  for (var j = 0; j < items.length; j++) {
    items[j].addEventListener('click', function (event) {
      yeastHighlight(this.getAttribute('data-cid'));
      event.stopPropagation();
    });
  }
});
"""


@dataclass(frozen=True, slots=True)
class PageOptions:
    """Resolved page settings."""

    tree_title: str = DEFAULT_TREE_TITLE
    text_title: str = DEFAULT_TEXT_TITLE
    stylesheet: Path | None = None
    link_stylesheet: bool = False

    def __post_init__(self) -> None:
        if self.link_stylesheet and self.stylesheet is None:
            raise ConfigurationError("linking a stylesheet requires a stylesheet path")


def style_region(options: PageOptions) -> str:
    """Return the ``<style>`` or ``<link>`` element for the page head."""
    if options.stylesheet is None:
        return f"<style>\n{BUILTIN_STYLE}</style>"
    if options.link_stylesheet:
        href = html.escape(options.stylesheet.as_posix(), quote=True)
        return f'<link rel="stylesheet" type="text/css" href="{href}"/>'
    log.debug("embedding stylesheet %s", options.stylesheet)
    return f"<style>\n{read_text_file(options.stylesheet)}\n</style>"


def assemble_page(model: DocumentModel, options: PageOptions | None = None) -> str:
    """Render *model* into one self-contained HTML document.

    The style region is resolved first so an unreadable stylesheet fails
    before any body markup is produced.
    """
    options = options or PageOptions()
    style = style_region(options)
    tree = render_tree(model)
    text = render_text(model)
    tree_title = html.escape(options.tree_title)
    text_title = html.escape(options.text_title)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8"/>\n'
        f"<title>{tree_title} / {text_title}</title>\n"
        f"{style}\n"
        f"<script>\n{SCRIPT}</script>\n"
        "</head>\n"
        "<body>\n"
        '<div class="pane" id="tree-pane">\n'
        f"<h2>{tree_title}</h2>\n"
        f"{tree}"
        "</div>\n"
        '<div class="pane" id="text-pane">\n'
        f"<h2>{text_title}</h2>\n"
        f"{text}"
        "</div>\n"
        "</body>\n"
        "</html>\n"
    )

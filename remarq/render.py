from __future__ import annotations

import re
import shutil
from pathlib import Path

import markdown

from .content import slugify

HREF_RE = re.compile(r"""(<a\b[^>]*?\shref\s*=\s*)(["'])(.*?)\2""", re.IGNORECASE)
TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")
MARKUP_SUFFIX = ".md"
PAGE_SUFFIX = ".html"
MARKDOWN_EXTENSIONS = ["toc", "fenced_code", "tables", "sane_lists", "codehilite"]
EXTENSION_CONFIGS = {
    "toc": {"slugify": slugify},
    "codehilite": {"guess_lang": False},
}


def render_markdown(text: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, extension_configs=EXTENSION_CONFIGS)
    return md.convert(text)


def rewrite_markup_links(html_text: str) -> str:
    def repl(match: re.Match) -> str:
        prefix, quote, href = match.groups()
        if not href.endswith(MARKUP_SUFFIX):
            return match.group(0)
        href = href[: -len(MARKUP_SUFFIX)] + PAGE_SUFFIX
        return f"{prefix}{quote}{href}{quote}"

    return HREF_RE.sub(repl, html_text)


def render_template(template: str, **context: str) -> str:
    def repl(match: re.Match) -> str:
        return context.get(match.group(1), match.group(0))

    return TOKEN_RE.sub(repl, template)


def read_template(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_file(source: Path, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, dest)

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

OPEN_MARKER = "---\n"
CLOSE_MARKER = "\n---\n"
EMPTY_BLOCK = OPEN_MARKER + OPEN_MARKER
LIST_MARKER_RE = re.compile(r"^(?P<indent>[ \t]*)(?:[-+*]|\d+[.)])\s+")
LIST_START_RE = re.compile(r"^(?:[-+*]|1[.)])\s+")
FENCE_RE = re.compile(r"^(?P<indent>[ \t]*)(`{3,}|~{3,})")


@dataclass(frozen=True)
class FrontMatter:
    title: Optional[str] = None


def slugify(text: str, separator: str = "-") -> str:
    text = text.lower()
    text = re.sub(r"[^\w]+", separator, text, flags=re.UNICODE)
    text = text.strip("-_").replace("_", separator)
    return text or "section"


def parse_front_matter_fields(block: str) -> dict[str, str]:
    fields = {}
    for line in block.split("\n"):
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        fields[key.strip().lower()] = value.strip()
    return fields


def extract_front_matter(content: str) -> tuple[Optional[FrontMatter], str]:
    if not content.startswith(OPEN_MARKER):
        return None, content

    end = content.find(CLOSE_MARKER, len(OPEN_MARKER))
    if end == -1:
        # "---\n---\n" overlaps the opening marker, so the search above misses it.
        if content.startswith(EMPTY_BLOCK):
            return FrontMatter(), content[len(EMPTY_BLOCK) :]
        return None, content

    fields = parse_front_matter_fields(content[len(OPEN_MARKER) : end])
    body = content[end + len(CLOSE_MARKER) :]
    return FrontMatter(title=fields.get("title")), body


def normalize_list_spacing(text: str) -> str:
    lines = text.split("\n")
    out: list[str] = []
    in_fence = False
    fence_marker = ""
    for line in lines:
        fence_match = FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(2)
            if not in_fence:
                in_fence = True
                fence_marker = marker
            elif marker == fence_marker:
                in_fence = False
                fence_marker = ""
            out.append(line)
            continue
        if in_fence:
            out.append(line)
            continue
        # only bullets and lists numbered 1 may interrupt a paragraph
        if LIST_START_RE.match(line):
            if out and out[-1].strip() and not LIST_MARKER_RE.match(out[-1]):
                out.append("")
        out.append(line)
    return "\n".join(out)

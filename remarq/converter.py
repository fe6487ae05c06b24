from __future__ import annotations

from typing import Optional

from .content import extract_front_matter, normalize_list_spacing
from .errors import ConversionFailure, InvalidTemplate
from .render import render_markdown, render_template, rewrite_markup_links


class DocConverter:
    def __init__(self, template: Optional[str]):
        if not template:
            raise InvalidTemplate("Template cannot be null or empty")
        self.template = template

    def render_body(self, body: str, name: str = "<document>") -> str:
        try:
            html_content = render_markdown(normalize_list_spacing(body))
        except Exception as exc:
            raise ConversionFailure(name, exc) from exc
        return rewrite_markup_links(html_content)

    def convert(self, raw_text: str, fallback_title: str) -> str:
        front_matter, body = extract_front_matter(raw_text)
        html_content = self.render_body(body, fallback_title)
        title = fallback_title
        if front_matter is not None and front_matter.title is not None:
            title = front_matter.title
        return render_template(self.template, TITLE=title, BODY=html_content)

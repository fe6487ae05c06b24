from __future__ import annotations

from pathlib import Path

import pytest

TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>{{TITLE}}</title></head>
<body>{{BODY}}</body>
</html>"""


@pytest.fixture
def template_text() -> str:
    return TEMPLATE


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    path = tmp_path / "template.html"
    path.write_text(TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    return tmp_path / "target"

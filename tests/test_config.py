from __future__ import annotations

import pytest

from remarq.config import config_paths, load_config
from remarq.errors import ConfigError


def test_missing_config_is_empty(tmp_path):
    assert load_config(tmp_path / "remarq.toml") == {}


def test_toml_config(tmp_path):
    path = tmp_path / "remarq.toml"
    path.write_text('source = "notes"\nquiet = true\n', encoding="utf-8")
    assert load_config(path) == {"source": "notes", "quiet": True}


def test_yaml_config(tmp_path):
    path = tmp_path / "remarq.yaml"
    path.write_text("source: notes\ntarget: site\n", encoding="utf-8")
    assert load_config(path) == {"source": "notes", "target": "site"}


def test_empty_yaml_config(tmp_path):
    path = tmp_path / "remarq.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_json_config(tmp_path):
    path = tmp_path / "remarq.json"
    path.write_text('{"template": "page.html"}', encoding="utf-8")
    assert load_config(path) == {"template": "page.html"}


def test_non_mapping_config(tmp_path):
    path = tmp_path / "remarq.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_config_paths_resolve_against_config_dir(tmp_path):
    config_path = tmp_path / "conf" / "remarq.toml"
    paths = config_paths({"source": "notes", "template": str(tmp_path / "t.html")}, config_path)
    assert paths == {
        "source": str(tmp_path.resolve() / "conf" / "notes"),
        "target": "",
        "template": str(tmp_path / "t.html"),
    }


def test_unreadable_config(tmp_path):
    folder = tmp_path / "remarq.toml"
    folder.mkdir()
    with pytest.raises(ConfigError, match="Could not read config file"):
        load_config(folder)


def test_config_with_invalid_utf8(tmp_path):
    path = tmp_path / "remarq.json"
    path.write_bytes(b'{"source": "\xff"}')
    with pytest.raises(ConfigError, match="Could not read config file"):
        load_config(path)

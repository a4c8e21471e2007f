# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from robots_forge.config import RuleSetConfig, load_config
from robots_forge.models import Permission


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"rules{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("rules:\n  - path: /tmp/\n    permission: disallow", ".yaml", None),
        (json.dumps({"rules": [{"path": "/tmp/", "permission": "disallow"}]}), ".json", None),
        ("rules:\n  - path: /tmp/", ".yaml", ValidationError),
        ("rules:\n  - path: /tmp/\n    permission: maybe", ".yaml", ValidationError),
        ("unknown_key: 1", ".yml", ValidationError),
        ("template: typo3", ".yaml", ValidationError),
        ("rules: [\n", ".yaml", ValueError),
        ("{not json", ".json", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("rules: []", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, RuleSetConfig)
        assert cfg.rules[0].permission is Permission.DISALLOW
        assert cfg.rules[0].bot == ["All"]


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("sitemaps: [https://ex.com/s.xml]\n")
    cfg = load_config(None)
    assert cfg.sitemaps == ["https://ex.com/s.xml"]


def test_empty_yaml_gives_empty_ruleset(tmp_path):
    cfg = load_config(write_file(tmp_path, "", ".yaml"))
    assert cfg.to_ruleset().generate() == ""


def test_to_ruleset(ruleset_file):
    rs = load_config(ruleset_file).to_ruleset()
    assert rs.generate() == (
        "User-agent: *\n"
        "Disallow: /private/\n"
        "# private area\n"
        "\n"
        "User-agent: Googlebot\n"
        "Allow: /private/press/\n"
        "\n"
        "Sitemap: https://example.com/sitemap.xml\n"
    )


def test_template_rules_come_first(tmp_path):
    cfg = load_config(
        write_file(
            tmp_path,
            "template: modx\nrules:\n  - {bot: [Googlebot, All], path: /x/, permission: allow}",
            ".yaml",
        )
    )
    rules = cfg.to_ruleset().rules
    assert [r.path for r in rules] == ["/manager/", "/assets/", "/x/"]
    assert rules[-1].bot == ["All"]


def test_blank_path_rejected():
    with pytest.raises(ValidationError):
        RuleSetConfig(rules=[{"path": "   ", "permission": "allow"}])


def test_config_is_frozen(ruleset_file):
    cfg = load_config(ruleset_file)
    with pytest.raises(ValidationError):
        cfg.target_bot = "Googlebot"

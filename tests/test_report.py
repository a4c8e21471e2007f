# File: tests/test_report.py
import json

import pytest

from robots_forge.aggregator import build_report, write_robots_txt
from robots_forge.exceptions import InvalidInputError
from robots_forge.report import render_html, render_json


def test_build_report(ruleset):
    report = build_report(ruleset, ["https://ex.com/search/q", "ex.com/"], "Bingbot")
    assert report.robots_txt == ruleset.generate()
    assert report.is_valid
    assert [c["url"] for c in report.url_checks] == ["https://ex.com/search/q", "ex.com/"]
    assert report.url_checks[0]["results"][0]["outcome"] == "disallowed"
    assert report.url_checks[1]["results"][0]["default"] is True
    assert len(report.rules) == 4


def test_build_report_rejects_bad_url(ruleset):
    with pytest.raises(InvalidInputError):
        build_report(ruleset, ["http://"])


def test_report_json_string(ruleset):
    data = json.loads(build_report(ruleset).json(pretty=True))
    assert set(data) == {"robots_txt", "validation", "rules", "url_checks"}


def test_render_json(ruleset, tmp_path):
    path = render_json(build_report(ruleset), tmp_path / "nested" / "report.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["validation"]["is_valid"] is True
    assert data["rules"][0]["path"] == "/wp-admin/"


def test_render_html_default_template(ruleset, tmp_path):
    ruleset.add_sitemap("ftp://ex.com/s.xml")
    report = build_report(ruleset, ["ex.com/wp-admin/"], "Googlebot")
    path = render_html(report, None, tmp_path / "report.html")
    html = path.read_text(encoding="utf-8")
    assert "robots.txt has errors" in html
    assert "Sitemap URL must start with http:// or https://" in html
    assert "Googlebot: disallowed" in html


def test_render_html_custom_template(ruleset, tmp_path):
    tpl_dir = tmp_path / "tpl"
    tpl_dir.mkdir()
    (tpl_dir / "report.html.j2").write_text("{{ rules | length }} {{ is_valid }}", encoding="utf-8")
    path = render_html(build_report(ruleset), tpl_dir, tmp_path / "r.html")
    assert path.read_text(encoding="utf-8") == "4 True"


def test_write_robots_txt(tmp_path):
    path = write_robots_txt("User-agent: *\nDisallow:\n", tmp_path / "site" / "robots.txt")
    assert path.read_text(encoding="utf-8") == "User-agent: *\nDisallow:\n"

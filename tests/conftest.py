# File: tests/conftest.py
from pathlib import Path
from typing import List

import pytest
import yaml

from robots_forge.models import Permission, RobotRule, Sitemap
from robots_forge.ruleset import RuleSet


@pytest.fixture()
def wordpress_rules() -> List[RobotRule]:
    """
    Rules covering every grouping case: All, several bots, comments, patterns.
    """
    return [
        RobotRule(path="/wp-admin/", permission=Permission.DISALLOW, comment="admin"),
        RobotRule(path="/wp-admin/admin-ajax.php", permission=Permission.ALLOW),
        RobotRule(
            path="/search/",
            permission=Permission.DISALLOW,
            bot=["Googlebot", "Bingbot"],
            comment="internal search",
        ),
        RobotRule(path="/*.pdf$", permission=Permission.DISALLOW, bot=["Googlebot"]),
    ]


@pytest.fixture()
def sitemaps() -> List[Sitemap]:
    return [Sitemap(url="https://ex.com/sitemap.xml"), Sitemap(url="   ")]


@pytest.fixture()
def ruleset(wordpress_rules, sitemaps) -> RuleSet:
    return RuleSet(rules=list(wordpress_rules), sitemaps=list(sitemaps))


@pytest.fixture()
def ruleset_file(tmp_path) -> Path:
    """
    Write a YAML rule-set file and return its path.
    """
    path = tmp_path / "rules.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "rules": [
                    {"path": "/private/", "permission": "disallow", "comment": "private area"},
                    {"bot": "Googlebot", "path": "/private/press/", "permission": "allow"},
                ],
                "sitemaps": ["https://example.com/sitemap.xml"],
            }
        ),
        encoding="utf-8",
    )
    return path

# File: tests/test_evaluator.py
import pytest

from robots_forge.bots import KNOWN_BOTS
from robots_forge.evaluator import (
    DEFAULT_RULE_COMMENT,
    evaluate,
    extract_path,
    is_allowed,
    rules_for_bot,
)
from robots_forge.exceptions import InvalidInputError
from robots_forge.models import Outcome, Permission, RobotRule


def rule(path, permission, bot=("All",), **kw):
    return RobotRule(path=path, permission=Permission(permission), bot=list(bot), **kw)


@pytest.mark.parametrize(
    "url,path",
    [
        ("https://site.com/public/page.html", "/public/page.html"),
        ("site.com/a/b?q=1#frag", "/a/b"),
        ("http://site.com", "/"),
        ("https://site.com:8080/x", "/x"),
        ("  example.com/admin  ", "/admin"),
        ("httpbin.org/robots", "/robots"),
        ("http-docs.example.com/x", "/x"),
    ],
)
def test_extract_path(url, path):
    assert extract_path(url) == path


@pytest.mark.parametrize(
    "url",
    ["", "   ", "http://", "https://exa mple.com/", "https://site.com:port/x", "http://[::1/x", "ftp://site.com/x"],
)
def test_extract_path_rejects_unparseable_urls(url):
    with pytest.raises(InvalidInputError):
        extract_path(url)


def test_invalid_url_is_reported_by_evaluate():
    with pytest.raises(InvalidInputError):
        evaluate([], "https://", "Googlebot")


def test_more_specific_pattern_wins():
    rules = [rule("/", "disallow"), rule("/public/", "allow")]
    results = evaluate(rules, "https://site.com/public/page.html", "All")
    assert results
    assert all(r.outcome is Outcome.ALLOWED for r in results)
    assert all(r.matched_rule is rules[1] for r in results)


def test_all_row_dropped_when_specific_bots_match_same_rule():
    rules = [rule("/", "disallow")]
    results = evaluate(rules, "https://site.com/x", "All")
    assert [r.bot for r in results] == list(KNOWN_BOTS)


def test_all_row_kept_when_it_matches_a_different_rule():
    rules = [rule("/", "disallow"), rule("/x", "allow", bot=KNOWN_BOTS)]
    results = evaluate(rules, "https://site.com/x", "All")
    assert results[0].bot == "All"
    assert results[0].outcome is Outcome.DISALLOWED
    assert all(r.outcome is Outcome.ALLOWED for r in results[1:])


def test_default_allow_for_empty_rules():
    results = evaluate([], "https://site.com/anything", "Googlebot")
    assert len(results) == 1
    result = results[0]
    assert result.bot == "Googlebot"
    assert result.outcome is Outcome.ALLOWED
    assert result.is_default
    assert result.matched_rule.comment == DEFAULT_RULE_COMMENT
    assert result.matched_rule.bot == ["Googlebot"]


def test_default_allow_for_all_bots_has_no_all_row():
    results = evaluate([], "site.com/", "All")
    assert [r.bot for r in results] == list(KNOWN_BOTS)
    assert all(r.is_default for r in results)


def test_bot_specific_rules_only_apply_to_that_bot():
    rules = [rule("/private/", "disallow", bot=["Googlebot"])]
    assert evaluate(rules, "site.com/private/a", "Googlebot")[0].outcome is Outcome.DISALLOWED
    assert evaluate(rules, "site.com/private/a", "Bingbot")[0].outcome is Outcome.ALLOWED


def test_unknown_bot_can_be_evaluated():
    rules = [rule("/", "disallow", bot=["GPTBot"])]
    results = evaluate(rules, "site.com/", "GPTBot")
    assert results[0].outcome is Outcome.DISALLOWED


def test_equal_length_ties_keep_rule_order():
    rules = [rule("/a/", "allow"), rule("/a*", "disallow")]
    assert rules_for_bot(rules, "Googlebot") == rules
    assert evaluate(rules, "site.com/a/b", "Googlebot")[0].outcome is Outcome.ALLOWED


def test_query_string_is_ignored():
    rules = [rule("/*.pdf$", "disallow")]
    assert evaluate(rules, "site.com/doc.pdf?download=1", "Bingbot")[0].allowed is False


def test_is_allowed():
    rules = [rule("/admin", "disallow")]
    assert is_allowed(rules, "site.com/admin/users", "Googlebot") is False
    assert is_allowed(rules, "site.com/administration", "Googlebot") is True


def test_is_allowed_for_all_requires_every_known_bot():
    rules = [rule("/private/", "disallow", bot=["Bingbot"])]
    assert is_allowed(rules, "site.com/private/a", "Googlebot") is True
    assert is_allowed(rules, "site.com/private/a", "All") is False
    assert is_allowed(rules, "site.com/public/a", "All") is True

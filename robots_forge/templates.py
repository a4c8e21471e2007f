# File: robots_forge/templates.py
"""
Ready-made rule sets: basic options, CMS templates and builder quick actions.

Each :class:`Template` stores rule *specs*; :meth:`Template.build_rules`
creates fresh :class:`RobotRule` objects with new ids on every call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from robots_forge.exceptions import TemplateNotFoundError
from robots_forge.models import ALL_BOTS, Permission, RobotRule

GENERAL = "general"
CMS = "cms"
QUICK = "quick"
KINDS: Tuple[str, ...] = (GENERAL, CMS, QUICK)

# (bot, path, permission, comment)
_RuleSpec = Tuple[str, str, Permission, str]

ALLOW = Permission.ALLOW
DISALLOW = Permission.DISALLOW


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    kind: str
    rules: Tuple[_RuleSpec, ...]

    def build_rules(self) -> List[RobotRule]:
        return [
            RobotRule(path=path, permission=permission, bot=[bot], comment=comment)
            for bot, path, permission, comment in self.rules
        ]


# Path presets offered by the rule builder; comma-separated values expand to several rules.
PATH_PRESETS: Dict[str, str] = {
    "All pages": "/",
    "Admin area": "/admin/",
    "Login page": "/login/",
    "Images (jpg, png, gif)": "/*.jpg$, /*.png$, /*.gif$",
    "PDF files": "/*.pdf$",
    "Search results": "/search/",
}


def _crawl_all(bot: str, who: str) -> _RuleSpec:
    return (bot, "/", ALLOW, f"Allow {who} to crawl the entire website")


def _block(bot: str, who: str) -> _RuleSpec:
    return (bot, "/", DISALLOW, f"Prevent {who} from crawling the website")


_BLOCK_OTHERS: _RuleSpec = (ALL_BOTS, "/", DISALLOW, "Prevent all other bots from crawling the website")

_AI_CRAWLERS: Tuple[_RuleSpec, ...] = (
    _block("GPTBot", "OpenAI's GPTBot"),
    _block("Claude-Web", "Anthropic's Claude-Web"),
    _block("Google-Extended", "Google's AI crawler"),
    _block("CCBot", "Common Crawl bot"),
)

_GOOGLE_SPECIALISTS = ("Googlebot-Image", "Googlebot-Mobile", "Googlebot-News", "Googlebot-Video")

_TEMPLATES: Tuple[Template, ...] = (
    Template(
        "allow-everything",
        "Allow everything",
        "This option allows all bots to crawl your entire website without restrictions.",
        GENERAL,
        ((ALL_BOTS, "/", ALLOW, "Allow all bots to crawl the entire website"),),
    ),
    Template(
        "disallow-website-crawl",
        "Disallow a website to crawl",
        "This option prevents all bots from crawling any part of your website.",
        GENERAL,
        ((ALL_BOTS, "/", DISALLOW, "Prevent all bots from crawling the website"),),
    ),
    Template(
        "allow-google-only",
        "Allow everything for Google only",
        "Only Googlebot may crawl the website; every other bot is blocked.",
        GENERAL,
        (_crawl_all("Googlebot", "Googlebot"), _BLOCK_OTHERS),
    ),
    Template(
        "allow-major-search-engines",
        "Allow major international search engines only",
        "Google, Bing, Yahoo, Baidu and Naver may crawl; every other bot is blocked.",
        GENERAL,
        (
            _crawl_all("Googlebot", "Google"),
            _crawl_all("Bingbot", "Bing"),
            _crawl_all("Slurp", "Yahoo"),
            _crawl_all("Baiduspider", "Baidu"),
            _crawl_all("Yeti", "Naver"),
            _BLOCK_OTHERS,
        ),
    ),
    Template(
        "allow-search-block-ai",
        "Allow search engines, block AI crawlers",
        "Search engines may crawl the website while AI training crawlers are blocked.",
        GENERAL,
        (
            _crawl_all("Googlebot", "Google"),
            _crawl_all("Bingbot", "Bing"),
            _crawl_all("Slurp", "Yahoo"),
            *_AI_CRAWLERS,
        ),
    ),
    Template(
        "disallow-common-bots",
        "Disallow everything for most commonly blocked bots",
        "Blocks the SEO crawlers site owners most often turn away.",
        GENERAL,
        (
            _block("MJ12bot", "MJ12bot"),
            _block("AhrefsBot", "AhrefsBot"),
            _block("SemrushBot", "SemrushBot"),
        ),
    ),
    Template(
        "block-ai-llm-crawlers",
        "Block all AI/LLM crawlers",
        "Blocks crawlers that collect content for AI and LLM training.",
        GENERAL,
        (
            *_AI_CRAWLERS,
            _block("Cohere-crawler", "Cohere's crawler"),
            _block("anthropic-ai", "alternative Anthropic crawler"),
        ),
    ),
    Template(
        "disallow-google-except-main",
        "Disallow for all Google bots, except Google",
        "This option blocks all Google-specific bots (e.g., Googlebot-Image, Googlebot-News) "
        "except the main Googlebot.",
        GENERAL,
        tuple(_block(bot, bot) for bot in _GOOGLE_SPECIALISTS),
    ),
    Template(
        "allow-all-google-bots",
        "Allow for all Google bots",
        "This option allows all Google bots (including Googlebot, Googlebot-Image, etc.) "
        "to crawl your website.",
        GENERAL,
        tuple(_crawl_all(bot, bot) for bot in ("Googlebot", *_GOOGLE_SPECIALISTS)),
    ),
    Template(
        "wordpress",
        "robots.txt for WordPress",
        "Keeps bots out of the WordPress admin and core includes.",
        CMS,
        (
            (ALL_BOTS, "/wp-admin/", DISALLOW, "Prevent bots from accessing WordPress admin"),
            (ALL_BOTS, "/wp-admin/admin-ajax.php", ALLOW, "Allow AJAX functionality"),
            (ALL_BOTS, "/wp-includes/", DISALLOW, "Prevent bots from accessing WordPress includes"),
        ),
    ),
    Template(
        "joomla",
        "robots.txt for Joomla",
        "Keeps bots out of the Joomla administrator, cache and temporary files.",
        CMS,
        (
            (ALL_BOTS, "/administrator/", DISALLOW, "Prevent bots from accessing Joomla admin"),
            (ALL_BOTS, "/cache/", DISALLOW, "Prevent bots from accessing cache"),
            (ALL_BOTS, "/tmp/", DISALLOW, "Prevent bots from accessing temporary files"),
        ),
    ),
    Template(
        "modx",
        "robots.txt for MODX",
        "Keeps bots out of the MODX manager and assets.",
        CMS,
        (
            (ALL_BOTS, "/manager/", DISALLOW, "Prevent bots from accessing MODX manager"),
            (ALL_BOTS, "/assets/", DISALLOW, "Prevent bots from accessing assets"),
        ),
    ),
    Template(
        "drupal",
        "robots.txt for Drupal",
        "Keeps bots out of the Drupal admin and uploaded files.",
        CMS,
        (
            (ALL_BOTS, "/admin/", DISALLOW, "Prevent bots from accessing Drupal admin"),
            (ALL_BOTS, "/sites/default/files/", DISALLOW, "Prevent bots from accessing uploaded files"),
        ),
    ),
    Template(
        "magento",
        "robots.txt for Magento",
        "Keeps bots out of the Magento admin, downloader and var directory.",
        CMS,
        (
            (ALL_BOTS, "/admin/", DISALLOW, "Prevent bots from accessing Magento admin"),
            (ALL_BOTS, "/downloader/", DISALLOW, "Prevent bots from accessing downloader"),
            (ALL_BOTS, "/var/", DISALLOW, "Prevent bots from accessing var directory"),
        ),
    ),
    Template(
        "opencart",
        "robots.txt for OpenCart",
        "Keeps bots out of the OpenCart admin and system directory.",
        CMS,
        (
            (ALL_BOTS, "/admin/", DISALLOW, "Prevent bots from accessing OpenCart admin"),
            (ALL_BOTS, "/system/", DISALLOW, "Prevent bots from accessing system directory"),
        ),
    ),
    Template(
        "woocommerce",
        "robots.txt for WooCommerce",
        "Keeps bots out of the WordPress admin, cart and checkout.",
        CMS,
        (
            (ALL_BOTS, "/wp-admin/", DISALLOW, "Prevent bots from accessing WordPress admin"),
            (ALL_BOTS, "/cart/", DISALLOW, "Prevent bots from accessing cart"),
            (ALL_BOTS, "/checkout/", DISALLOW, "Prevent bots from accessing checkout"),
        ),
    ),
    Template(
        "essential-files",
        "Essential files",
        "Blocks admin, includes, plugin files and the REST API.",
        QUICK,
        (
            (ALL_BOTS, "/wp-admin/", DISALLOW, "Prevent access to admin area"),
            (ALL_BOTS, "/wp-includes/", DISALLOW, "Prevent access to includes files"),
            (ALL_BOTS, "/wp-content/plugins/", DISALLOW, "Prevent access to plugin files"),
            (ALL_BOTS, "/wp-json/", DISALLOW, "Prevent access to REST API"),
        ),
    ),
    Template(
        "block-images",
        "Block images",
        "Prevents indexing of common image formats.",
        QUICK,
        tuple(
            (ALL_BOTS, f"/*.{ext}$", DISALLOW, f"Prevent indexing of {label} images")
            for ext, label in (
                ("jpg", "JPG"),
                ("jpeg", "JPEG"),
                ("png", "PNG"),
                ("gif", "GIF"),
                ("webp", "WebP"),
            )
        ),
    ),
)

TEMPLATES: Dict[str, Template] = {template.id: template for template in _TEMPLATES}


def get_template(template_id: str) -> Template:
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise TemplateNotFoundError(template_id) from None


def list_templates(kind: Optional[str] = None) -> List[Template]:
    """All templates in declaration order, optionally limited to one *kind*."""
    return [t for t in _TEMPLATES if kind is None or t.kind == kind]


__all__ = [
    "CMS",
    "GENERAL",
    "KINDS",
    "PATH_PRESETS",
    "QUICK",
    "TEMPLATES",
    "Template",
    "get_template",
    "list_templates",
]
